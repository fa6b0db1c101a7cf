import click
import os
import struct

from . import config as Config
from .build_system import abort


def boot_sector() -> bytes:
    """Build the 512-byte FAT-like boot sector written at offset 0 of the disk.

    - Bytes 0..3: JMP SHORT 0x3C; NOP
    - Bytes 3..11: OEM ID "mkfs.fat", read back by the kernel to check block I/O
    - Bytes 11..13: bytes per sector (little-endian)

    Every other BPB field stays zero.
    """
    sector = bytearray(Config.SECTOR_SIZE)
    sector[0:3] = b"\xEB\x3C\x90"
    sector[3:11] = Config.OEM_ID
    struct.pack_into("<H", sector, 11, Config.SECTOR_SIZE)
    return bytes(sector)


def create_disk_image(path: str):
    sector = boot_sector()
    try:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "wb") as f:
            f.write(sector)
            # sparse where the filesystem allows it
            f.truncate(Config.DISK_IMG_SIZE)
    except OSError as e:
        abort(f"failed to create disk image {path}: {e}")
    click.echo(f"Created disk image: {path} ({Config.DISK_IMG_SIZE // (1024 * 1024)}MB)")
