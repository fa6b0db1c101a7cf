import click

from . import config as Config
from .build_system import checkResult, spawn


def qemu_command(arch: str, elf: str, bin: str, disk: str) -> list[str]:
    target = Config.str2bt(arch)
    arch_config = Config.ARCH_CONFIG[target.value]

    cmd = [
        Config.QEMU.QEMU_PREFIX + target.value,
        "-m", Config.QEMU_MEMORY,
        "-smp", Config.QEMU_SMP,
        "-nographic",
    ]

    # CPU/machine
    if arch_config["qemu_cpu"]:
        cmd.extend(["-cpu", arch_config["qemu_cpu"]])
    cmd.extend(["-machine", arch_config["qemu_machine"]])

    # firmware
    if arch_config["qemu_bios"]:
        cmd.extend(["-bios", arch_config["qemu_bios"]])

    cmd.extend(["-kernel", bin if arch_config["raw_kernel"] else elf])

    # VirtIO PCI block device
    cmd.extend(["-drive", f"file={disk},format=raw,if=none,id=disk0"])
    cmd.extend(["-device", "virtio-blk-pci,drive=disk0"])
    return cmd


def run(arch: str, elf: str, bin: str, disk: str):
    cmd = qemu_command(arch, elf, bin, disk)
    click.echo(f"Running: {' '.join(cmd)}")
    result = spawn(cmd, cmd[0])
    checkResult(result, cmd[0])
