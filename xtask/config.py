from enum import Enum


class Compiler:
    CARGO_PATH = "cargo"                # Rust Compiler

class Binutils:
    RUST_OBJCOPY_PATH = "rust-objcopy"  # from cargo-binutils

class QEMU:
    QEMU_PREFIX = "qemu-system-"        # + arch key


QEMU_MEMORY = "128M"
QEMU_SMP = "1"

CARGO_FEATURES = "axstd"
APP_NAME = "arceos-readblk"

DISK_IMG_SIZE = 0x0400_0000  # 64MB
SECTOR_SIZE = 512
OEM_ID = b"mkfs.fat"


class BuildTarget(Enum):
    RISCV64 = "riscv64"
    AARCH64 = "aarch64"
    X86_64 = "x86_64"
    LOONGARCH64 = "loongarch64"


# Architecture specific settings
ARCH_CONFIG = {
    "riscv64": {
        "rust_target": "riscv64gc-unknown-none-elf",
        "platform": "riscv64-qemu-virt",
        "objcopy_arch": "riscv64",
        "qemu_machine": "virt",
        "qemu_cpu": None,
        "qemu_bios": "default",
        "raw_kernel": True,
    },
    "aarch64": {
        "rust_target": "aarch64-unknown-none-softfloat",
        "platform": "aarch64-qemu-virt",
        "objcopy_arch": "aarch64",
        "qemu_machine": "virt",
        "qemu_cpu": "cortex-a72",
        "qemu_bios": None,
        "raw_kernel": True,
    },
    "x86_64": {
        "rust_target": "x86_64-unknown-none",
        "platform": "x86-pc",
        "objcopy_arch": "x86_64",
        "qemu_machine": "q35",
        "qemu_cpu": None,
        "qemu_bios": None,
        "raw_kernel": False,    # QEMU loads the ELF directly
    },
    "loongarch64": {
        "rust_target": "loongarch64-unknown-none",
        "platform": "loongarch64-qemu-virt",
        "objcopy_arch": "loongarch64",
        "qemu_machine": "virt",
        "qemu_cpu": None,
        "qemu_bios": None,
        "raw_kernel": True,
    },
}

SUPPORTED_ARCHS = ", ".join(t.value for t in BuildTarget)


class UnsupportedArchError(ValueError):
    def __init__(self, arch: str):
        super().__init__(f"unsupported architecture '{arch}'. Supported: {SUPPORTED_ARCHS}")
        self.arch = arch


def str2bt(arch: str) -> BuildTarget:
    try:
        return BuildTarget(arch)
    except ValueError:
        raise UnsupportedArchError(arch) from None


def arch_info(arch: str) -> dict:
    """Return the ARCH_CONFIG entry for `arch`; raises UnsupportedArchError."""
    return ARCH_CONFIG[str2bt(arch).value]
