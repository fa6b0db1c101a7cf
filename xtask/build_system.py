from colorama import Fore
import click
import os
import shutil
import subprocess
import sys

from . import config as Config


def abort(message: str, code: int = 1):
    click.echo(Fore.RED + f"Error: {message}", err=True)
    sys.exit(code)


def checkResult(result: subprocess.CompletedProcess, step: str):
    if result.returncode != 0:
        # negative return codes mean the child was killed by a signal
        code = result.returncode if result.returncode > 0 else 1
        abort(f"{step} failed", code)


def spawn(cmd: list[str], step: str, hint: str = "", **kwargs) -> subprocess.CompletedProcess:
    """Run `cmd` with the parent's stdio and wait for it to exit."""
    try:
        return subprocess.run(cmd, **kwargs)
    except OSError as e:
        abort(f"failed to execute {step}{hint}: {e}")


class XtaskBuildSystem:
    def __init__(self, root_dir: str = None):
        if root_dir is None:
            root_dir = os.path.join(os.path.dirname(__file__), "..")
        self.root_dir = os.path.abspath(root_dir)
        self.configs_dir = os.path.join(self.root_dir, "configs")
        self.config_dst = os.path.join(self.root_dir, ".axconfig.toml")
        self.manifest = os.path.join(self.root_dir, "Cargo.toml")
        self.target_dir = os.path.join(self.root_dir, "target")
        self.disk_img = os.path.join(self.target_dir, "disk.img")

    def config_src(self, arch: str) -> str:
        return os.path.join(self.configs_dir, f"{arch}.toml")

    def elf_path(self, arch: str) -> str:
        info = Config.arch_info(arch)
        return os.path.join(self.target_dir, info["rust_target"], "release", Config.APP_NAME)

    def bin_path(self, arch: str) -> str:
        return os.path.splitext(self.elf_path(arch))[0] + ".bin"

    def install_config(self, arch: str):
        src = self.config_src(arch)
        if not os.path.exists(src):
            abort(f"config file not found: {src}")
        try:
            shutil.copyfile(src, self.config_dst)
        except OSError as e:
            abort(f"failed to copy {src} -> {self.config_dst}: {e}")
        click.echo(f"Installed config: {src} -> .axconfig.toml")

    def build(self, arch: str):
        info = Config.arch_info(arch)
        result = spawn(
            [
                Config.Compiler.CARGO_PATH,
                "build",
                "--release",
                "--target", info["rust_target"],
                "--features", Config.CARGO_FEATURES,
                "--manifest-path", self.manifest,
            ],
            "cargo build",
            cwd=self.root_dir,
        )
        checkResult(result, "cargo build")

    def objcopy(self, elf: str, bin: str, objcopy_arch: str):
        result = spawn(
            [
                Config.Binutils.RUST_OBJCOPY_PATH,
                f"--binary-architecture={objcopy_arch}",
                elf,
                "--strip-all",
                "-O", "binary",
                bin,
            ],
            "rust-objcopy",
            hint=" (install with: cargo install cargo-binutils)",
        )
        checkResult(result, "rust-objcopy")
