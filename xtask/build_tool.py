from colorama import init
import click

from . import build_system as _build
from . import config as Config
from . import img as _img
from . import run as _run


init(autoreset=True)


def resolve(arch: str) -> dict:
    try:
        return Config.arch_info(arch)
    except Config.UnsupportedArchError as e:
        _build.abort(str(e))


def prepare(ctx: click.Context, arch: str) -> tuple[_build.XtaskBuildSystem, dict]:
    build_system = ctx.obj
    info = resolve(arch)
    build_system.install_config(arch)
    build_system.build(arch)
    return build_system, info


@click.group(help="Build and run arceos-readblk on different architectures")
@click.option('--root', envvar='XTASK_ROOT', default=None,
              type=click.Path(file_okay=False), help='Project root (default: parent of this package)')
@click.pass_context
def main(ctx, root):
    ctx.obj = _build.XtaskBuildSystem(root)


@main.command()
@click.option('--arch', default='riscv64', show_default=True,
              help=f'Target architecture: {Config.SUPPORTED_ARCHS}')
@click.pass_context
def build(ctx, arch):
    """Build the kernel for a given architecture."""
    _, info = prepare(ctx, arch)
    click.echo(f"Build complete for {arch} ({info['rust_target']})")


@main.command()
@click.option('--arch', default='riscv64', show_default=True,
              help=f'Target architecture: {Config.SUPPORTED_ARCHS}')
@click.pass_context
def run(ctx, arch):
    """Build and run the kernel in QEMU."""
    build_system, info = prepare(ctx, arch)

    elf = build_system.elf_path(arch)
    bin = build_system.bin_path(arch)

    _img.create_disk_image(build_system.disk_img)

    if info["raw_kernel"]:
        build_system.objcopy(elf, bin, info["objcopy_arch"])

    _run.run(arch, elf, bin, build_system.disk_img)


if __name__ == "__main__":
    main()
