import subprocess

import pytest

from xtask import config as Config


class Recorder:
    """Stands in for subprocess.run and remembers every command it was given."""

    def __init__(self):
        self.calls = []
        self.kwargs = []
        self.returncodes = {}
        self.missing = set()

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        self.kwargs.append(kwargs)
        if cmd[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        return subprocess.CompletedProcess(cmd, self.returncodes.get(cmd[0], 0))

    def programs(self):
        return [c[0] for c in self.calls]

    def find(self, program):
        return [c for c in self.calls if c[0] == program]


@pytest.fixture
def recorder(monkeypatch):
    rec = Recorder()
    monkeypatch.setattr(subprocess, "run", rec)
    return rec


@pytest.fixture
def project_root(tmp_path):
    configs = tmp_path / "configs"
    configs.mkdir()
    for target in Config.BuildTarget:
        (configs / f"{target.value}.toml").write_text(f"arch = \"{target.value}\"\n")
    (tmp_path / "Cargo.toml").write_text("[package]\nname = \"arceos-readblk\"\n")
    return tmp_path
