"""Shared pytest fixtures."""

from pathlib import Path
from typing import Optional

import pytest

from luarocks_setup.capabilities import Capabilities
from luarocks_setup.paths import Paths


class RecordingCapabilities(Capabilities):
    """Records every primitive call instead of performing it.

    ``outputs`` maps a command fragment to the stdout returned by ``output``
    for any command containing that fragment.
    """

    def __init__(self, outputs: Optional[dict[str, str]] = None) -> None:
        super().__init__(progress=False)
        self.outputs = outputs or {}
        self.calls: list[tuple] = []

    @property
    def commands(self) -> list[list[str]]:
        return [call[1] for call in self.calls if call[0] in ("run", "output")]

    @property
    def downloads(self) -> list[str]:
        return [call[1] for call in self.calls if call[0] == "download"]

    def download(self, url: str, out_path: Path) -> Path:
        self.calls.append(("download", url, out_path))
        return out_path

    def extract(self, archive: Path, out_path: Path) -> None:
        self.calls.append(("extract", archive, out_path))

    def mkdir(self, path: Path) -> None:
        self.calls.append(("mkdir", path))

    def copy(self, source: Path, dest: Path) -> None:
        self.calls.append(("copy", source, dest))

    def run(self, cmd: list[str], cwd: Optional[Path] = None) -> None:
        self.calls.append(("run", cmd, cwd))

    def output(self, cmd: list[str], cwd: Optional[Path] = None) -> str:
        self.calls.append(("output", cmd, cwd))
        joined = " ".join(cmd)
        return next((out for fragment, out in self.outputs.items() if fragment in joined), "")


LUAROCKS_PATHS = {
    "--lr-bin": "/home/runner/.luarocks/bin\n",
    "--lr-path": "/home/runner/.luarocks/share/lua/5.4/?.lua\n",
    "--lr-cpath": "/home/runner/.luarocks/lib/lua/5.4/?.so\n",
}


@pytest.fixture
def caps() -> RecordingCapabilities:
    return RecordingCapabilities(dict(LUAROCKS_PATHS))


@pytest.fixture
def paths(tmp_path: Path) -> Paths:
    return Paths.resolve(tmp_path / "work", temp_root=tmp_path / "temp")


@pytest.fixture(autouse=True)
def _no_runner_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["GITHUB_ACTIONS", "GITHUB_PATH", "GITHUB_ENV", "VCINSTALLDIR", "RUNNER_TEMP"]:
        monkeypatch.delenv(name, raising=False)
    for name in ["INPUT_LUAROCKSVERSION", "INPUT_WITHLUAPATH"]:
        monkeypatch.delenv(name, raising=False)
