from pathlib import Path
import shutil
from typing import Optional

from luarocks_setup import utility


class Capabilities:
    """Side-effecting primitives the installers are built from.

    Installers never touch the network, the filesystem or child processes
    directly; they go through an instance of this class so a run can be
    replayed against a recording double.
    """

    def __init__(self, progress: bool = True) -> None:
        self.progress = progress

    def download(self, url: str, out_path: Path) -> Path:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        utility.download_file(url, out_path, progress=self.progress)
        return out_path

    def extract(self, archive: Path, out_path: Path) -> None:
        utility.extract_file(archive, out_path)

    def mkdir(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def copy(self, source: Path, dest: Path) -> None:
        shutil.copyfile(source, dest)

    def run(self, cmd: list[str], cwd: Optional[Path] = None) -> None:
        utility.run(cmd, cwd=cwd)

    def output(self, cmd: list[str], cwd: Optional[Path] = None) -> str:
        return utility.run(cmd, cwd=cwd, capture=True)
