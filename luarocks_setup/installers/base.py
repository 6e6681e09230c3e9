from pathlib import Path

from luarocks_setup.capabilities import Capabilities
from luarocks_setup.paths import Paths
from luarocks_setup.version import Source


class Installer:
    name: str
    suffix = ""

    def __init__(self, caps: Capabilities, paths: Paths) -> None:
        self.caps = caps
        self.paths = paths

    def resolve(self, spec: str) -> Source:
        raise NotImplementedError

    def install(self, spec: str) -> None:
        raise NotImplementedError

    def fetch(self, source: Source) -> None:
        archive = self.caps.download(source.url, self.paths.build / source.archive)
        self.caps.extract(archive, self.paths.build)

    def executable(self, name: str = "luarocks") -> Path:
        return self.paths.luarocks_bin / f"{name}{self.suffix}"

    @property
    def lua_exe(self) -> Path:
        return self.paths.lua / "bin" / f"lua{self.suffix}"

    def luarocks(self, *args: str) -> list[str]:
        return [str(self.executable()), *args]
