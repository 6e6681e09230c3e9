from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from luarocks_setup import config


@dataclass(frozen=True)
class Paths:
    build: Path
    luarocks: Path
    lua: Path

    @classmethod
    def resolve(cls, cwd: Path, lua: Optional[str] = None, temp_root: Optional[Path] = None) -> "Paths":
        return cls(
            build=(temp_root or config.temp_root()) / config.BUILD_PREFIX,
            luarocks=cwd / config.LUAROCKS_PREFIX,
            # default location used by the leafo/gh-actions-lua action
            lua=cwd / lua if lua else cwd / config.LUA_PREFIX,
        )

    @property
    def luarocks_bin(self) -> Path:
        return self.luarocks / "bin"

    @property
    def lua_libdir(self) -> Path:
        return self.lua / "lib"
