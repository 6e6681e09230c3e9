from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import MutableMapping
import uuid

from luarocks_setup.capabilities import Capabilities

# keeps the interpreter's built-in search locations after the LuaRocks ones
DEFAULT_PATHS_MARKER = ";;"


@dataclass
class EnvironmentPatch:
    paths: list[Path] = field(default_factory=list)
    variables: dict[str, str] = field(default_factory=dict)


def query(caps: Capabilities, luarocks: Path, install_bin: Path) -> EnvironmentPatch:
    """Ask the freshly installed LuaRocks for its own search configuration."""
    lr_bin = caps.output([str(luarocks), "path", "--lr-bin"]).strip()
    lr_path = caps.output([str(luarocks), "path", "--lr-path"]).strip()
    lr_cpath = caps.output([str(luarocks), "path", "--lr-cpath"]).strip()

    patch = EnvironmentPatch(paths=[install_bin])
    if lr_bin:
        patch.paths.append(Path(lr_bin))
    if lr_path:
        patch.variables["LUA_PATH"] = DEFAULT_PATHS_MARKER + lr_path
    if lr_cpath:
        patch.variables["LUA_CPATH"] = DEFAULT_PATHS_MARKER + lr_cpath
    return patch


def apply(patch: EnvironmentPatch, environ: MutableMapping[str, str] = os.environ) -> None:
    """Publish ``patch`` to this process and to the runner's propagation files.

    Every path is prepended to PATH in order, so the last one ends up first.
    When GITHUB_PATH and GITHUB_ENV point at files, the same changes are
    appended there so that later steps of the job see them.
    """
    for path in patch.paths:
        current = environ.get("PATH")
        environ["PATH"] = f"{path}{os.pathsep}{current}" if current else str(path)
    environ.update(patch.variables)

    if github_path := environ.get("GITHUB_PATH"):
        with Path(github_path).open("a", encoding="utf-8") as f:
            for path in patch.paths:
                f.write(f"{path}\n")

    if github_env := environ.get("GITHUB_ENV"):
        with Path(github_env).open("a", encoding="utf-8") as f:
            for name, value in patch.variables.items():
                f.write(_env_command(name, value))


def _env_command(name: str, value: str) -> str:
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
