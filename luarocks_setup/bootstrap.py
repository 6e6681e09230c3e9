from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from luarocks_setup import environment
from luarocks_setup.capabilities import Capabilities
from luarocks_setup.environment import EnvironmentPatch
from luarocks_setup.installers import Installer, select_installer
from luarocks_setup.paths import Paths


@dataclass(frozen=True)
class Inputs:
    luarocks_version: str
    with_lua_path: Optional[str] = None


def bootstrap(
    inputs: Inputs,
    caps: Capabilities,
    cwd: Optional[Path] = None,
    installer: Optional[type[Installer]] = None,
) -> EnvironmentPatch:
    """Install LuaRocks and return the environment changes later steps need.

    Nothing here touches the ambient environment; the caller decides when to
    apply the returned patch.
    """
    paths = Paths.resolve(cwd or Path.cwd(), inputs.with_lua_path)
    caps.mkdir(paths.build)

    selected = installer(caps, paths) if installer else select_installer(caps, paths)
    print(f"Installing LuaRocks {inputs.luarocks_version} ({selected.name}) into '{paths.luarocks}'...")
    selected.install(inputs.luarocks_version)

    return environment.query(caps, selected.executable(), paths.luarocks_bin)
