from luarocks_setup.capabilities import Capabilities
from luarocks_setup.installers.base import Installer
from luarocks_setup.installers.unix import UnixInstaller
from luarocks_setup.installers.windows import WindowsInstaller
from luarocks_setup.paths import Paths
from luarocks_setup.utility import select_by_os

__all__ = [
    "Installer",
    "UnixInstaller",
    "WindowsInstaller",
    "select_installer",
]


def select_installer(caps: Capabilities, paths: Paths) -> Installer:
    installer = select_by_os(unix=UnixInstaller, windows=WindowsInstaller)
    return installer(caps, paths)
