from luarocks_setup.installers.base import Installer
from luarocks_setup.version import Source, is_legacy, resolve_unix


class UnixInstaller(Installer):
    name = "unix"

    def resolve(self, spec: str) -> Source:
        return resolve_unix(spec)

    def install(self, spec: str) -> None:
        source = self.resolve(spec)
        self.fetch(source)

        src_dir = self.paths.build / source.directory
        self.caps.run(
            ["./configure", f"--with-lua={self.paths.lua}", f"--prefix={self.paths.luarocks}"],
            cwd=src_dir,
        )
        self.caps.run(["make"], cwd=src_dir)
        # LuaRocks 3 builds everything in the default target
        if is_legacy(source.version):
            self.caps.run(["make", "build"], cwd=src_dir)
        self.caps.run(["make", "install"], cwd=src_dir)
