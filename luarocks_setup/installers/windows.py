from luarocks_setup import config
from luarocks_setup.installers.base import Installer
from luarocks_setup.lua import VERSION_SCRIPT, msvcrt_script, parse_lua_version, pe_parser_dir, runtime_tag
from luarocks_setup.utility import render
from luarocks_setup.version import Source, older_than, resolve_windows

EXECUTABLES = ["luarocks", "luarocks-admin"]


class WindowsInstaller(Installer):
    name = "windows"
    suffix = ".exe"

    def resolve(self, spec: str) -> Source:
        return resolve_windows(spec)

    def install(self, spec: str) -> None:
        source = self.resolve(spec)
        self.fetch(source)

        src_dir = self.paths.build / source.directory
        self.caps.mkdir(self.paths.luarocks_bin)
        for name in EXECUTABLES:
            self.caps.copy(src_dir / f"{name}{self.suffix}", self.executable(name))

        lua_version = parse_lua_version(self.caps.output(["lua", "-e", VERSION_SCRIPT]))
        self.caps.run(self.luarocks("config", "lua_version", lua_version))
        self.caps.run(self.luarocks("config", "LUA_LIBDIR", str(self.paths.lua_libdir)))

        if not config.uses_native_toolchain():
            self.configure_mingw(source.version)

    def configure_mingw(self, version: str) -> None:
        if older_than(version, config.MINGW_AUTODETECT_VERSION):
            self.caps.run(self.luarocks("config", "variables.CC", config.MINGW_COMPILER))
            self.caps.run(self.luarocks("config", "variables.LD", config.MINGW_COMPILER))

        tag = self.detect_runtime()
        if tag:
            self.caps.run(self.luarocks("config", "variables.MSVCRT", tag))

    def detect_runtime(self) -> str:
        url = render(config.pe_parser_archive_url, pe_parser_url=config.pe_parser_url, version=config.PE_PARSER_VERSION)
        archive = self.caps.download(url, self.paths.build / f"pe-parser-{config.PE_PARSER_VERSION}.tar.gz")
        self.caps.extract(archive, self.paths.build)

        pe_parser = pe_parser_dir(self.paths.build) / "src" / "pe-parser.lua"
        answer = self.caps.output(["lua", "-e", msvcrt_script(pe_parser, self.lua_exe)])
        return runtime_tag(answer)
