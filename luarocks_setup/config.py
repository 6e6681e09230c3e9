import os
from pathlib import Path
import tempfile

BUILD_PREFIX = ".build-luarocks"
LUA_PREFIX = ".lua"
LUAROCKS_PREFIX = ".luarocks"

DEFAULT_BRANCH = "master"
REF_SIGIL = "@"

# https://github.com/Tieske/pe-parser
PE_PARSER_VERSION = "0.6"

MINGW_COMPILER = "x86_64-w64-mingw32-gcc"
# LuaRocks detects the MinGW compiler by itself starting with this release
MINGW_AUTODETECT_VERSION = "3.9.2"

NATIVE_TOOLCHAIN_MARKER = "VCINSTALLDIR"

releases_url = os.getenv("LUAROCKS_SETUP_RELEASES_URL", "https://luarocks.org/releases")
repo_url = os.getenv("LUAROCKS_SETUP_REPO_URL", "https://github.com/luarocks/luarocks")
pe_parser_url = os.getenv("LUAROCKS_SETUP_PE_PARSER_URL", "https://github.com/Tieske/pe-parser")

release_archive = "luarocks-{{ version }}{{ suffix }}"
release_url = "{{ releases_url }}/{{ archive }}"
ref_url = "{{ repo_url }}/archive/{{ ref }}.tar.gz"
pe_parser_archive_url = "{{ pe_parser_url }}/archive/refs/tags/version_{{ version }}.tar.gz"


def temp_root() -> Path:
    return Path(os.getenv("RUNNER_TEMP") or tempfile.gettempdir())


def uses_native_toolchain(environ=os.environ) -> bool:
    """Guess whether the job runs inside a Visual Studio developer environment.

    The Visual Studio command prompt always exports VCINSTALLDIR. Its absence is
    taken to mean a MinGW toolchain is in use, which is only a heuristic: a
    runner may have both toolchains, or neither.
    """
    return bool(environ.get(NATIVE_TOOLCHAIN_MARKER))
