import re
from pathlib import Path

from luarocks_setup import config
from luarocks_setup.utility import render

_VERSION = re.compile(r"^Lua (\d+\.\d+)\b")

VERSION_SCRIPT = "print(_VERSION)"

MSVCRT_SCRIPT = (
    "local pe = assert(loadfile([[{{ pe_parser }}]]))(); "
    "local rt, _ = pe.msvcrt([[{{ lua_exe }}]]); "
    "print(rt or 'nil')"
)


class LuaVersionError(ValueError):
    pass


def parse_lua_version(output: str) -> str:
    """Return the ``X.Y`` part of a ``_VERSION`` string such as ``Lua 5.4``."""
    text = output.strip()
    if match := _VERSION.match(text):
        return match.group(1)
    raise LuaVersionError(f"Unexpected Lua version string: {text!r}")


def pe_parser_dir(build_dir: Path) -> Path:
    return build_dir / f"pe-parser-version_{config.PE_PARSER_VERSION}"


def msvcrt_script(pe_parser: Path, lua_exe: Path) -> str:
    return render(MSVCRT_SCRIPT, pe_parser=pe_parser, lua_exe=lua_exe)


def runtime_tag(answer: str) -> str:
    # pe-parser reports "MSVCRT" for the legacy msvcrt.dll; anything else
    # (UCRT, nil, unknown) leaves the LuaRocks default alone
    return "m" if answer.strip() == "MSVCRT" else ""
