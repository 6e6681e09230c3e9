import argparse
import os
from pathlib import Path
import sys
from typing import Any, Optional

import argcomplete
from argcomplete.completers import ChoicesCompleter
import yaml

from luarocks_setup import environment
from luarocks_setup.bootstrap import Inputs, bootstrap
from luarocks_setup.capabilities import Capabilities

_VERSION_HINTS = ["2.4.4", "3.8.0", "3.9.2", "3.10.0", "3.11.1", "3.12.2", "@", "@master"]


class ConfigError(ValueError):
    pass


def _input(name: str, args: Any, file_config: dict[str, Any]) -> Optional[str]:
    if (value := getattr(args, name)) is not None:
        return value
    action_name = {"luarocks_version": "luaRocksVersion", "with_lua_path": "withLuaPath"}[name]
    if value := os.getenv(f"INPUT_{action_name.upper()}", "").strip():
        return value
    value = file_config.get(action_name)
    return str(value) if value is not None else None


def load_inputs(args: Any) -> Inputs:
    file_config: dict[str, Any] = {}
    if args.config:
        file_config = yaml.safe_load(Path(args.config).read_text(encoding="utf-8")) or {}
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file '{args.config}' must contain a mapping")

    version = _input("luarocks_version", args, file_config)
    if not version:
        raise ConfigError("Input required and not supplied: luaRocksVersion")
    return Inputs(luarocks_version=version, with_lua_path=_input("with_lua_path", args, file_config) or None)


def report_failure(e: Exception) -> None:
    message = f"Failed to install LuaRocks: {e}"
    if os.getenv("GITHUB_ACTIONS") == "true":
        print(f"::error::{message}")
    else:
        print(f"{Path(sys.argv[0]).name}: {message}", file=sys.stderr)


def main(argv: Optional[list[str]] = None) -> int:
    def formatter(prog):
        return argparse.HelpFormatter(prog, width=80, max_help_position=1000)

    parser = argparse.ArgumentParser(
        prog="luarocks-setup",
        description="install LuaRocks against an existing Lua installation",
        formatter_class=formatter,
    )
    parser.add_argument(
        "-r", "--luarocks-version", metavar="VERSION", help="release version, or @ref to build from git"
    ).completer = ChoicesCompleter(_VERSION_HINTS)
    parser.add_argument("-l", "--with-lua-path", metavar="DIR", help="Lua installation prefix (default: ./.lua)")
    parser.add_argument("-c", "--config", metavar="FILE", help="YAML file with luaRocksVersion and withLuaPath")
    parser.add_argument("-q", "--quiet", action="store_true", help="hide download progress")

    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    try:
        inputs = load_inputs(args)
        patch = bootstrap(inputs, Capabilities(progress=not args.quiet))
        environment.apply(patch)
    except Exception as e:
        report_failure(e)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
