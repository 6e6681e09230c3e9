import os
from pathlib import Path

from luarocks_setup import environment
from luarocks_setup.bootstrap import Inputs, bootstrap
from luarocks_setup.installers import UnixInstaller, WindowsInstaller


def test_release_on_unix(caps, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("RUNNER_TEMP", str(tmp_path / "temp"))
    cwd = tmp_path / "work"

    patch = bootstrap(Inputs("3.9.2"), caps, cwd=cwd, installer=UnixInstaller)

    assert caps.calls[0] == ("mkdir", tmp_path / "temp" / ".build-luarocks")
    assert caps.commands[:3] == [
        ["./configure", f"--with-lua={cwd / '.lua'}", f"--prefix={cwd / '.luarocks'}"],
        ["make"],
        ["make", "install"],
    ]
    assert caps.commands[3] == [str(cwd / ".luarocks" / "bin" / "luarocks"), "path", "--lr-bin"]
    assert patch.paths[0] == cwd / ".luarocks" / "bin"

    environ = {"PATH": "/usr/bin"}
    environment.apply(patch, environ)
    assert str(cwd / ".luarocks" / "bin") in environ["PATH"].split(os.pathsep)
    assert environ["LUA_PATH"].startswith(";;")
    assert environ["LUA_CPATH"].startswith(";;")


def test_default_branch_on_unix(caps, tmp_path: Path) -> None:
    bootstrap(Inputs("@"), caps, cwd=tmp_path, installer=UnixInstaller)

    assert caps.downloads == ["https://github.com/luarocks/luarocks/archive/master.tar.gz"]


def test_custom_lua_path(caps, tmp_path: Path) -> None:
    bootstrap(Inputs("3.9.2", with_lua_path="/opt/lua"), caps, cwd=tmp_path, installer=UnixInstaller)

    assert "--with-lua=/opt/lua" in caps.commands[0]


def test_windows_queries_installed_exe(caps, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("VCINSTALLDIR", "C:\\VS\\VC\\")
    caps.outputs["print(_VERSION)"] = "Lua 5.1"

    patch = bootstrap(Inputs("3.11.1"), caps, cwd=tmp_path, installer=WindowsInstaller)

    luarocks = str(tmp_path / ".luarocks" / "bin" / "luarocks.exe")
    assert [luarocks, "path", "--lr-cpath"] in caps.commands
    assert patch.variables["LUA_PATH"] == ";;/home/runner/.luarocks/share/lua/5.4/?.lua"


def test_relative_lua_path_is_resolved_against_cwd(caps, tmp_path: Path) -> None:
    bootstrap(Inputs("3.9.2", with_lua_path="lua-5.4"), caps, cwd=tmp_path, installer=UnixInstaller)

    assert caps.commands[0][1] == f"--with-lua={tmp_path / 'lua-5.4'}"
