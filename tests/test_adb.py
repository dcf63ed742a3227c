from __future__ import annotations

import subprocess
from types import SimpleNamespace

import pytest

from autostart import adb as adb_mod
from autostart.adb import AdbClient, AdbError, resolve_adb_path


def test_shell_builds_command_with_serial(monkeypatch):
    seen = {}

    def fake_run(cmd, **kw):
        seen["cmd"] = cmd
        seen["timeout"] = kw.get("timeout")
        return SimpleNamespace(returncode=0, stdout="1\n", stderr="")

    monkeypatch.setattr(adb_mod.subprocess, "run", fake_run)
    client = AdbClient("/opt/adb", serial="emulator-5554", timeout=5)

    assert client.getprop("sys.boot_completed") == "1"
    assert seen["cmd"] == ["/opt/adb", "-s", "emulator-5554", "shell", "getprop", "sys.boot_completed"]
    assert seen["timeout"] == 5


def test_shell_nonzero_exit_raises(monkeypatch):
    monkeypatch.setattr(
        adb_mod.subprocess, "run",
        lambda cmd, **kw: SimpleNamespace(returncode=1, stdout="", stderr="error: no devices/emulators found"),
    )
    with pytest.raises(AdbError, match="no devices"):
        AdbClient().shell("getprop", "x")


def test_shell_timeout_raises(monkeypatch):
    def fake_run(cmd, **kw):
        raise subprocess.TimeoutExpired(cmd, kw.get("timeout"))

    monkeypatch.setattr(adb_mod.subprocess, "run", fake_run)
    with pytest.raises(AdbError, match="timed out"):
        AdbClient(timeout=1).shell("true")


def test_shell_missing_binary_raises(monkeypatch):
    def fake_run(cmd, **kw):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(adb_mod.subprocess, "run", fake_run)
    with pytest.raises(AdbError):
        AdbClient("/nope/adb").shell("true")


def test_resolve_adb_path(monkeypatch):
    assert resolve_adb_path("/custom/adb") == "/custom/adb"

    monkeypatch.setattr(adb_mod.shutil, "which", lambda name: "/usr/bin/adb")
    assert resolve_adb_path("") == "/usr/bin/adb"

    monkeypatch.setattr(adb_mod.shutil, "which", lambda name: None)
    with pytest.raises(AdbError):
        resolve_adb_path("")
