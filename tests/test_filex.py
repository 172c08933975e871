import grp
import os
import pwd
import subprocess
from types import SimpleNamespace

import pytest

from golinux import filex
from golinux.filex import SudoError

SUDO_GID = 27
USER_GID = 1000


@pytest.fixture
def sudo_user(monkeypatch):
    monkeypatch.setattr(os, "geteuid", lambda: 1000)
    monkeypatch.setattr(os, "getuid", lambda: 1000)
    monkeypatch.setattr(
        pwd, "getpwuid", lambda uid: SimpleNamespace(pw_name="tester", pw_gid=USER_GID)
    )
    monkeypatch.setattr(
        os, "getgrouplist", lambda name, gid: [USER_GID, SUDO_GID], raising=False
    )
    monkeypatch.setattr(
        grp,
        "getgrgid",
        lambda gid: SimpleNamespace(gr_name="sudo" if gid == SUDO_GID else "tester"),
    )


@pytest.fixture
def root_user(monkeypatch):
    monkeypatch.setattr(os, "geteuid", lambda: 0)


def _fake_run(monkeypatch, returncode=0, stdout=b""):
    calls = []

    def run(args, **kwargs):
        calls.append(args)
        return subprocess.CompletedProcess(args, returncode, stdout=stdout)

    monkeypatch.setattr(subprocess, "run", run)
    return calls


def test_touch_runs_sudo_touch(sudo_user, monkeypatch):
    calls = _fake_run(monkeypatch)
    assert filex.touch_as_sudo("/etc/example.conf") is True
    assert calls == [["sh", "-c", "sudo touch /etc/example.conf"]]


def test_touch_refused_for_root(root_user, monkeypatch):
    calls = _fake_run(monkeypatch)
    with pytest.raises(SudoError, match="current user does not have sudo privileges"):
        filex.touch_as_sudo("/etc/example.conf")
    assert calls == []


def test_touch_wraps_user_lookup_failure(monkeypatch):
    monkeypatch.setattr(os, "geteuid", lambda: 1000)
    monkeypatch.setattr(os, "getuid", lambda: 1000)

    def missing(uid):
        raise KeyError(uid)

    monkeypatch.setattr(pwd, "getpwuid", missing)
    with pytest.raises(SudoError, match="failed to check for sudo privileges"):
        filex.touch_as_sudo("/etc/example.conf")


def test_touch_command_failure(sudo_user, monkeypatch):
    _fake_run(monkeypatch, returncode=1, stdout=b"touch: denied\n")
    with pytest.raises(SudoError) as info:
        filex.touch_as_sudo("/etc/example.conf")
    assert str(info.value) == "failed to create file at /etc/example.conf as sudo"
    assert info.value.__cause__.output == "touch: denied"


def test_delete_missing_file_is_success(tmp_path, root_user, monkeypatch):
    calls = _fake_run(monkeypatch)
    assert filex.delete_as_sudo(str(tmp_path / "absent")) is True
    assert calls == []


def test_delete_existing_file(tmp_path, sudo_user, monkeypatch):
    target = tmp_path / "present"
    target.write_text("x")
    calls = _fake_run(monkeypatch)
    assert filex.delete_as_sudo(str(target)) is True
    assert calls == [["sh", "-c", f"sudo rm -f {target}"]]


def test_delete_existing_file_refused_for_root(tmp_path, root_user, monkeypatch):
    target = tmp_path / "present"
    target.write_text("x")
    calls = _fake_run(monkeypatch)
    with pytest.raises(SudoError, match="current user does not have sudo privileges"):
        filex.delete_as_sudo(str(target))
    assert calls == []


def test_delete_command_failure(tmp_path, sudo_user, monkeypatch):
    target = tmp_path / "present"
    target.write_text("x")
    _fake_run(monkeypatch, returncode=1, stdout=b"rm: denied")
    with pytest.raises(SudoError) as info:
        filex.delete_as_sudo(str(target))
    assert str(info.value) == f"failed to delete file at {target} as sudo"