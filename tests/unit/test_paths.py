"""
路径工具单元测试
"""

import os

from fuel_tools.utils.paths import ensure_directory, expand_path, home_path, join_paths


def _set_home(monkeypatch, home):
    monkeypatch.setenv("HOME", home)
    monkeypatch.setenv("HOMEPATH", home)


def test_home_path(monkeypatch):
    _set_home(monkeypatch, "/home/fuel")
    assert home_path() == "/home/fuel"


def test_home_path_unset(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.delenv("HOMEPATH", raising=False)
    assert home_path() == ""


def test_join_paths():
    assert join_paths("a", "b", "c") == os.path.join("a", "b", "c")
    assert join_paths("", "b") == "b"
    assert join_paths() == ""


def test_expand_path_home(monkeypatch):
    _set_home(monkeypatch, "/home/fuel")
    assert expand_path("~/.ignition/fuel") == os.path.join("/home/fuel", ".ignition", "fuel")
    assert expand_path("~") == "/home/fuel"


def test_expand_path_variables(monkeypatch):
    monkeypatch.setenv("FUEL_TEST_DIR", "/data")
    assert expand_path("$FUEL_TEST_DIR/fuel") == "/data/fuel"


def test_expand_path_unchanged():
    assert expand_path("/tmp/ignition/fuel") == "/tmp/ignition/fuel"
    assert expand_path("relative/dir") == "relative/dir"


def test_ensure_directory(tmp_path):
    target = tmp_path / "a" / "b"
    assert ensure_directory(target) == target
    assert target.is_dir()
