"""Unit tests for yap directory bootstrap."""

from unittest.mock import Mock

import pytest
from yap.core import paths
from yap.core.exceptions import ErrorKind, YapError


def test_home_dir_failure(monkeypatch):
    monkeypatch.setattr(paths.Path, "home", Mock(side_effect=RuntimeError("no home")))
    with pytest.raises(YapError) as exc_info:
        paths.home_dir()
    assert exc_info.value.kind is ErrorKind.NO_HOME_DIR


def test_default_root(tmp_path, monkeypatch):
    monkeypatch.setattr(paths, "home_dir", lambda: tmp_path)
    assert paths.default_root() == tmp_path / ".yap"


def test_init_dir_creates_directories(tmp_path, monkeypatch):
    monkeypatch.setattr(paths, "home_dir", lambda: tmp_path)

    root = paths.init_dir(".yap_test")

    assert root == tmp_path / ".yap_test"
    assert root.is_dir()
    assert (root / "config.yml").exists()


def test_init_is_repeatable(tmp_path, monkeypatch):
    monkeypatch.setattr(paths, "home_dir", lambda: tmp_path)
    paths.init()
    (tmp_path / ".yap" / "keep.txt").write_text("x")

    paths.init()

    assert (tmp_path / ".yap" / "keep.txt").exists()
