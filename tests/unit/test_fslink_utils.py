"""Unit tests for fslink.utils modules."""

import logging
from pathlib import Path

import pytest

from fslink.utils import logger as logger_module
from fslink.utils.get_fslink_home import get_fslink_home
from fslink.utils.normalize_path import normalize_path


def test_normalize_path_makes_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert normalize_path("mod/../src.conf") == tmp_path / "src.conf"


def test_normalize_path_keeps_symlinks(tmp_path):
    real = tmp_path / "real"
    real.mkdir()
    alias = tmp_path / "alias"
    alias.symlink_to(real)
    assert normalize_path(alias / "x") == alias / "x"


def test_normalize_path_expands_user(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert normalize_path("~/links") == tmp_path / "links"


def test_normalize_path_none():
    assert normalize_path(None) is None


def test_get_fslink_home_from_env(fslink_home):
    assert get_fslink_home() == fslink_home


def test_get_fslink_home_default(monkeypatch):
    monkeypatch.delenv("FSLINK_HOME")
    assert get_fslink_home() == Path.home() / ".fslink"


@pytest.fixture
def fresh_logging(monkeypatch):
    """Undo configure_logging side effects after the test."""
    root = logging.getLogger("fslink")
    handlers = list(root.handlers)
    level = root.level
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    yield root
    for handler in root.handlers[len(handlers):]:
        handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_configure_logging_writes_logfile(fresh_logging, tmp_path):
    home = tmp_path / "log_home"
    logger_module.configure_logging(home, level="DEBUG")

    logger_module.get_logger("link.test").debug("hello from test")
    for handler in fresh_logging.handlers:
        handler.flush()

    assert fresh_logging.level == logging.DEBUG
    assert "fslink.link.test - DEBUG - hello from test" in (home / "fslink.log").read_text()


def test_configure_logging_only_once(fresh_logging, tmp_path):
    before = len(fresh_logging.handlers)
    logger_module.configure_logging(tmp_path / "first")
    logger_module.configure_logging(tmp_path / "second")
    assert len(fresh_logging.handlers) == before + 1
    assert not (tmp_path / "second").exists()
