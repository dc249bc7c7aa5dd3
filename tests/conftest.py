"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from fslink.api.link.constants import DB_DIRNAME, DB_FILENAME


def pytest_configure(config):
    for marker in ("unit", "integration", "link", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def fslink_home(tmp_path: Path, monkeypatch) -> Path:
    """Point FSLINK_HOME at an empty directory so tests never read the user's config."""
    home = tmp_path / "fslink_home"
    home.mkdir()
    monkeypatch.setenv("FSLINK_HOME", str(home))
    return home


@pytest.fixture
def write_config(fslink_home: Path):
    """Write a config.json into FSLINK_HOME."""

    def _write(data: dict | str) -> Path:
        path = fslink_home / "config.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project directory with an initialized, empty link database."""
    root = tmp_path / "project"
    (root / DB_DIRNAME).mkdir(parents=True)
    return root


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """A regular file outside the project to link to."""
    path = tmp_path / "external" / "src.conf"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("key = value\n", encoding="utf-8")
    return path


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """A directory outside the project to link to."""
    path = tmp_path / "external" / "assets"
    path.mkdir(parents=True, exist_ok=True)
    (path / "logo.svg").write_text("<svg/>", encoding="utf-8")
    return path


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def read_db(project_root: Path) -> list[dict]:
    """Raw records of a project's link database ([] if it does not exist)."""
    path = project_root / DB_DIRNAME / DB_FILENAME
    if not path.exists():
        return []
    return json.loads(path.read_text(encoding="utf-8"))
