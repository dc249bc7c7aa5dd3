"""Locate the project directory that holds the link database."""

from pathlib import Path

from ...utils.normalize_path import normalize_path
from .constants import DB_DIRNAME
from .errors import ProjectNotFoundError


def find_project_root(start: Path | None = None) -> Path:
    """Walk up from start (default: current directory) to the nearest directory containing .fslink.

    Raises:
        ProjectNotFoundError: If the filesystem root is reached without finding one
    """
    current = normalize_path(start if start is not None else Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / DB_DIRNAME).is_dir():
            return candidate
    raise ProjectNotFoundError(f"No {DB_DIRNAME} directory found in {current} or any parent (run 'fslink init')")
