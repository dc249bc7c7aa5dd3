"""Normalize a path for fslink.

Expands user home directory (~) and returns an absolute path
WITHOUT resolving symlinks. Link targets are symlinks themselves,
so resolving them would point at the source instead.
"""

import os
from pathlib import Path
from typing import overload


@overload
def normalize_path(path: str) -> Path: ...


@overload
def normalize_path(path: Path) -> Path: ...


@overload
def normalize_path(path: None) -> None: ...


def normalize_path(path: str | Path | None) -> Path | None:
    """Expand user, make absolute and collapse '..' (no symlink resolution)."""
    if path is None:
        return None
    return Path(os.path.normpath(Path(path).expanduser().absolute()))
