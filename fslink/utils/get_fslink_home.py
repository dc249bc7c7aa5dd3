"""Utility to discover the fslink home directory."""

import os
from pathlib import Path

from .normalize_path import normalize_path


def get_fslink_home() -> Path:
    """Get fslink home directory based on FSLINK_HOME or default to ~/.fslink."""
    env_home = os.environ.get("FSLINK_HOME")
    if env_home:
        return normalize_path(env_home)
    return Path.home() / ".fslink"
