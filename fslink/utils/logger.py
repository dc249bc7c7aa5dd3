import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_fslink_home import get_fslink_home

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(
    fslink_home: Path | None = None,
    level: str = "INFO",
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure fslink logging.

    Attaches a rotating file handler writing <fslink_home>/fslink.log to the
    "fslink" logger. Only the first call in a process has an effect.

    Args:
        fslink_home: Path to fslink home directory. If None, derived from environment.
        level: Logging level name
        max_bytes: Rotate the logfile once it reaches this size
        backup_count: Number of rotated logfiles to keep
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if fslink_home is None:
        fslink_home = get_fslink_home()

    fslink_home.mkdir(parents=True, exist_ok=True)
    log_file = fslink_home / "fslink.log"

    root_logger = logging.getLogger("fslink")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance under the fslink hierarchy (e.g. "link.store")."""
    return logging.getLogger(f"fslink.{name}")
