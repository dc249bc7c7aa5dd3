"""Open a project's LinkStore configured from the user configuration."""

from pathlib import Path

from ..config.FslinkConfig import FslinkConfig
from .LinkApplier import LinkApplier
from .LinkStore import LinkStore


def _open_store(start: Path | None = None, init: bool = False) -> tuple[LinkStore, FslinkConfig]:
    """Load configuration and open (or with init=True, create) the store.

    Raises:
        ValueError: If the configuration is invalid
        ProjectNotFoundError: If no project encloses start and init is False
    """
    config = FslinkConfig.load()
    applier = LinkApplier(create_parents=config.create_parents)
    if init:
        return LinkStore.init(start, applier), config
    return LinkStore.open(start, applier), config
