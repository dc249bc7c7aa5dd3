"""Top-level fslink user configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_fslink_home import get_fslink_home
from ..link.LinkKind import LinkKind
from .LogConfig import LogConfig


class FslinkConfig(BaseModel):
    """User configuration, read from $FSLINK_HOME/config.json."""

    model_config = ConfigDict(extra="forbid")

    default_kind: LinkKind = Field(LinkKind.SOFT, description="Link kind used when --hard is not given")
    create_parents: bool = Field(True, description="Create missing parent directories of link targets")
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get fslink home directory based on FSLINK_HOME or default to ~/.fslink."""
        return get_fslink_home()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the fslink home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "FslinkConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a JSON-serializable dictionary."""
        return self.model_dump(mode="json")
