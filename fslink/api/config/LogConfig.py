"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LogConfig(BaseModel):
    """Logfile configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", description="Logging level")
    max_bytes: int = Field(1024 * 1024, gt=0, description="Rotate the logfile once it reaches this size")
    backup_count: int = Field(3, ge=0, description="Number of rotated logfiles to keep")
