"""Link entry record."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .LinkKind import LinkKind


class LinkEntry(BaseModel):
    """One managed link as stored in the database."""

    model_config = ConfigDict(extra="forbid")

    id: int = Field(..., ge=0, description="Sequence number, unique within the store")
    source_path: Path = Field(..., description="Absolute path to the real file or directory")
    target_path: Path = Field(..., description="Absolute path where the link is created")
    kind: LinkKind = Field(LinkKind.SOFT, description="Soft (symbolic) or hard link")
    enabled: bool = Field(False, description="True if a live link exists at target_path")

    def __str__(self) -> str:
        state = "enabled" if self.enabled else "disabled"
        return f"[{self.id}] {self.source_path} -> {self.target_path} ({self.kind}, {state})"
