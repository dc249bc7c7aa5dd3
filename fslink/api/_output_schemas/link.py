"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkInitOutput(BaseOutputSchema):
    """Output schema for link init command."""
    project_root: str = Field(..., description="Directory holding the .fslink folder, empty string on failure")
    database_path: str = Field(..., description="Path to the links database file, empty string on failure")
    created: bool = Field(..., description="True if the .fslink folder was created by this call")


class LinkCreateOutput(BaseOutputSchema):
    """Output schema for link create command.

    Output structure:
    - entry: dict - the stored link entry, empty dict on failure
    - adopted: bool - True if an existing link at the target was taken over
    """
    entry: dict[str, Any] = Field(..., description="Stored link entry, empty dict on failure")
    adopted: bool = Field(..., description="True if an existing link at the target was adopted")


class LinkToggleOutput(BaseOutputSchema):
    """Output schema for link toggle command."""
    entry: dict[str, Any] = Field(..., description="Link entry after toggling, empty dict on failure")


class LinkRemoveOutput(BaseOutputSchema):
    """Output schema for link remove command."""
    entry: dict[str, Any] = Field(..., description="Removed link entry, empty dict on failure")


class LinkListOutput(BaseOutputSchema):
    """Output schema for link list command."""
    project_root: str = Field(..., description="Project root, empty string if no project was found")
    count: int = Field(..., description="Number of tracked links")
    entries: list[dict[str, Any]] = Field(..., description="Tracked link entries ordered by id")


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for link check command.

    Output structure:
    - consistent: bool - True if every entry agrees with the filesystem
    - operations: list[dict] - operations apply would perform (action, entry_id, target_path, reason)
    """
    project_root: str = Field(..., description="Project root, empty string if no project was found")
    consistent: bool = Field(..., description="True if the database agrees with the filesystem")
    operations: list[dict[str, Any]] = Field(..., description="Planned reconciliation operations")


class LinkApplyOutput(BaseOutputSchema):
    """Output schema for link apply command."""
    project_root: str = Field(..., description="Project root, empty string if no project was found")
    applied: list[dict[str, Any]] = Field(..., description="Operations performed")
    conflicts: list[dict[str, Any]] = Field(..., description="Entries blocked by files the tool does not own")
    failed: list[dict[str, Any]] = Field(..., description="Operations that raised, reason holds the error")


# Register schemas
register_output_schema("link", "init", LinkInitOutput)
register_output_schema("link", "create", LinkCreateOutput)
register_output_schema("link", "toggle", LinkToggleOutput)
register_output_schema("link", "remove", LinkRemoveOutput)
register_output_schema("link", "list", LinkListOutput)
register_output_schema("link", "check", LinkCheckOutput)
register_output_schema("link", "apply", LinkApplyOutput)
