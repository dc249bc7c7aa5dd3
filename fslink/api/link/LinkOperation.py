"""Reconciliation operation record."""

from dataclasses import asdict, dataclass
from typing import Any, Literal

LinkAction = Literal["create", "remove", "mark_disabled", "conflict"]


@dataclass(frozen=True)
class LinkOperation:
    """A single step needed to bring one entry into agreement with the filesystem.

    create: enabled entry whose link is missing, recreate it
    remove: tool link present where it should not be (disabled entry, or a dangling symlink)
    mark_disabled: enabled entry whose link is missing and cannot be recreated
    conflict: the target is occupied by something the tool does not own
    """

    action: LinkAction
    entry_id: int
    target_path: str
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
