"""Compute the operations that reconcile the database with the filesystem."""

from collections.abc import Callable, Iterable

from .LinkEntry import LinkEntry
from .LinkOperation import LinkOperation
from .TargetState import TargetState


def plan_operations(
    entries: Iterable[LinkEntry],
    inspect: Callable[[LinkEntry], TargetState],
) -> list[LinkOperation]:
    """Plan one operation per entry that disagrees with the filesystem.

    The database is the desired state. Consistent entries produce nothing,
    and files the tool does not own are reported as conflicts, never touched.

    Args:
        entries: Entries to check
        inspect: Classifies the target of an entry (LinkApplier.inspect)
    """
    operations: list[LinkOperation] = []
    for entry in entries:
        state = inspect(entry)
        target = str(entry.target_path)

        if entry.enabled:
            if state is TargetState.LINKED:
                continue
            if state is TargetState.MISSING:
                if entry.source_path.exists():
                    operations.append(LinkOperation("create", entry.id, target, "link is missing"))
                else:
                    operations.append(
                        LinkOperation("mark_disabled", entry.id, target, "link and source are both missing")
                    )
            elif state is TargetState.DANGLING:
                operations.append(LinkOperation("remove", entry.id, target, "source is missing, link is dangling"))
            else:
                operations.append(LinkOperation("conflict", entry.id, target, "target is occupied by another file"))
        elif state in (TargetState.LINKED, TargetState.DANGLING):
            operations.append(LinkOperation("remove", entry.id, target, "entry is disabled but its link exists"))

    return operations
