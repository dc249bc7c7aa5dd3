"""Filesystem side of link management: create, remove and inspect links."""

import os
from contextlib import suppress
from pathlib import Path

from ...utils.logger import get_logger
from .errors import (
    FslinkError,
    LinkApplyError,
    SourceNotFoundError,
    TargetExistsError,
    TargetLinkMismatchError,
    UnsupportedLinkKindError,
)
from .LinkEntry import LinkEntry
from .LinkKind import LinkKind
from .TargetState import TargetState

logger = get_logger("link.applier")


def _symlink_destination(link: Path) -> Path:
    """Absolute, normalized destination of a symlink (relative links resolve against their directory)."""
    destination = Path(os.readlink(link))
    if not destination.is_absolute():
        destination = link.parent / destination
    return Path(os.path.normpath(destination))


def _same_entry(first: Path, second: Path) -> bool:
    """Whether two paths name the same directory entry, following symlinks in their parents only."""
    if os.path.normpath(first) == os.path.normpath(second):
        return True
    return Path(os.path.realpath(first.parent)) / first.name == Path(os.path.realpath(second.parent)) / second.name


class LinkApplier:
    """Performs and verifies the filesystem calls behind enabling and disabling entries."""

    def __init__(self, create_parents: bool = True):
        self.create_parents = create_parents

    def inspect(self, entry: LinkEntry) -> TargetState:
        """Classify what currently sits at the entry's target path."""
        source = entry.source_path
        target = entry.target_path

        if not os.path.lexists(target):
            return TargetState.MISSING

        if _same_entry(source, target):
            return TargetState.FOREIGN

        if entry.kind is LinkKind.SOFT:
            if not target.is_symlink():
                return TargetState.FOREIGN
            if _symlink_destination(target) == Path(os.path.normpath(source)):
                return TargetState.LINKED if source.exists() else TargetState.DANGLING
            # Same file reached through another path, e.g. a symlinked parent directory
            if source.exists() and os.path.realpath(target) == os.path.realpath(source):
                return TargetState.LINKED
            return TargetState.FOREIGN

        # Hard link: a symlink is never ours, otherwise compare device and inode
        if target.is_symlink() or not source.exists():
            return TargetState.FOREIGN
        try:
            same = os.path.samefile(source, target) and os.stat(target).st_nlink > 1
        except OSError:
            return TargetState.FOREIGN
        return TargetState.LINKED if same else TargetState.FOREIGN

    def occupied_error(self, entry: LinkEntry) -> FslinkError:
        """Build the error describing a target occupied by something the tool does not own."""
        target = entry.target_path
        if target.is_symlink():
            return TargetLinkMismatchError(
                f"Link for {entry.source_path} cannot be created - target ({target}) "
                f"is already a link from {_symlink_destination(target)}"
            )
        return TargetExistsError(f"Link for {entry.source_path} cannot be created - target ({target}) exists")

    def check_source(self, entry: LinkEntry) -> None:
        """Raise if the entry's source cannot be linked with the entry's kind or onto its target."""
        if _same_entry(entry.source_path, entry.target_path):
            raise TargetExistsError(
                f"Link for {entry.source_path} cannot be created - target ({entry.target_path}) is the source itself"
            )
        if not entry.source_path.exists():
            raise SourceNotFoundError(f"Link for {entry.source_path} cannot be created - source does not exist")
        if entry.kind is LinkKind.HARD and entry.source_path.is_dir():
            raise UnsupportedLinkKindError(
                f"Link for {entry.source_path} cannot be created - hard links are incompatible with directories"
            )

    def link(self, entry: LinkEntry) -> bool:
        """Create the entry's link.

        Returns:
            True if a link was created, False if the tool's link was already in place

        Raises:
            SourceNotFoundError, UnsupportedLinkKindError: The source cannot be linked
            TargetExistsError: The target is occupied by something else
            LinkApplyError: The filesystem call failed or the result is not the expected link
        """
        self.check_source(entry)

        state = self.inspect(entry)
        if state is TargetState.LINKED:
            return False
        if state is not TargetState.MISSING:
            raise self.occupied_error(entry)

        source = entry.source_path
        target = entry.target_path
        try:
            if self.create_parents:
                target.parent.mkdir(parents=True, exist_ok=True)
            if entry.kind is LinkKind.SOFT:
                target.symlink_to(source, target_is_directory=source.is_dir())
            else:
                os.link(source, target)
        except OSError as e:
            raise LinkApplyError(f"Failed to create {entry.kind} link {target} -> {source}: {e}") from e

        if self.inspect(entry) is not TargetState.LINKED:
            with suppress(OSError):
                target.unlink()
            raise LinkApplyError(f"Created {entry.kind} link at {target} does not point to {source}")

        logger.info(f"Created {entry.kind} link {target} -> {source}")
        return True

    def unlink(self, entry: LinkEntry) -> bool:
        """Remove the entry's link.

        Returns:
            True if a link was removed, False if nothing was at the target

        Raises:
            TargetExistsError: The target is not the tool's link and is left untouched
            LinkApplyError: The filesystem call failed
        """
        state = self.inspect(entry)
        if state is TargetState.MISSING:
            return False
        if state is TargetState.FOREIGN:
            raise TargetExistsError(
                f"Refusing to remove {entry.target_path} - it is not a {entry.kind} link to {entry.source_path}"
            )

        try:
            # Links to directories are still just files
            entry.target_path.unlink()
        except OSError as e:
            raise LinkApplyError(f"Failed to remove link {entry.target_path}: {e}") from e

        if os.path.lexists(entry.target_path):
            raise LinkApplyError(f"Link {entry.target_path} still exists after removal")

        logger.info(f"Removed {entry.kind} link {entry.target_path}")
        return True
