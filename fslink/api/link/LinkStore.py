"""Link database of a project and the operations that keep it in sync with the filesystem."""

from __future__ import annotations

import json
from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass, field, replace
from pathlib import Path

from pydantic import ValidationError

from ...utils.logger import get_logger
from ...utils.normalize_path import normalize_path
from .constants import DB_DIRNAME, DB_FILENAME
from .errors import (
    DatabaseCorruptError,
    DatabaseWriteError,
    DuplicateTargetError,
    EntryNotFoundError,
    FslinkError,
)
from .find_project_root import find_project_root
from .LinkApplier import LinkApplier
from .LinkEntry import LinkEntry
from .LinkKind import LinkKind
from .LinkOperation import LinkOperation
from .plan_operations import plan_operations
from .TargetState import TargetState

logger = get_logger("link.store")


@dataclass
class ApplyReport:
    """Outcome of LinkStore.apply()."""

    applied: list[LinkOperation] = field(default_factory=list)
    conflicts: list[LinkOperation] = field(default_factory=list)
    failed: list[LinkOperation] = field(default_factory=list)


class LinkStore:
    """The .fslink/links database of one project.

    Every mutating operation loads the database, performs its filesystem work
    through the applier and writes the database back only if that work
    succeeded. Non-fatal observations are collected in self.warnings.
    """

    def __init__(self, project_root: Path, applier: LinkApplier | None = None):
        self.project_root = project_root
        self.applier = applier if applier is not None else LinkApplier()
        self.warnings: list[str] = []

    @classmethod
    def open(cls, start: Path | None = None, applier: LinkApplier | None = None) -> LinkStore:
        """Open the store of the project enclosing start (default: current directory)."""
        return cls(find_project_root(start), applier)

    @classmethod
    def init(cls, path: Path | None = None, applier: LinkApplier | None = None) -> LinkStore:
        """Create .fslink in path (default: current directory) if missing and open its store."""
        root = normalize_path(path if path is not None else Path.cwd()).resolve()
        db_dir = root / DB_DIRNAME
        if not db_dir.is_dir():
            db_dir.mkdir(parents=True)
            logger.info(f"Initialized link database in {db_dir}")
        return cls(root, applier)

    @property
    def db_dir(self) -> Path:
        return self.project_root / DB_DIRNAME

    @property
    def db_path(self) -> Path:
        return self.db_dir / DB_FILENAME

    # Persistence

    def _load(self) -> list[LinkEntry]:
        if not self.db_path.exists():
            return []

        try:
            raw = json.loads(self.db_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise DatabaseCorruptError(f"Invalid JSON in link database {self.db_path}: {e}") from e
        except OSError as e:
            raise DatabaseCorruptError(f"Cannot read link database {self.db_path}: {e}") from e

        if not isinstance(raw, list):
            raise DatabaseCorruptError(f"Link database {self.db_path} must contain a JSON array")

        try:
            entries = [LinkEntry.model_validate(record) for record in raw]
        except ValidationError as e:
            raise DatabaseCorruptError(f"Invalid record in link database {self.db_path}: {e}") from e

        ids = [entry.id for entry in entries]
        targets = [entry.target_path for entry in entries]
        if len(set(ids)) != len(ids) or len(set(targets)) != len(targets):
            raise DatabaseCorruptError(f"Link database {self.db_path} holds duplicate ids or targets")

        return sorted(entries, key=lambda entry: entry.id)

    def _save(self, entries: list[LinkEntry]) -> None:
        """Write the database atomically (temp file, then rename)."""
        self.db_dir.mkdir(parents=True, exist_ok=True)
        temp_path = self.db_path.with_suffix(".tmp")
        data = [entry.model_dump(mode="json") for entry in sorted(entries, key=lambda entry: entry.id)]
        try:
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
                fh.write("\n")
            temp_path.replace(self.db_path)
        except OSError as e:
            with suppress(OSError):
                temp_path.unlink()
            raise DatabaseWriteError(f"Failed to save link database {self.db_path}: {e}") from e

    def _commit(self, entries: list[LinkEntry], undo: Callable[[], object] | None = None) -> None:
        """Save entries; if that fails, revert the filesystem change with undo and re-raise."""
        try:
            self._save(entries)
        except DatabaseWriteError as e:
            if undo is not None:
                try:
                    undo()
                except FslinkError as undo_error:
                    logger.error(f"Could not revert filesystem change after failed save: {undo_error}")
            raise e

    # Lookup

    @staticmethod
    def _find(entries: list[LinkEntry], ref: int | str | Path) -> LinkEntry:
        """Find an entry by id (int or digit string) or by target path."""
        if isinstance(ref, int) or (isinstance(ref, str) and ref.isdigit()):
            entry_id = int(ref)
            for entry in entries:
                if entry.id == entry_id:
                    return entry
            raise EntryNotFoundError(f"No tracked link with id {entry_id}")

        target = normalize_path(ref)
        for entry in entries:
            if entry.target_path == target:
                return entry
        raise EntryNotFoundError(f"No tracked link found for target: {target}")

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)

    def list(self) -> list[LinkEntry]:
        """Snapshot of all entries ordered by id."""
        return self._load()

    def get(self, ref: int | str | Path) -> LinkEntry:
        """Resolve an entry by id or target path."""
        return self._find(self._load(), ref)

    # Mutations

    def create(
        self,
        source: str | Path,
        target: str | Path,
        kind: LinkKind = LinkKind.SOFT,
        enable: bool = False,
    ) -> LinkEntry:
        """Track a new link, disabled unless enable is set or the link already exists.

        Raises:
            DuplicateTargetError: The target is already tracked
            SourceNotFoundError, UnsupportedLinkKindError: The source cannot be linked
            TargetExistsError: The target is occupied by something other than this link
        """
        entries = self._load()
        source_path = normalize_path(source)
        target_path = normalize_path(target)

        if any(entry.target_path == target_path for entry in entries):
            raise DuplicateTargetError(f"Target {target_path} is already tracked")

        next_id = max((entry.id for entry in entries), default=-1) + 1
        entry = LinkEntry(id=next_id, source_path=source_path, target_path=target_path, kind=kind)

        self.applier.check_source(entry)
        state = self.applier.inspect(entry)
        created = False
        if state is TargetState.LINKED:
            entry.enabled = True
            logger.info(f"Adopted existing {kind} link {target_path} -> {source_path}")
        elif state is not TargetState.MISSING:
            raise self.applier.occupied_error(entry)
        elif enable:
            created = self.applier.link(entry)
            entry.enabled = True

        entries.append(entry)
        self._commit(entries, lambda: self.applier.unlink(entry) if created else None)
        logger.info(f"Tracking {entry}")
        return entry

    def toggle(self, ref: int | str | Path) -> LinkEntry:
        """Flip an entry's enabled flag, creating or removing its link.

        The database is left unchanged if the filesystem operation fails, and
        the filesystem change is reverted if the database cannot be written.
        """
        entries = self._load()
        entry = self._find(entries, ref)

        if entry.enabled:
            changed = self.applier.unlink(entry)
            if not changed:
                self._warn(f"Link {entry.target_path} was already absent")
            undo = self.applier.link
        else:
            changed = self.applier.link(entry)
            if not changed:
                self._warn(f"Link {entry.target_path} was already in place")
            undo = self.applier.unlink
        entry.enabled = not entry.enabled

        self._commit(entries, lambda: undo(entry) if changed else None)
        logger.info(f"Toggled {entry}")
        return entry

    def remove(self, ref: int | str | Path) -> LinkEntry:
        """Stop tracking an entry, removing its live link first if it is enabled."""
        entries = self._load()
        entry = self._find(entries, ref)

        removed = False
        if entry.enabled:
            removed = self.applier.unlink(entry)
            if not removed:
                self._warn(f"Link {entry.target_path} was already absent")

        self._commit(
            [other for other in entries if other.id != entry.id],
            lambda: self.applier.link(entry) if removed else None,
        )
        entry.enabled = False
        logger.info(f"Removed {entry}")
        return entry

    # Reconciliation

    def check(self) -> list[LinkOperation]:
        """Operations apply() would perform; touches neither filesystem nor database."""
        return plan_operations(self._load(), self.applier.inspect)

    def apply(self) -> ApplyReport:
        """Bring the filesystem in line with the database and persist the resulting flags.

        Operations are applied independently; a failing one is reported and
        leaves its entry as it was.
        """
        entries = self._load()
        by_id = {entry.id: entry for entry in entries}
        report = ApplyReport()

        for operation in plan_operations(entries, self.applier.inspect):
            entry = by_id[operation.entry_id]
            if operation.action == "conflict":
                self._warn(f"Conflict at {operation.target_path}: {operation.reason}")
                report.conflicts.append(operation)
                continue
            try:
                if operation.action == "create":
                    self.applier.link(entry)
                elif operation.action == "remove":
                    self.applier.unlink(entry)
                    entry.enabled = False
                elif operation.action == "mark_disabled":
                    entry.enabled = False
            except FslinkError as e:
                logger.error(f"Failed to {operation.action} {operation.target_path}: {e}")
                report.failed.append(replace(operation, reason=str(e)))
                continue
            report.applied.append(operation)

        if report.applied:
            self._save(entries)
        return report
