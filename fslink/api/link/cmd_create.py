"""Link create API command."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from ..StageResult import StageResult
from . import LinkCreateOutput
from ._open_store import _open_store
from .errors import FslinkError, ProjectNotFoundError
from .LinkKind import LinkKind

logger = get_logger("link.create")


def cmd_create(
    source: str,
    target: str,
    kind: str | None = None,
    enable: bool = False,
    start: Path | None = None,
) -> StageResult:
    """Track a new link from source to target.

    Args:
        source: File or directory the link points to
        target: Path where the link is created
        kind: "soft" or "hard", None for the configured default
        enable: Create the link right away
        start: Directory to search for the project from (default: current directory)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        warnings: list[str] = []
        yield (0.1, "Loading configuration...")
        try:
            try:
                store, config = _open_store(start)
            except ProjectNotFoundError:
                store, config = _open_store(start, init=True)
                warnings.append(f"No project found, initialized {store.db_dir}")

            link_kind = LinkKind(kind) if kind is not None else config.default_kind

            yield (0.5, f"Tracking {link_kind} link {target}...")
            entry = store.create(source, target, link_kind, enable=enable)
        except (FslinkError, ValueError) as e:
            logger.error(f"create {source} -> {target} failed: {e}")
            result_obj.output = LinkCreateOutput(
                errors=[str(e)],
                warnings=warnings,
                entry={},
                adopted=False,
            ).model_dump(mode="python")
            result_obj.result = f"Error creating link: {e}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        adopted = entry.enabled and not enable
        if adopted:
            warnings.append(f"Adopted existing link at {entry.target_path}")
        result_obj.output = LinkCreateOutput(
            errors=[],
            warnings=warnings + store.warnings,
            entry=entry.model_dump(mode="json"),
            adopted=adopted,
        ).model_dump(mode="python")
        result_obj.result = f"Link created: {entry}"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce=f"Creating link {source} -> {target}...", progress_callback=do_work)
