"""Link remove API command."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from ..StageResult import StageResult
from . import LinkRemoveOutput
from ._open_store import _open_store
from .errors import FslinkError

logger = get_logger("link.remove")


def cmd_remove(ref: str, start: Path | None = None) -> StageResult:
    """Stop tracking a link, removing it from the filesystem first if enabled."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            store, _ = _open_store(start)
            yield (0.5, f"Removing {ref}...")
            entry = store.remove(ref)
        except (FslinkError, ValueError) as e:
            logger.error(f"remove {ref} failed: {e}")
            result_obj.output = LinkRemoveOutput(errors=[str(e)], warnings=[], entry={}).model_dump(mode="python")
            result_obj.result = f"Remove failed: {e}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        result_obj.output = LinkRemoveOutput(
            errors=[],
            warnings=store.warnings,
            entry=entry.model_dump(mode="json"),
        ).model_dump(mode="python")
        result_obj.result = f"Link removed: {entry}"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce=f"Removing link {ref}...", progress_callback=do_work)
