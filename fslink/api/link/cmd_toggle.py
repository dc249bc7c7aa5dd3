"""Link toggle API command."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from ..StageResult import StageResult
from . import LinkToggleOutput
from ._open_store import _open_store
from .errors import FslinkError

logger = get_logger("link.toggle")


def cmd_toggle(ref: str, start: Path | None = None) -> StageResult:
    """Enable a disabled link or disable an enabled one.

    Args:
        ref: Entry id or target path
        start: Directory to search for the project from (default: current directory)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            store, _ = _open_store(start)
            yield (0.5, f"Toggling {ref}...")
            entry = store.toggle(ref)
        except (FslinkError, ValueError) as e:
            logger.error(f"toggle {ref} failed: {e}")
            result_obj.output = LinkToggleOutput(errors=[str(e)], warnings=[], entry={}).model_dump(mode="python")
            result_obj.result = f"Toggle failed: {e}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        result_obj.output = LinkToggleOutput(
            errors=[],
            warnings=store.warnings,
            entry=entry.model_dump(mode="json"),
        ).model_dump(mode="python")
        result_obj.result = f"Toggled link: {entry}"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce=f"Toggling link {ref}...", progress_callback=do_work)
