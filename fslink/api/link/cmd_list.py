"""Link list API command."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from . import LinkListOutput
from ._open_store import _open_store
from .errors import FslinkError


def cmd_list(start: Path | None = None) -> StageResult:
    """List all tracked links."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            store, _ = _open_store(start)
            yield (0.6, "Reading link database...")
            entries = store.list()
        except (FslinkError, ValueError) as e:
            result_obj.output = LinkListOutput(
                errors=[str(e)],
                warnings=[],
                project_root="",
                count=0,
                entries=[],
            ).model_dump(mode="python")
            result_obj.result = f"Failed to list links: {e}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        enabled = sum(1 for entry in entries if entry.enabled)
        result_obj.output = LinkListOutput(
            errors=[],
            warnings=[],
            project_root=str(store.project_root),
            count=len(entries),
            entries=[entry.model_dump(mode="json") for entry in entries],
        ).model_dump(mode="python")
        result_obj.result = f"Tracked links: {len(entries)} ({enabled} enabled)"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce="Listing tracked links...", progress_callback=do_work)
