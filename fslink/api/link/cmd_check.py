"""Link check API command."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from . import LinkCheckOutput
from ._open_store import _open_store
from .errors import FslinkError


def cmd_check(start: Path | None = None) -> StageResult:
    """Report entries whose enabled flag disagrees with the filesystem, without changing anything."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            store, _ = _open_store(start)
            yield (0.5, "Inspecting link targets...")
            operations = store.check()
        except (FslinkError, ValueError) as e:
            result_obj.output = LinkCheckOutput(
                errors=[str(e)],
                warnings=[],
                project_root="",
                consistent=False,
                operations=[],
            ).model_dump(mode="python")
            result_obj.result = f"Check failed: {e}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        warnings = [f"{op.target_path}: {op.reason}" for op in operations if op.action == "conflict"]
        result_obj.output = LinkCheckOutput(
            errors=[],
            warnings=warnings,
            project_root=str(store.project_root),
            consistent=not operations,
            operations=[op.to_dict() for op in operations],
        ).model_dump(mode="python")
        result_obj.result = (
            "All links consistent" if not operations else f"{len(operations)} link(s) out of sync, run 'fslink apply'"
        )
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce="Checking links against the filesystem...", progress_callback=do_work)
