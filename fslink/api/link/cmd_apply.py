"""Link apply API command."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from ..StageResult import StageResult
from . import LinkApplyOutput
from ._open_store import _open_store
from .errors import FslinkError

logger = get_logger("link.apply")


def cmd_apply(start: Path | None = None) -> StageResult:
    """Create or remove links so the filesystem matches the database.

    Conflicts (targets occupied by files the tool does not own) are reported
    as warnings and left alone; failed operations make the command fail.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            store, _ = _open_store(start)
            yield (0.4, "Reconciling links...")
            report = store.apply()
        except (FslinkError, ValueError) as e:
            logger.error(f"apply failed: {e}")
            result_obj.output = LinkApplyOutput(
                errors=[str(e)],
                warnings=[],
                project_root="",
                applied=[],
                conflicts=[],
                failed=[],
            ).model_dump(mode="python")
            result_obj.result = f"Apply failed: {e}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        errors = [f"{op.target_path}: {op.reason}" for op in report.failed]
        result_obj.output = LinkApplyOutput(
            errors=errors,
            warnings=store.warnings,
            project_root=str(store.project_root),
            applied=[op.to_dict() for op in report.applied],
            conflicts=[op.to_dict() for op in report.conflicts],
            failed=[op.to_dict() for op in report.failed],
        ).model_dump(mode="python")
        result_obj.result = (
            f"Applied {len(report.applied)} operation(s), "
            f"{len(report.conflicts)} conflict(s), {len(report.failed)} failure(s)"
        )
        result_obj.success = not report.failed
        yield (1.0, "Complete")

    return StageResult(announce="Applying link database to the filesystem...", progress_callback=do_work)
