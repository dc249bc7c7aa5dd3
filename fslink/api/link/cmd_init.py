"""Link init API command."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from ...utils.normalize_path import normalize_path
from ..StageResult import StageResult
from . import LinkInitOutput
from ._open_store import _open_store
from .constants import DB_DIRNAME
from .errors import FslinkError

logger = get_logger("link.init")


def cmd_init(path: Path | None = None) -> StageResult:
    """Create the .fslink directory in path (default: current directory)."""
    where = normalize_path(path) if path is not None else Path.cwd()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Checking for an existing project...")
        existed = (where / DB_DIRNAME).is_dir()

        yield (0.5, "Creating link database...")
        try:
            store, _ = _open_store(where, init=True)
        except (FslinkError, ValueError, OSError) as e:
            logger.error(f"init {where} failed: {e}")
            result_obj.output = LinkInitOutput(
                errors=[str(e)],
                warnings=[],
                project_root="",
                database_path="",
                created=False,
            ).model_dump(mode="python")
            result_obj.result = f"Failed to initialize {where}: {e}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        warnings = [f"{store.db_dir} already exists"] if existed else []
        result_obj.output = LinkInitOutput(
            errors=[],
            warnings=warnings,
            project_root=str(store.project_root),
            database_path=str(store.db_path),
            created=not existed,
        ).model_dump(mode="python")
        result_obj.result = (
            f"Already initialized: {store.db_dir}" if existed else f"Initialized link database in {store.db_dir}"
        )
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce=f"Initializing fslink project in {where}...", progress_callback=do_work)
