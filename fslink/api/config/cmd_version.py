"""Version command - returns fslink version information."""

import subprocess
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.config import ConfigVersionOutput
from ..StageResult import StageResult
from .get_package_version import get_package_version


def _checkout_root() -> Path:
    """Directory holding the fslink package (a source checkout when run from one)."""
    return Path(__file__).resolve().parents[3]


def _git_sha() -> str:
    """Short commit of the source checkout, empty for an installed package."""
    root = _checkout_root()
    if not (root / ".git").exists() or not (root / "fslink" / "__init__.py").exists():
        return ""
    try:
        return subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            stderr=subprocess.DEVNULL,
            cwd=str(root),
        ).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        return ""


def cmd_version() -> StageResult:
    """Get fslink version information."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Getting package version...")
        version = get_package_version()
        git_sha = _git_sha()
        yield (1.0, "Complete")

        full_version = f"{version} ({git_sha})" if git_sha else version
        result_obj.result = f"fslink version: {full_version}"
        result_obj.output = ConfigVersionOutput(
            errors=[],
            warnings=[],
            version=version,
            git_sha=git_sha,
            full_version=full_version,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Getting version information...",
        progress_callback=do_work,
    )
