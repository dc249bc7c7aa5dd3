"""Config show command - display the effective user configuration."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .FslinkConfig import FslinkConfig


def cmd_show() -> StageResult:
    """Show the effective configuration (defaults when no config file exists)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Locating configuration...")
        config_path = FslinkConfig.get_config_path()
        exists = config_path.exists()

        yield (0.5, "Loading configuration...")
        try:
            config = FslinkConfig.load()
        except ValueError as e:
            result_obj.result = f"Failed to load configuration: {e}"
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                content={},
                config_path=str(config_path),
                exists=exists,
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        warnings = [] if exists else [f"No config file at {config_path}, using defaults"]
        result_obj.result = f"Configuration from {config_path}" if exists else "Default configuration"
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=warnings,
            content=config.to_dict(),
            config_path=str(config_path),
            exists=exists,
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce="Loading configuration...", progress_callback=do_work)
