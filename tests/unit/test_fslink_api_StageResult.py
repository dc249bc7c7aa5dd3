"""Unit tests for fslink.api.StageResult module."""

from collections.abc import Iterator

from fslink.api.StageResult import StageResult


def test_stage_result_initialization():
    """StageResult starts empty and unsuccessful."""

    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (1.0, "Complete")

    result = StageResult(announce="Testing", progress_callback=progress_gen)
    assert result.announce == "Testing"
    assert result.result == ""
    assert result.output == {}
    assert result.success is False


def test_progress_callback_fills_result():
    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Halfway")
        result.result = "Done"
        result.output = {"test": True}
        result.success = True
        yield (1.0, "Complete")

    result = StageResult(announce="Testing", progress_callback=progress_gen)
    progress = list(result.progress_callback(result))

    assert progress == [(0.5, "Halfway"), (1.0, "Complete")]
    assert result.success is True
    assert result.output == {"test": True}
