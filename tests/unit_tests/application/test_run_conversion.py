"""Unit tests for the full conversion pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from ffheic.application.options import ConverterSettings
from ffheic.application.use_cases import run_conversion
from ffheic.errors import ConverterNotFound, InvalidFormat, PathNotFound


def test_pipeline_reports_each_stage(heic_dir: Path, runner: Any) -> None:
    """Emit validation, requirement, and per-file lines in order."""
    lines: list[str] = []

    result = run_conversion(
        output_format="png",
        input_path=heic_dir,
        settings=ConverterSettings(),
        runner=runner,
        reporter=lines.append,
    )

    root = heic_dir.resolve()
    assert len(result.converted) == 2
    assert lines == [
        f"Input Path: {root}",
        "Output Type: png",
        "Converter requirements are met.",
        f"Converted {root / 'a.heic'} to {root / 'a.png'} OK.",
        f"Converted {root / 'b.heic'} to {root / 'b.png'} OK.",
    ]


def test_missing_path_never_invokes_runner(tmp_path: Path, runner: Any) -> None:
    """Fail validation before any process interaction."""
    with pytest.raises(PathNotFound):
        run_conversion(
            output_format="png",
            input_path=tmp_path / "nope",
            settings=ConverterSettings(),
            runner=runner,
        )
    assert runner.which_calls == []
    assert runner.calls == []


def test_invalid_format_never_invokes_runner(heic_dir: Path, runner: Any) -> None:
    """Reject the format before any process interaction."""
    with pytest.raises(InvalidFormat):
        run_conversion(
            output_format="tiff",
            input_path=heic_dir,
            settings=ConverterSettings(),
            runner=runner,
        )
    assert runner.which_calls == []
    assert runner.calls == []


def test_missing_converter_attempts_no_jobs(heic_dir: Path, make_runner: Any) -> None:
    """Abort before conversion when the converter is not installed."""
    runner = make_runner(resolved=None)

    with pytest.raises(ConverterNotFound):
        run_conversion(
            output_format="jpg",
            input_path=heic_dir,
            settings=ConverterSettings(),
            runner=runner,
        )
    assert runner.calls == []
    assert not list(heic_dir.glob("*.jpg"))


def test_empty_directory_logs_warning(
    tmp_path: Path, runner: Any, caplog: pytest.LogCaptureFixture
) -> None:
    """Succeed with no jobs and warn that nothing matched."""
    with caplog.at_level("WARNING", logger="ffheic.application.use_cases"):
        result = run_conversion(
            output_format="png",
            input_path=tmp_path,
            settings=ConverterSettings(),
            runner=runner,
        )

    assert result.converted == ()
    assert "no .heic files found" in caplog.text
