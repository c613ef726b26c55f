"""Integration tests for CLI doctor command."""

from __future__ import annotations

from typer.testing import CliRunner

from ffheic.cli import cli as cli_module


def test_doctor_command_runs_and_prints_python() -> None:
    """Run doctor against the real environment and check baseline diagnostics."""
    runner = CliRunner()
    result = runner.invoke(cli_module.app, ["doctor"])

    assert result.exit_code in (0, 1)
    assert "Python:" in result.output
    assert "Platform:" in result.output
    assert "ffmpeg:" in result.output


def test_doctor_with_missing_converter_fails() -> None:
    """Exit 1 when the configured converter is not installed."""
    runner = CliRunner()
    result = runner.invoke(
        cli_module.app, ["doctor", "--converter", "ffheic-definitely-missing-binary"]
    )

    assert result.exit_code == 1
    assert "<not installed>" in result.output
