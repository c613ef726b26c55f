"""Public conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, TextIO

from ffheic.application.options import (
    DEFAULT_CODEC_MARKER,
    DEFAULT_CONVERTER,
    ConverterSettings,
)
from ffheic.application.ports import CommandRunner
from ffheic.application.results import BatchResult
from ffheic.application.use_cases import run_conversion
from ffheic.infrastructure.runner import SubprocessCommandRunner
from ffheic.types import Reporter


def build_settings(
    converter: str = DEFAULT_CONVERTER,
    codec_marker: str = DEFAULT_CODEC_MARKER,
    overwrite: bool = True,
) -> ConverterSettings:
    """Build converter settings from command/API params."""
    return ConverterSettings(
        binary=converter,
        codec_marker=codec_marker,
        overwrite=overwrite,
    )


def convert_heic_path(
    output_format: str,
    input_path: str | Path,
    *,
    converter: str = DEFAULT_CONVERTER,
    codec_marker: str = DEFAULT_CODEC_MARKER,
    overwrite: bool = True,
    runner: Optional[CommandRunner] = None,
    reporter: Optional[Reporter] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> BatchResult:
    """Convert a HEIC file, or every ``.heic`` file in a directory.

    Parameters
    ----------
    output_format : str
        One of ``png``, ``jpg`` or ``jpeg``.
    input_path : str | Path
        A file, or a directory whose immediate ``.heic`` entries are converted.
    converter : str, default="ffmpeg"
        Converter executable looked up on ``PATH``.
    codec_marker : str, default="hevc"
        Codec name that must appear in the converter's codec listing.
    overwrite : bool, default=True
        Whether existing output files are replaced.
    runner : CommandRunner, optional
        Process runner; defaults to :class:`SubprocessCommandRunner`.
    reporter : callable, optional
        Receives each informational line of the run.

    Returns
    -------
    BatchResult
        The jobs that were converted, in order.
    """
    return run_conversion(
        output_format=output_format,
        input_path=input_path,
        settings=build_settings(converter, codec_marker, overwrite),
        runner=runner or SubprocessCommandRunner(),
        reporter=reporter,
        stdout=stdout,
        stderr=stderr,
    )
