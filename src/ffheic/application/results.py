"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ffheic.schemas import ConversionConfig


@dataclass(frozen=True)
class ValidatedInput:
    """Validated configuration with the input path made absolute."""

    config: ConversionConfig
    input_path: Path
    is_dir: bool


@dataclass(frozen=True)
class ConversionJob:
    """One (input file, output file) pair handed to the converter."""

    input_path: Path
    output_path: Path


@dataclass(frozen=True)
class EnvironmentCheck:
    """Outcome of probing the converter."""

    ok: bool
    reason: str
    converter_path: str | None = None
    platform: str | None = None


@dataclass(frozen=True)
class BatchResult:
    """Jobs converted by a completed run, in order."""

    converted: tuple[ConversionJob, ...] = ()
