"""Application-layer use-cases and option objects."""

from __future__ import annotations

from ffheic.application.options import ConverterSettings
from ffheic.application.ports import CommandRunner
from ffheic.application.results import (
    BatchResult,
    ConversionJob,
    EnvironmentCheck,
    ValidatedInput,
)
from ffheic.application.use_cases import (
    check_environment,
    convert_jobs,
    derive_output_path,
    discover_jobs,
    inspect_environment,
    run_conversion,
    validate_arguments,
)

__all__ = [
    "BatchResult",
    "CommandRunner",
    "ConversionJob",
    "ConverterSettings",
    "EnvironmentCheck",
    "ValidatedInput",
    "check_environment",
    "convert_jobs",
    "derive_output_path",
    "discover_jobs",
    "inspect_environment",
    "run_conversion",
    "validate_arguments",
]
