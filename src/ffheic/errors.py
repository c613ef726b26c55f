"""Error hierarchy for HEIC conversion runs.

Every error is terminal: the first one raised aborts the run and is
reported by the CLI with the ``exit_code`` of its category.
"""

from __future__ import annotations

from pathlib import Path


class FfheicError(Exception):
    """Base error for ffheic."""

    exit_code = 1


class CommandInvocationError(FfheicError):
    """External program could not be started."""


class ValidationError(FfheicError):
    """Invalid command-line arguments."""

    exit_code = 2


class InvalidFormat(ValidationError):
    """Requested output format is not supported."""


class PathNotFound(ValidationError):
    """Input path cannot be statted."""


class PathResolutionError(ValidationError):
    """Input path cannot be made absolute."""


class EnvironmentCheckError(FfheicError):
    """Host environment cannot run conversions."""

    exit_code = 3


class ConverterNotFound(EnvironmentCheckError):
    """Converter binary is not on the search path."""


class CapabilityQueryFailed(EnvironmentCheckError):
    """Converter codec listing could not be obtained."""


class UnsupportedCodec(EnvironmentCheckError):
    """Converter does not report the required codec."""


class BatchError(FfheicError):
    """Failure while discovering or converting files."""

    exit_code = 4


class DirectoryListError(BatchError):
    """Input directory cannot be listed."""


class ConversionFailed(BatchError):
    """A single file failed to convert; the batch stops here."""

    def __init__(self, file: Path, underlying: str | BaseException) -> None:
        self.file = file
        self.underlying = underlying
        super().__init__(f"Failed to convert {file}: {underlying}")
