"""Application use-cases orchestrating HEIC conversion runs."""

from __future__ import annotations

import io
import logging
import os
import platform
import re
import stat
import sys
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from ffheic.application.options import ConverterSettings
from ffheic.application.ports import CommandRunner
from ffheic.application.results import (
    BatchResult,
    ConversionJob,
    EnvironmentCheck,
    ValidatedInput,
)
from ffheic.errors import (
    CapabilityQueryFailed,
    CommandInvocationError,
    ConversionFailed,
    ConverterNotFound,
    DirectoryListError,
    EnvironmentCheckError,
    InvalidFormat,
    PathNotFound,
    PathResolutionError,
    UnsupportedCodec,
)
from ffheic.schemas import ConversionConfig
from ffheic.types import OUTPUT_FORMATS, Reporter

logger = logging.getLogger(__name__)


def validate_arguments(output_format: str, input_path: str | Path) -> ValidatedInput:
    """Use-case: validate the requested format and input path.

    The format is checked before the filesystem is touched.

    Raises
    ------
    InvalidFormat
        If ``output_format`` is not one of ``png``, ``jpg`` or ``jpeg``.
    PathNotFound
        If ``input_path`` cannot be statted.
    PathResolutionError
        If ``input_path`` cannot be made absolute.
    """
    try:
        config = ConversionConfig(output_format=output_format, input_path=input_path)
    except ValidationError as exc:
        raise InvalidFormat(
            f"Invalid output type {output_format!r}. "
            f"Use {', '.join(repr(fmt) for fmt in OUTPUT_FORMATS)}."
        ) from exc

    if not str(input_path):
        raise PathNotFound("Input path is empty.")
    try:
        stat_result = config.input_path.stat()
    except (OSError, ValueError) as exc:
        raise PathNotFound(f"Input path {str(input_path)!r} does not exist: {exc}") from exc

    try:
        absolute = Path(os.path.abspath(config.input_path))
    except (OSError, ValueError) as exc:
        raise PathResolutionError(
            f"Could not resolve absolute path for {str(input_path)!r}: {exc}"
        ) from exc

    is_dir = stat.S_ISDIR(stat_result.st_mode)
    logger.debug("validated input %s (directory=%s)", absolute, is_dir)
    return ValidatedInput(config=config, input_path=absolute, is_dir=is_dir)


def _query_capabilities(settings: ConverterSettings, runner: CommandRunner) -> str:
    out = io.StringIO()
    err = io.StringIO()
    try:
        status = runner.run(settings.binary, settings.capability_args, stdout=out, stderr=err)
    except CommandInvocationError as exc:
        raise CapabilityQueryFailed(
            f"Could not query {settings.binary} for supported codecs: {exc}"
        ) from exc
    if status != 0:
        detail = err.getvalue().strip() or f"exit status {status}"
        raise CapabilityQueryFailed(
            f"{settings.binary} {' '.join(settings.capability_args)} failed: {detail}"
        )
    return out.getvalue()


def _has_codec(listing: str, marker: str) -> bool:
    return re.search(rf"(?<![\w-]){re.escape(marker)}(?![\w-])", listing) is not None


def check_environment(settings: ConverterSettings, runner: CommandRunner) -> EnvironmentCheck:
    """Use-case: confirm the converter is installed and supports the codec.

    The same policy applies on every platform.

    Raises
    ------
    ConverterNotFound
        If the converter binary is not on the search path.
    CapabilityQueryFailed
        If the codec listing cannot be obtained.
    UnsupportedCodec
        If the codec marker is missing from the listing.
    """
    converter_path = runner.which(settings.binary)
    if converter_path is None:
        raise ConverterNotFound(
            f"The {settings.binary} command does not exist. "
            f"Install it and make sure it is on PATH."
        )
    logger.debug("found %s at %s", settings.binary, converter_path)

    listing = _query_capabilities(settings, runner)
    if not _has_codec(listing, settings.codec_marker):
        raise UnsupportedCodec(
            f"{settings.binary} at {converter_path} does not report support for "
            f"the {settings.codec_marker!r} codec."
        )

    return EnvironmentCheck(
        ok=True,
        reason=f"{settings.binary} supports {settings.codec_marker}",
        converter_path=converter_path,
        platform=platform.system() or sys.platform,
    )


def inspect_environment(settings: ConverterSettings, runner: CommandRunner) -> EnvironmentCheck:
    """Use-case: run the environment check and report instead of raising."""
    try:
        return check_environment(settings, runner)
    except EnvironmentCheckError as exc:
        return EnvironmentCheck(
            ok=False,
            reason=str(exc),
            converter_path=runner.which(settings.binary),
            platform=platform.system() or sys.platform,
        )


def derive_output_path(input_path: Path, output_format: str) -> Path:
    """Replace the final extension of ``input_path`` with ``output_format``.

    ``photo.heic`` becomes ``photo.png``; ``photo`` becomes ``photo.png``;
    a file named just ``.heic`` becomes ``.png``.
    """
    stem, dot, _ext = input_path.name.rpartition(".")
    base = stem if dot else input_path.name
    return input_path.with_name(f"{base}.{output_format}")


def discover_jobs(
    validated: ValidatedInput, settings: ConverterSettings
) -> list[ConversionJob]:
    """Use-case: map the validated input path to an ordered list of jobs.

    A directory yields one job per immediate regular file whose name ends
    with ``settings.input_extension`` (case-sensitive), in name order. A single
    file always yields exactly one job.

    Raises
    ------
    DirectoryListError
        If the directory cannot be listed.
    """
    output_format = validated.config.output_format
    if not validated.is_dir:
        inputs: Iterable[Path] = [validated.input_path]
    else:
        try:
            entries = sorted(validated.input_path.iterdir(), key=lambda p: p.name)
            inputs = [
                entry
                for entry in entries
                if entry.name.endswith(settings.input_extension) and entry.is_file()
            ]
        except OSError as exc:
            raise DirectoryListError(
                f"Could not list directory {validated.input_path}: {exc}"
            ) from exc

    jobs = [
        ConversionJob(input_path=path, output_path=derive_output_path(path, output_format))
        for path in inputs
    ]
    logger.debug("discovered %d job(s) in %s", len(jobs), validated.input_path)
    return jobs


def convert_jobs(
    jobs: Iterable[ConversionJob],
    settings: ConverterSettings,
    runner: CommandRunner,
    on_converted: Callable[[ConversionJob], None] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> BatchResult:
    """Use-case: convert jobs one at a time, stopping at the first failure.

    Files converted before a failure are left in place.

    Raises
    ------
    ConversionFailed
        If the converter cannot be started or exits non-zero.
    """
    converted: list[ConversionJob] = []
    for job in jobs:
        if job.output_path == job.input_path:
            raise ConversionFailed(
                job.input_path, "output path would overwrite the input file"
            )
        args = settings.conversion_args(job.input_path, job.output_path)
        logger.debug("running %s %s", settings.binary, " ".join(args))
        try:
            status = runner.run(settings.binary, args, stdout=stdout, stderr=stderr)
        except CommandInvocationError as exc:
            raise ConversionFailed(job.input_path, exc) from exc
        if status != 0:
            raise ConversionFailed(
                job.input_path, f"{settings.binary} exited with status {status}"
            )
        converted.append(job)
        if on_converted is not None:
            on_converted(job)
    return BatchResult(converted=tuple(converted))


def run_conversion(
    *,
    output_format: str,
    input_path: str | Path,
    settings: ConverterSettings,
    runner: CommandRunner,
    reporter: Reporter | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> BatchResult:
    """Use-case: validate, check the environment, then convert every job."""
    report: Reporter = reporter or (lambda _line: None)

    validated = validate_arguments(output_format, input_path)
    report(f"Input Path: {validated.input_path}")
    report(f"Output Type: {validated.config.output_format}")

    check_environment(settings, runner)
    report("Converter requirements are met.")

    jobs = discover_jobs(validated, settings)
    if not jobs:
        logger.warning(
            "no %s files found in %s", settings.input_extension, validated.input_path
        )
    return convert_jobs(
        jobs,
        settings,
        runner,
        on_converted=lambda job: report(
            f"Converted {job.input_path} to {job.output_path} OK."
        ),
        stdout=stdout,
        stderr=stderr,
    )
