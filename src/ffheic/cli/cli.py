#!/usr/bin/env python3
"""
ffheic.cli.cli

Typer-based CLI for converting HEIC images to PNG or JPEG.

The actual decoding and encoding is done by an external converter (``ffmpeg``
by default) that must be installed and on ``PATH``.

Examples
--------
Convert every ``.heic`` file in a directory:

    ffheic convert --output png --input ~/Pictures/export

Convert a single file with a different converter binary:

    FFHEIC_CONVERTER=/opt/ffmpeg/bin/ffmpeg ffheic convert --output jpg --input x.heic

Check that the converter is usable:

    ffheic doctor
"""

from __future__ import annotations

import logging
import sys
import traceback

import typer

from ffheic.application.options import DEFAULT_CODEC_MARKER, DEFAULT_CONVERTER
from ffheic.errors import FfheicError

app = typer.Typer(
    name="ffheic",
    help="Convert HEIC/HEIF images to PNG or JPEG using ffmpeg.",
    no_args_is_help=True,
)

CONVERTER_HELP = "Converter executable, looked up on PATH."
CODEC_HELP = "Codec that must appear in the converter's codec listing."


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised during the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("ffheic").setLevel(logging.DEBUG if debug else logging.WARNING)


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks on error."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug logging and error output.
    """
    _configure_logging(debug)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    output_format: str = typer.Option(
        ..., "--output", "-o", help="Output format: png, jpg or jpeg."
    ),
    input_path: str = typer.Option(
        ..., "--input", "-i", help="File or directory path to convert."
    ),
    converter: str = typer.Option(
        DEFAULT_CONVERTER, "--converter", envvar="FFHEIC_CONVERTER", help=CONVERTER_HELP
    ),
    codec: str = typer.Option(
        DEFAULT_CODEC_MARKER, "--codec", envvar="FFHEIC_CODEC", help=CODEC_HELP
    ),
    overwrite: bool = typer.Option(
        True, "--overwrite/--no-overwrite", help="Replace existing output files."
    ),
) -> None:
    """Convert a HEIC file, or every .heic file in a directory.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    output_format : str
        Target format.
    input_path : str
        Source file or directory. Directories are not searched recursively.

    Notes
    -----
    - Output files are written next to their inputs with the extension
      replaced, e.g. ``IMG_0001.heic`` -> ``IMG_0001.png``.
    - The run stops at the first file that fails to convert.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from ffheic.api import convert_heic_path

        convert_heic_path(
            output_format,
            input_path,
            converter=converter,
            codec_marker=codec,
            overwrite=overwrite,
            reporter=typer.echo,
            stdout=sys.stdout,
            stderr=sys.stderr,
        )
    except FfheicError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_error(exc, debug))

    typer.echo("Processing completed successfully.")


@app.command("doctor")
def doctor_cmd(
    converter: str = typer.Option(
        DEFAULT_CONVERTER, "--converter", envvar="FFHEIC_CONVERTER", help=CONVERTER_HELP
    ),
    codec: str = typer.Option(
        DEFAULT_CODEC_MARKER, "--codec", envvar="FFHEIC_CODEC", help=CODEC_HELP
    ),
) -> None:
    """Print converter diagnostics and whether conversions can run."""
    from ffheic.api import build_settings
    from ffheic.application.use_cases import inspect_environment
    from ffheic.infrastructure.runner import SubprocessCommandRunner

    check = inspect_environment(
        build_settings(converter, codec), SubprocessCommandRunner()
    )

    typer.echo(f"Python: {sys.version.split()[0]}")
    typer.echo(f"Platform: {check.platform}")
    typer.echo(f"{converter}: {check.converter_path or '<not installed>'}")
    if check.ok:
        typer.echo(f"{codec}: supported")
        return
    typer.echo(f"✗ {check.reason}", err=True)
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
