"""Convert HEIC/HEIF images to PNG or JPEG with an external converter."""

from __future__ import annotations

from pathlib import Path

from ffheic.application.results import BatchResult
from ffheic.types import Reporter

__version__ = "0.1.0"


def convert(
    output_format: str,
    input_path: str | Path,
    *,
    converter: str = "ffmpeg",
    reporter: Reporter | None = None,
) -> BatchResult:
    """Convert ``input_path`` to ``output_format`` using ``converter``.

    See :func:`ffheic.api.convert_heic_path` for the full set of options.
    """
    from .api import convert_heic_path as _impl

    return _impl(output_format, input_path, converter=converter, reporter=reporter)


__all__ = ["BatchResult", "convert", "__version__"]
