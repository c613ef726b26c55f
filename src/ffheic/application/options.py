"""Typed converter settings shared across use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONVERTER = "ffmpeg"
DEFAULT_CODEC_MARKER = "hevc"
DEFAULT_INPUT_EXTENSION = ".heic"


@dataclass(frozen=True)
class ConverterSettings:
    """How the external converter is located, probed, and invoked."""

    binary: str = DEFAULT_CONVERTER
    capability_args: tuple[str, ...] = ("-hide_banner", "-codecs")
    codec_marker: str = DEFAULT_CODEC_MARKER
    input_extension: str = DEFAULT_INPUT_EXTENSION
    overwrite: bool = True

    def conversion_args(self, input_path: Path, output_path: Path) -> list[str]:
        """Build the converter argument vector for one job."""
        args = ["-nostdin", "-hide_banner"]
        if self.overwrite:
            args.append("-y")
        else:
            args.append("-n")
        args.extend(["-i", str(input_path), str(output_path)])
        return args
