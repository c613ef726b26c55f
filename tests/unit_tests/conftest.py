"""Shared fakes for unit tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

import pytest

from ffheic.errors import CommandInvocationError

FFMPEG_CODECS = """Codecs:
 D..... = Decoding supported
 .E.... = Encoding supported
 -------
 DEV.L. h264                 H.264 / AVC / MPEG-4 AVC / MPEG-4 part 10
 DEV.L. hevc                 H.265 / HEVC (High Efficiency Video Coding)
 DEVI.S png                  PNG (Portable Network Graphics) image
"""


class FakeRunner:
    """Command runner that records invocations and returns scripted results.

    Successful conversion calls create the output file, so tests can see
    which outputs a run left behind.
    """

    def __init__(
        self,
        resolved: str | None = "/usr/bin/ffmpeg",
        codecs: str = FFMPEG_CODECS,
        capability_status: int = 0,
        fail_on: set[str] | None = None,
        raise_on: set[str] | None = None,
    ) -> None:
        self.resolved = resolved
        self.codecs = codecs
        self.capability_status = capability_status
        self.fail_on = fail_on or set()
        self.raise_on = raise_on or set()
        self.which_calls: list[str] = []
        self.calls: list[tuple[str, list[str]]] = []

    @property
    def conversion_calls(self) -> list[list[str]]:
        return [args for _name, args in self.calls if "-i" in args]

    def which(self, name: str) -> str | None:
        self.which_calls.append(name)
        return self.resolved

    def run(
        self,
        name: str,
        args: Sequence[str],
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> int:
        args = list(args)
        self.calls.append((name, args))
        if "-codecs" in args:
            if "-codecs" in self.raise_on:
                raise CommandInvocationError(f"Could not run {name}: permission denied")
            if stdout is not None:
                stdout.write(self.codecs)
            if self.capability_status and stderr is not None:
                stderr.write("codec listing crashed\n")
            return self.capability_status

        source = Path(args[args.index("-i") + 1])
        target = Path(args[-1])
        if source.name in self.raise_on:
            raise CommandInvocationError(f"Could not run {name}: no such file")
        if source.name in self.fail_on:
            if stderr is not None:
                stderr.write(f"{source}: Invalid data found when processing input\n")
            return 1
        target.write_bytes(b"converted")
        return 0


@pytest.fixture
def runner() -> FakeRunner:
    """Fake runner with ffmpeg present and HEVC supported."""
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory for fake runners with custom scripted behavior."""
    return FakeRunner


@pytest.fixture
def heic_dir(tmp_path: Path) -> Path:
    """Directory with two HEIC files and one unrelated file."""
    for name in ("b.heic", "a.heic", "c.txt"):
        (tmp_path / name).write_bytes(b"\x00\x00\x00\x18ftypheic")
    return tmp_path
