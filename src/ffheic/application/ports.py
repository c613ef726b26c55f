"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TextIO


class CommandRunner(Protocol):
    """Locate and run external programs."""

    def which(self, name: str) -> str | None:
        """Return the resolved executable path, or ``None`` if not found."""

    def run(
        self,
        name: str,
        args: Sequence[str],
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> int:
        """Run ``name`` with ``args`` to completion and return its exit status.

        Raises ``CommandInvocationError`` if the program cannot be started.
        """
