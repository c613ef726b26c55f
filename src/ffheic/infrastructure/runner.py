"""Subprocess-backed command runner."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence
from typing import TextIO

from ffheic.errors import CommandInvocationError

logger = logging.getLogger(__name__)


def _passthrough(sink: TextIO | None) -> bool:
    """Return True if ``sink`` is backed by a real file descriptor."""
    if sink is None:
        return True
    try:
        sink.fileno()
    except (AttributeError, OSError, ValueError):
        return False
    return True


class SubprocessCommandRunner:
    """Default runner: ``shutil.which`` lookup and ``subprocess.run`` execution.

    Sinks with a file descriptor are handed to the child process directly, so
    its output streams through as it runs. Other sinks (``io.StringIO``, test
    capture buffers) receive the captured text once the process exits.
    """

    def which(self, name: str) -> str | None:
        return shutil.which(name)

    def run(
        self,
        name: str,
        args: Sequence[str],
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> int:
        """Run ``name`` with ``args`` and wait for it to exit.

        Parameters
        ----------
        name : str
            Program to run, resolved against ``PATH``.
        args : Sequence[str]
            Arguments passed after the program name.
        stdout, stderr : TextIO | None
            Where the child's output goes. ``None`` inherits this process's
            streams.

        Returns
        -------
        int
            The child's exit status.

        Raises
        ------
        CommandInvocationError
            If the program cannot be started.
        """
        out_direct = _passthrough(stdout)
        err_direct = _passthrough(stderr)
        for sink in (stdout, stderr):
            if sink is not None:
                sink.flush()

        try:
            completed = subprocess.run(
                [name, *args],
                stdout=stdout if out_direct else subprocess.PIPE,
                stderr=stderr if err_direct else subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise CommandInvocationError(f"Could not run {name}: {exc}") from exc

        if not out_direct and stdout is not None and completed.stdout:
            stdout.write(completed.stdout)
        if not err_direct and stderr is not None and completed.stderr:
            stderr.write(completed.stderr)
        logger.debug("%s exited with status %d", name, completed.returncode)
        return completed.returncode
