"""Thin wrapper around subprocess for running host programs.

All external tools (git, pip, fvm, bash, open) go through Shell.run so that
failures surface as typed errors and every invocation is logged.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from suitcase.utils.errors import CommandFailedError, ShellStartError
from suitcase.utils.logging import log_command


@dataclass(frozen=True)
class ShellOutput:
    """Captured output of a successful command."""

    stdout: str
    stderr: str = ""


class Shell:
    """Runs commands on the host system."""

    def run(self, command: str, *args: object, cwd: str | Path | None = None) -> ShellOutput:
        """Run ``command`` with ``args`` and return its captured output.

        Arguments are converted with ``str()``. The program is executed
        directly, never through an implicit shell. Output is decoded as UTF-8;
        undecodable bytes become U+FFFD instead of failing the run.

        Raises:
            ShellStartError: If the program could not be started
            CommandFailedError: If the program exited with a non-zero status
        """
        str_args = [str(arg) for arg in args]
        command_line = " ".join([command, *str_args])

        try:
            result = subprocess.run(
                [command, *str_args],
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                cwd=cwd,
            )
        except OSError as e:
            log_command(command_line)
            raise ShellStartError(command, str_args, str(e)) from e

        log_command(command_line, exit_code=result.returncode)

        if result.returncode != 0:
            raise CommandFailedError(
                command,
                str_args,
                status=result.returncode,
                stdout=result.stdout or "",
                stderr=result.stderr or "",
            )

        return ShellOutput(stdout=result.stdout or "", stderr=result.stderr or "")


__all__ = ["Shell", "ShellOutput"]
