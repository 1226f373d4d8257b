"""Progress spinner shown while a step is running.

Usage:
    with progress("Getting remote url"):
        url = get_remote_url(path)

While the block runs a spinner is shown; afterwards a single line reports
whether the step succeeded and how long it took. Exceptions raised inside
the block are re-raised unchanged after the failure line is printed.
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from rich.console import Console
from rich.status import Status
from rich.text import Text

from suitcase.utils.console import console as default_console

SPINNER = "dots"


def _timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


class Progress:
    """A single spinner line for one step of work."""

    def __init__(self, prompt: str, console: Console | None = None) -> None:
        self.prompt = prompt
        self._console = console or default_console
        self._start_time = 0.0
        self._status: Status | None = None

    @property
    def elapsed_ms(self) -> int:
        return int((time.perf_counter() - self._start_time) * 1000)

    def start(self) -> None:
        self._start_time = time.perf_counter()
        self._status = self._console.status(
            Text(f"[{_timestamp()}] {self.prompt}..."),
            spinner=SPINNER,
        )
        self._status.start()

    def _stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def success(self) -> None:
        self._stop()
        self._console.print(
            Text.assemble(
                ("✔", "green"),
                f" [{_timestamp()}] {self.prompt}",
                f" (took {self.elapsed_ms}ms)",
            )
        )

    def fail(self) -> None:
        self._stop()
        self._console.print(
            Text.assemble(
                ("✘", "red"),
                " ",
                (f"[{_timestamp()}] {self.prompt}", "bold"),
                f" (took {self.elapsed_ms}ms)",
            )
        )


@contextmanager
def progress(prompt: str, console: Console | None = None) -> Iterator[Progress]:
    """Show a spinner for the duration of the ``with`` block."""
    spinner = Progress(prompt, console=console)
    spinner.start()
    try:
        yield spinner
    except BaseException:
        spinner.fail()
        raise
    spinner.success()


__all__ = ["Progress", "progress"]
