"""Working-directory stack, the Python counterpart of ``pushd``/``popd``."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from suitcase.utils.errors import DirectoryChangeError
from suitcase.utils.logging import log_message


class DirectoryStack:
    """Tracks directory changes so they can be undone in order.

    The bottom entry is the working directory at construction time and can
    never be popped.
    """

    def __init__(self) -> None:
        self._stack: list[Path] = [Path.cwd()]

    @property
    def cwd(self) -> Path:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack)

    def push(self, path: str | Path) -> Path:
        """Change into ``path`` and return the directory that was left."""
        previous = self.cwd
        target = (previous / path).resolve()
        log_message(f"changing cwd from {previous} to {target}")
        try:
            os.chdir(target)
        except OSError as e:
            raise DirectoryChangeError(
                f"failed to change cwd from '{previous}' to '{target}': {e}"
            ) from e
        self._stack.append(target)
        return previous

    def pop(self) -> Path:
        """Return to the previous directory and return the one that was left."""
        if len(self._stack) == 1:
            raise DirectoryChangeError("cannot popd from root directory")
        left = self._stack.pop()
        log_message(f"changing cwd from {left} to {self.cwd}")
        try:
            os.chdir(self.cwd)
        except OSError as e:
            raise DirectoryChangeError(
                f"failed to change cwd from '{left}' to '{self.cwd}': {e}"
            ) from e
        return left

    @contextmanager
    def pushd(self, path: str | Path) -> Iterator[Path]:
        """Change into ``path`` for the duration of the block."""
        self.push(path)
        try:
            yield self.cwd
        except BaseException:
            # Keep the error from the block; a failed restore is only logged
            try:
                self.pop()
            except DirectoryChangeError as e:
                log_message(f"failed to restore cwd: {e}")
            raise
        self.pop()


__all__ = ["DirectoryStack"]
