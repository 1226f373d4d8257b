"""Custom exceptions and exit codes for Suitcase.

Every error raised on purpose by Suitcase derives from SuitcaseError and
carries the exit code the CLI should terminate with.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class ExitCode(IntEnum):
    """Process exit codes used by the CLI."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    TOOL_NOT_INSTALLED = 2
    COMMAND_FAILED = 3
    USER_CANCELLED = 4
    GIT_ERROR = 5


class SuitcaseError(Exception):
    """Base exception for all Suitcase errors.

    Subclasses override ``_default_exit_code``; callers may still pass an
    explicit ``exit_code`` to override it.
    """

    _default_exit_code = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code if exit_code is not None else self._default_exit_code


class UserCancelledError(SuitcaseError):
    """Raised when the user interrupts an operation."""

    _default_exit_code = ExitCode.USER_CANCELLED


class PathDoesNotExistError(SuitcaseError):
    """Raised when a path argument is missing or is not a directory."""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"path '{self.path}' does not exist or is not an accessible directory")


class DirectoryChangeError(SuitcaseError):
    """Raised when the working directory cannot be changed."""


class ConfigError(SuitcaseError):
    """Raised when a configuration file cannot be read or written."""


class ShellError(SuitcaseError):
    """Base class for failures while running an external program.

    Attributes:
        command: The program that was run
        args_list: The arguments passed to the program
    """

    _default_exit_code = ExitCode.COMMAND_FAILED

    def __init__(self, message: str, command: str, args: Sequence[str]) -> None:
        self.command = command
        self.args_list = list(args)
        super().__init__(message)

    @property
    def command_line(self) -> str:
        return " ".join([self.command, *self.args_list])

    @property
    def output(self) -> str:
        """Text to show the user in place of the command's output."""
        return str(self)


class CommandFailedError(ShellError):
    """Raised when a program runs but exits with a non-zero status."""

    def __init__(
        self,
        command: str,
        args: Sequence[str],
        status: int,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.status = status
        self.stdout = stdout
        self.stderr = stderr
        message = (
            f"failed to execute command (ran: '{command} {' '.join(args)}', "
            f"got status: exit status: {status})"
        )
        super().__init__(message, command, args)

    @property
    def output(self) -> str:
        return f"{self.stdout}\n---\n{self.stderr}"


class ShellStartError(ShellError):
    """Raised when a program cannot be started at all (e.g. not installed)."""

    _default_exit_code = ExitCode.TOOL_NOT_INSTALLED

    def __init__(self, command: str, args: Sequence[str], error: str) -> None:
        self.error = error
        message = f"failed to start shell: {error} (ran: '{command} {' '.join(args)}')"
        super().__init__(message, command, args)

    @property
    def output(self) -> str:
        return self.error


class GitOperationError(SuitcaseError):
    """Raised when a git operation fails."""

    _default_exit_code = ExitCode.GIT_ERROR


class NotAGitRepositoryError(GitOperationError):
    """Raised when a path is not inside a Git working tree."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"path '{path}' is not a Git repository")


class NoRemotesConfiguredError(GitOperationError):
    """Raised when a repository has no remote branches."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"project at path '{path}' has no remotes configured")


class PubspecError(SuitcaseError):
    """Raised when a pubspec.yaml file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to read pubspec.yaml file at path '{path}': {reason}")


class ProjectCommandError(SuitcaseError):
    """Raised in fail-fast mode when a command fails in a single project."""

    _default_exit_code = ExitCode.COMMAND_FAILED

    def __init__(self, project_name: str, command: str, error: ShellError) -> None:
        self.project_name = project_name
        self.command = command
        self.error = error
        super().__init__(
            f"failed to run command '{command}' on project '{project_name}': {error}"
        )


class BatchCommandError(SuitcaseError):
    """Raised when a command failed in one or more projects of a batch.

    Attributes:
        command: The command that was run in every project
        errors: (project name, error) pairs in the order they occurred
    """

    _default_exit_code = ExitCode.COMMAND_FAILED

    def __init__(self, command: str, errors: Sequence[tuple[str, ShellError]]) -> None:
        self.command = command
        self.errors = list(errors)
        details = "\n".join(f"  - {name}: {error}" for name, error in self.errors)
        super().__init__(
            f"error while executing command '{command}' for one or more projects "
            f"({len(self.errors)} failed):\n{details}"
        )


class PackageNotInstalledError(SuitcaseError):
    """Raised when the package to upgrade is not in the installed package list."""

    def __init__(self, package_name: str, installed: Sequence[str]) -> None:
        self.package_name = package_name
        self.installed = list(installed)
        super().__init__(
            f"could not find {package_name} package in installed packages "
            f"(all packages: {self.installed})"
        )


__all__ = [
    "ExitCode",
    "SuitcaseError",
    "UserCancelledError",
    "PathDoesNotExistError",
    "DirectoryChangeError",
    "ConfigError",
    "ShellError",
    "CommandFailedError",
    "ShellStartError",
    "GitOperationError",
    "NotAGitRepositoryError",
    "NoRemotesConfiguredError",
    "PubspecError",
    "ProjectCommandError",
    "BatchCommandError",
    "PackageNotInstalledError",
]
