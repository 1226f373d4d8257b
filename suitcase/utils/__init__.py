"""Utility modules for Suitcase.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
- progress: Spinner shown while a step runs
- directory: Working-directory stack (pushd/popd)
"""

from suitcase.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
    show_version,
)
from suitcase.utils.directory import DirectoryStack
from suitcase.utils.errors import (
    BatchCommandError,
    CommandFailedError,
    ConfigError,
    DirectoryChangeError,
    ExitCode,
    GitOperationError,
    NoRemotesConfiguredError,
    NotAGitRepositoryError,
    PackageNotInstalledError,
    PathDoesNotExistError,
    ProjectCommandError,
    PubspecError,
    ShellError,
    ShellStartError,
    SuitcaseError,
    UserCancelledError,
)
from suitcase.utils.logging import log_command, log_message, log_once, setup_logging
from suitcase.utils.progress import Progress, progress

__all__ = [
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "show_version",
    # Directory stack
    "DirectoryStack",
    # Errors
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
    # Logging
    "setup_logging",
    "log_message",
    "log_command",
    "log_once",
    # Progress
    "Progress",
    "progress",
]
