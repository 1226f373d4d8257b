"""Run one shell command in every project of a batch.

Projects are processed strictly in order, one at a time. Each command runs
from inside the project directory under its own progress spinner. Failures
either abort the batch immediately (fail-fast) or are collected so the whole
batch can be reported at the end.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from suitcase.integrations.dart import DartProject
from suitcase.integrations.shell import Shell
from suitcase.utils.console import print_info
from suitcase.utils.directory import DirectoryStack
from suitcase.utils.errors import BatchCommandError, ProjectCommandError, ShellError
from suitcase.utils.logging import log_message
from suitcase.utils.progress import progress

DEFAULT_PROGRAM = "bash"


@dataclass
class ProjectFailure:
    project: DartProject
    error: ShellError


@dataclass
class BatchResult:
    """Outcome of running a command across a batch of projects."""

    command: str
    succeeded: list[DartProject] = field(default_factory=list)
    failures: list[ProjectFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def raise_for_failures(self) -> None:
        """Raise BatchCommandError if any project failed."""
        if self.failures:
            raise BatchCommandError(
                self.command,
                [(failure.project.name, failure.error) for failure in self.failures],
            )


def run_for_each_project(
    projects: Sequence[DartProject],
    command: str,
    *,
    shell: Shell,
    label: str = "Running command",
    fail_fast: bool = False,
    show_output: bool = False,
    program: str = DEFAULT_PROGRAM,
    directories: DirectoryStack | None = None,
) -> BatchResult:
    """Run ``command`` through ``program -c`` inside every project.

    Raises:
        ProjectCommandError: On the first failure when ``fail_fast`` is set
        DirectoryChangeError: If a project directory cannot be entered
    """
    directories = directories or DirectoryStack()
    result = BatchResult(command=command)
    log_message(f"running '{command}' in {len(projects)} projects (fail_fast={fail_fast})")

    for project in projects:
        with directories.pushd(project.path):
            try:
                with progress(f"{label} in '{project.name}' ('{project.path}')"):
                    output = shell.run(program, "-c", command)
            except ShellError as e:
                if show_output:
                    _show_output(e.output)
                if fail_fast:
                    raise ProjectCommandError(project.name, command, e) from e
                result.failures.append(ProjectFailure(project=project, error=e))
                continue

        result.succeeded.append(project)
        if show_output:
            _show_output(output.stdout)

    return result


def _show_output(output: str) -> None:
    print_info(f"Output:\n{output}\n---")


__all__ = [
    "DEFAULT_PROGRAM",
    "ProjectFailure",
    "BatchResult",
    "run_for_each_project",
]
