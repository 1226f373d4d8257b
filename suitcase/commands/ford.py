"""Run a shell command in every Dart project under a directory."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from suitcase.commands.fdp import discover_projects
from suitcase.integrations.dart import filter_projects
from suitcase.integrations.shell import Shell
from suitcase.utils.console import print_info, print_success
from suitcase.workflow.batch import DEFAULT_PROGRAM, BatchResult, run_for_each_project


def for_every_dart_project(
    shell: Shell,
    command: Sequence[str],
    path: str = ".",
    include_flutter_projects: bool = True,
    fail_fast: bool = False,
    show_output: bool = False,
    program: str = DEFAULT_PROGRAM,
    extra_ignored: Iterable[str] = (),
) -> BatchResult:
    """Run ``command`` (words joined by spaces) in each discovered project.

    Raises:
        PathDoesNotExistError: If ``path`` is not a directory
        ProjectCommandError: On the first failure when ``fail_fast`` is set
        BatchCommandError: After the batch if any project failed
    """
    command_line = " ".join(command)
    projects = discover_projects(path, extra_ignored)

    if include_flutter_projects:
        print_info(f"Found {len(projects)} Dart and Flutter projects")
    else:
        projects = filter_projects(projects, include_flutter=False)
        print_info(f"Found {len(projects)} Dart (non-Flutter) projects")

    if not projects:
        print_info("No projects found")
        return BatchResult(command=command_line)

    result = run_for_each_project(
        projects,
        command_line,
        shell=shell,
        label="Running command",
        fail_fast=fail_fast,
        show_output=show_output,
        program=program,
    )
    result.raise_for_failures()
    print_success(f"Command '{command_line}' succeeded in {len(result.succeeded)} projects")
    return result


__all__ = ["for_every_dart_project"]
