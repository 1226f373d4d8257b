"""Pin every Flutter project under a directory to one Flutter version via FVM."""

from __future__ import annotations

from collections.abc import Iterable

from suitcase.commands.fdp import discover_projects
from suitcase.integrations.dart import filter_projects
from suitcase.integrations.fvm import DEFAULT_FVM_COMMAND, install_version, use_command
from suitcase.integrations.shell import Shell
from suitcase.utils.console import print_info, print_success
from suitcase.utils.progress import progress
from suitcase.workflow.batch import DEFAULT_PROGRAM, BatchResult, run_for_each_project


def fvm_use_for_every_flutter_project(
    shell: Shell,
    version: str,
    path: str = ".",
    include_dart_projects: bool = False,
    fail_fast: bool = False,
    show_output: bool = False,
    program: str = DEFAULT_PROGRAM,
    fvm_command: str = DEFAULT_FVM_COMMAND,
    extra_ignored: Iterable[str] = (),
) -> BatchResult:
    """Install ``version`` once, then run ``fvm use`` in each project.

    With ``include_dart_projects`` plain Dart projects are pinned as well,
    which needs ``fvm use --force``.

    Raises:
        PathDoesNotExistError: If ``path`` is not a directory
        ShellError: If ``fvm install`` fails
        ProjectCommandError: On the first failure when ``fail_fast`` is set
        BatchCommandError: After the batch if any project failed
    """
    command_line = use_command(version, force=include_dart_projects, fvm_command=fvm_command)
    projects = discover_projects(path, extra_ignored)

    if include_dart_projects:
        print_info(f"Found {len(projects)} Dart and Flutter projects")
    else:
        projects = filter_projects(projects, include_dart=False)
        print_info(f"Found {len(projects)} Flutter projects")

    if not projects:
        print_info("No projects found")
        return BatchResult(command=command_line)

    with progress(f"Ensuring Flutter version '{version}' is installed"):
        install_version(shell, version, fvm_command=fvm_command)

    print_info(f"Running command '{command_line}' in {len(projects)} projects...")

    result = run_for_each_project(
        projects,
        command_line,
        shell=shell,
        label="Setting FVM version",
        fail_fast=fail_fast,
        show_output=show_output,
        program=program,
    )
    result.raise_for_failures()
    print_success(f"Flutter {version} set in {len(result.succeeded)} projects")
    return result


__all__ = ["fvm_use_for_every_flutter_project"]
