"""Typer application for Suitcase.

Global options live on the app callback, which also loads configuration and
creates the Shell shared by every subcommand. Subcommands only parse their
options, resolve defaults from configuration and delegate to
suitcase.commands.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Annotated, Optional

import typer

from suitcase.commands import (
    find_projects,
    for_every_dart_project,
    fvm_use_for_every_flutter_project,
    git_hub_open,
    upgrade,
)
from suitcase.config.manager import ConfigManager
from suitcase.integrations.shell import Shell
from suitcase.utils.console import print_error, print_info, print_warning, show_version
from suitcase.utils.errors import ExitCode, SuitcaseError, UserCancelledError
from suitcase.utils.logging import log_message, setup_logging

app = typer.Typer(
    name="suitcase",
    help="A set of personal CLI tools to automate common tasks in software development "
    "(including Git, Dart, and Flutter).",
    add_completion=False,
    no_args_is_help=True,
)

config_app = typer.Typer(help="Show or change Suitcase configuration.", no_args_is_help=True)
app.add_typer(config_app, name="config")


@dataclass
class AppContext:
    """State shared by all subcommands through ``ctx.obj``."""

    shell: Shell
    config: ConfigManager
    verbose: bool = False


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print verbose output."),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """A set of personal CLI tools for Git, Dart and Flutter projects."""
    setup_logging(verbose=verbose)

    config = ConfigManager()
    with _handle_errors():
        config.load()

    ctx.obj = AppContext(shell=Shell(), config=config, verbose=verbose)


@contextmanager
def _handle_errors() -> Iterator[None]:
    """Map Suitcase errors and interrupts to messages and exit codes."""
    try:
        yield
    except UserCancelledError as e:
        print_info(f"\n{e}")
        raise typer.Exit(ExitCode.USER_CANCELLED)
    except SuitcaseError as e:
        log_message(f"command failed: {e!r}")
        print_error(str(e))
        raise typer.Exit(e.exit_code)
    except KeyboardInterrupt:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.USER_CANCELLED)


def _state(ctx: typer.Context) -> AppContext:
    state = ctx.find_object(AppContext)
    if state is None:
        raise RuntimeError("suitcase command invoked without the app callback")
    return state


@app.command("gho")
def gho_command(
    ctx: typer.Context,
    path: Annotated[
        str,
        typer.Argument(help="The path of the project for which to open the Git repository."),
    ] = ".",
    remote: Annotated[
        Optional[str],
        typer.Option("--remote", "-r", help="Remote to open (default: GIT_REMOTE, 'origin')."),
    ] = None,
) -> None:
    """Open the current directory's Git repository in the default browser.

    Optionally provide a path to open a specific directory's repository
    other than the current directory.
    """
    state = _state(ctx)
    settings = state.config.settings
    with _handle_errors():
        git_hub_open(
            state.shell,
            path=path,
            remote=remote or settings.git_remote,
            open_command=settings.get_open_command(),
        )


@app.command("upgrade")
def upgrade_command(ctx: typer.Context) -> None:
    """Upgrade suitcase to the latest version.

    Packages installed in editable mode are reinstalled from their local
    path; otherwise the latest release is installed with pip.
    """
    state = _state(ctx)
    with _handle_errors():
        upgrade(state.shell)


app.command("update", help="Alias for 'upgrade'.")(upgrade_command)


@app.command("fdp")
def fdp_command(
    ctx: typer.Context,
    path: Annotated[
        str,
        typer.Option("--path", "-p", help="The path from which to search for Dart projects."),
    ] = ".",
) -> None:
    """Find every Dart and Flutter project under a directory."""
    state = _state(ctx)
    with _handle_errors():
        find_projects(path, extra_ignored=state.config.settings.get_extra_ignored_folders())


@app.command("ford")
def ford_command(
    ctx: typer.Context,
    command: Annotated[
        list[str],
        typer.Argument(help="The command to run on each Dart project."),
    ],
    path: Annotated[
        str,
        typer.Option("--path", "-p", help="The path from which to search for Dart projects."),
    ] = ".",
    include_flutter_projects: Annotated[
        bool,
        typer.Option(
            "--include-flutter-projects/--exclude-flutter-projects",
            "-i/-I",
            help="Include Flutter projects when searching for Dart projects.",
        ),
    ] = True,
    fail_fast: Annotated[
        Optional[bool],
        typer.Option(
            "--fail-fast/--no-fail-fast",
            "-f/-F",
            help="Exit immediately if the command fails in any project (default: FAIL_FAST).",
        ),
    ] = None,
    show_output: Annotated[
        Optional[bool],
        typer.Option(
            "--show-output/--hide-output",
            "-s/-S",
            help="Show the output of the command in each project (default: SHOW_OUTPUT).",
        ),
    ] = None,
) -> None:
    """For every Dart project, run a command.

    Use '--' before the command when it has options of its own, e.g.
    'suitcase ford -- dart pub get --offline'.
    """
    state = _state(ctx)
    settings = state.config.settings
    with _handle_errors():
        for_every_dart_project(
            state.shell,
            command,
            path=path,
            include_flutter_projects=include_flutter_projects,
            fail_fast=settings.fail_fast if fail_fast is None else fail_fast,
            show_output=settings.show_output if show_output is None else show_output,
            program=settings.batch_shell,
            extra_ignored=settings.get_extra_ignored_folders(),
        )


@app.command("fua")
def fua_command(
    ctx: typer.Context,
    version: Annotated[
        str,
        typer.Argument(help="The Flutter version to use in every project (e.g. 3.19.0, stable)."),
    ],
    path: Annotated[
        str,
        typer.Option("--path", "-p", help="The path from which to search for Flutter projects."),
    ] = ".",
    include_dart_projects: Annotated[
        bool,
        typer.Option(
            "--include-dart-projects",
            "-i",
            help="Force FVM to set the version for every Dart project (even non-Flutter ones).",
        ),
    ] = False,
    fail_fast: Annotated[
        Optional[bool],
        typer.Option(
            "--fail-fast/--no-fail-fast",
            "-f/-F",
            help="Exit immediately if FVM fails in any project (default: FAIL_FAST).",
        ),
    ] = None,
    show_output: Annotated[
        Optional[bool],
        typer.Option(
            "--show-output/--hide-output",
            "-s/-S",
            help="Show the output of FVM in each project (default: SHOW_OUTPUT).",
        ),
    ] = None,
) -> None:
    """FVM use a Flutter version in every Flutter project."""
    state = _state(ctx)
    settings = state.config.settings
    with _handle_errors():
        fvm_use_for_every_flutter_project(
            state.shell,
            version,
            path=path,
            include_dart_projects=include_dart_projects,
            fail_fast=settings.fail_fast if fail_fast is None else fail_fast,
            show_output=settings.show_output if show_output is None else show_output,
            program=settings.batch_shell,
            fvm_command=settings.fvm_command,
            extra_ignored=settings.get_extra_ignored_folders(),
        )


@config_app.command("show")
def config_show_command(ctx: typer.Context) -> None:
    """Show the effective configuration and where each value comes from."""
    _state(ctx).config.show()


@config_app.command("set")
def config_set_command(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Config key, e.g. FAIL_FAST.")],
    value: Annotated[str, typer.Argument(help="Value to store.")],
    local: Annotated[
        bool,
        typer.Option("--local", help="Save to the local .suitcase file instead of the global one."),
    ] = False,
) -> None:
    """Save a configuration value."""
    config = _state(ctx).config
    with _handle_errors():
        try:
            warning = config.save(key.upper(), value, scope="local" if local else "global")
        except ValueError as e:
            print_error(str(e))
            raise typer.Exit(ExitCode.GENERAL_ERROR)

    if warning:
        print_warning(warning)
    print_info(f"Saved {key.upper()}")


__all__ = ["app", "main", "version_callback", "AppContext"]
