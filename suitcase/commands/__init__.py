"""Subcommand implementations for Suitcase.

Each module holds the behaviour behind one CLI subcommand; the Typer
layer in suitcase.cli only parses options and maps errors to exit codes.
"""

from suitcase.commands.fdp import discover_projects, find_projects
from suitcase.commands.ford import for_every_dart_project
from suitcase.commands.fua import fvm_use_for_every_flutter_project
from suitcase.commands.gho import git_hub_open
from suitcase.commands.upgrade import upgrade

__all__ = [
    "git_hub_open",
    "upgrade",
    "discover_projects",
    "find_projects",
    "for_every_dart_project",
    "fvm_use_for_every_flutter_project",
]
