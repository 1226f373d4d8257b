"""CLI interface for Suitcase.

This package provides the Typer-based command-line interface and the alias
executables that jump straight to a subcommand.
"""

from suitcase.cli.aliases import run_from_alias
from suitcase.cli.application import AppContext, app, main, version_callback

__all__ = [
    # application.py
    "app",
    "main",
    "version_callback",
    "AppContext",
    # aliases.py
    "run_from_alias",
]
