"""Alias executables that jump straight to a subcommand.

Installing the package creates small executables such as ``gho`` and
``ford``. Each one runs ``suitcase <subcommand>`` with the remaining
arguments, so ``ford -p ~/src dart pub get`` is the same as
``suitcase ford -p ~/src dart pub get``.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from suitcase import PACKAGE_NAME
from suitcase.cli.application import app


def run_from_alias(
    command_name: str | None = None,
    argv: Sequence[str] | None = None,
) -> None:
    """Run the subcommand named after the executable (or ``command_name``).

    Args:
        command_name: Subcommand override for aliases whose file name differs
            from the subcommand. When None, the executable's file stem is used.
        argv: Full argument vector including the executable; defaults to
            ``sys.argv``.
    """
    raw_args = list(sys.argv if argv is None else argv)
    subcommand = command_name or Path(raw_args[0]).stem
    app(args=[subcommand, *raw_args[1:]], prog_name=PACKAGE_NAME)


def gho() -> None:
    run_from_alias("gho")


def ford() -> None:
    run_from_alias("ford")


def fua() -> None:
    run_from_alias("fua")


def fdp() -> None:
    run_from_alias("fdp")


__all__ = ["run_from_alias", "gho", "ford", "fua", "fdp"]
