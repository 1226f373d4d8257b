"""Rich-based terminal output utilities for Suitcase."""

from rich.console import Console
from rich.markup import escape

from suitcase import PACKAGE_NAME, __version__

console = Console(highlight=False)


def print_error(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def print_success(message: str) -> None:
    console.print(f"[green]✔[/green] {escape(message)}")


def print_info(message: str) -> None:
    console.print(escape(message))


def print_header(title: str) -> None:
    """Print a section header as a horizontal rule."""
    console.print()
    console.rule(f"[bold]{escape(title)}[/bold]")


def show_version() -> None:
    console.print(f"{PACKAGE_NAME} {__version__}")


__all__ = [
    "console",
    "print_error",
    "print_warning",
    "print_success",
    "print_info",
    "print_header",
    "show_version",
]
