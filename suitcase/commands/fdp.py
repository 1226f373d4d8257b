"""Find Dart and Flutter projects under a directory."""

from __future__ import annotations

from collections.abc import Iterable

from rich.table import Table

from suitcase.integrations.dart import DartProject, find_dart_projects
from suitcase.utils.console import console, print_info
from suitcase.utils.progress import progress


def discover_projects(path: str = ".", extra_ignored: Iterable[str] = ()) -> list[DartProject]:
    """Find projects under ``path`` behind a progress spinner."""
    with progress("Finding Dart projects"):
        return find_dart_projects(path, extra_ignored=extra_ignored)


def find_projects(path: str = ".", extra_ignored: Iterable[str] = ()) -> list[DartProject]:
    """Discover projects under ``path`` and print them as a table."""
    projects = discover_projects(path, extra_ignored)
    if not projects:
        print_info("No projects found")
        return projects

    flutter_count = sum(1 for p in projects if p.is_flutter_project)
    print_info(
        f"Found {len(projects)} projects "
        f"({len(projects) - flutter_count} Dart, {flutter_count} Flutter)"
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Path", style="dim")
    for project in projects:
        table.add_row(project.name, project.kind, str(project.path))
    console.print(table)
    return projects


__all__ = ["discover_projects", "find_projects"]
