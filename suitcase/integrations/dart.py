"""Dart and Flutter project discovery.

A Dart project is any directory that contains a ``pubspec.yaml`` file. A
Flutter project is a Dart project whose pubspec declares a non-null
``dependencies.flutter`` entry.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from suitcase.utils.errors import PathDoesNotExistError, PubspecError
from suitcase.utils.logging import log_message

PUBSPEC_FILE = "pubspec.yaml"

# Generated or platform folders; pubspec files inside them are not projects.
IGNORED_FOLDERS: frozenset[str] = frozenset(
    {
        "ios",
        "android",
        "windows",
        "linux",
        "macos",
        ".symlinks",
        ".plugin_symlinks",
        ".dart_tool",
        "build",
        ".fvm",
    }
)


@dataclass(frozen=True)
class DartProject:
    """Metadata about a single Dart or Flutter project.

    Attributes:
        path: Canonical path of the project directory
        name: Directory name of the project
        is_flutter_project: True when the pubspec depends on Flutter
        package_name: The pubspec ``name`` field, if any
    """

    path: Path
    name: str
    is_flutter_project: bool
    package_name: str | None = None

    @property
    def kind(self) -> str:
        return "Flutter" if self.is_flutter_project else "Dart"


def find_dart_projects(
    root: str | Path | None = None,
    extra_ignored: Iterable[str] = (),
) -> list[DartProject]:
    """Recursively find Dart projects under ``root`` (default: cwd).

    Ignored folders are pruned from the walk, so nothing beneath them is
    considered. Symlinked directories are not followed.

    Raises:
        PathDoesNotExistError: If ``root`` is not an existing directory
        PubspecError: If a discovered pubspec.yaml cannot be parsed
    """
    search_root = Path(root) if root is not None else Path.cwd()
    if not search_root.is_dir():
        raise PathDoesNotExistError(search_root)

    ignored = IGNORED_FOLDERS | {name.strip() for name in extra_ignored if name.strip()}
    log_message(f"finding Dart projects recursively in path: {search_root}")

    project_dirs: set[Path] = set()
    for dirpath, dirnames, filenames in os.walk(search_root):
        dirnames[:] = sorted(d for d in dirnames if d not in ignored)
        if PUBSPEC_FILE not in filenames:
            continue
        project_dir = Path(dirpath).resolve()
        if project_dir.name in ignored:
            continue
        project_dirs.add(project_dir)

    projects = [get_dart_project_metadata(path) for path in sorted(project_dirs)]
    log_message(f"found {len(projects)} Dart projects")
    return projects


def get_dart_project_metadata(path: Path) -> DartProject:
    """Read the pubspec in ``path`` and build its DartProject."""
    pubspec = read_pubspec(path / PUBSPEC_FILE)

    dependencies = pubspec.get("dependencies")
    is_flutter = isinstance(dependencies, dict) and dependencies.get("flutter") is not None

    package_name = pubspec.get("name")
    return DartProject(
        path=path,
        name=path.name,
        is_flutter_project=is_flutter,
        package_name=str(package_name) if package_name is not None else None,
    )


def read_pubspec(pubspec_path: Path) -> dict[str, Any]:
    """Parse a pubspec.yaml file; an empty file yields an empty mapping.

    Raises:
        PubspecError: If the file cannot be read, is not valid YAML, or is
            not a mapping at the top level
    """
    try:
        with pubspec_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise PubspecError(pubspec_path, str(e)) from e
    except yaml.YAMLError as e:
        raise PubspecError(pubspec_path, f"invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise PubspecError(pubspec_path, "top-level value is not a mapping")
    return data


def filter_projects(
    projects: Iterable[DartProject],
    include_dart: bool = True,
    include_flutter: bool = True,
) -> list[DartProject]:
    """Keep projects of the requested kinds, preserving order."""
    return [
        p
        for p in projects
        if (include_flutter and p.is_flutter_project)
        or (include_dart and not p.is_flutter_project)
    ]


__all__ = [
    "PUBSPEC_FILE",
    "IGNORED_FOLDERS",
    "DartProject",
    "find_dart_projects",
    "get_dart_project_metadata",
    "read_pubspec",
    "filter_projects",
]
