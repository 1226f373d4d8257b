"""Integrations with external tools for Suitcase.

This package contains:
- shell: subprocess wrapper shared by every integration
- git: repository queries and remote URL conversion
- dart: Dart/Flutter project discovery
- fvm: Flutter Version Management commands
- pip: installed-package listing and self-upgrade
"""

from suitcase.integrations.dart import (
    IGNORED_FOLDERS,
    DartProject,
    filter_projects,
    find_dart_projects,
    get_dart_project_metadata,
)
from suitcase.integrations.git import (
    find_repo_root,
    get_remote_branches,
    get_remote_url,
    is_git_repo,
    to_browser_url,
)
from suitcase.integrations.shell import Shell, ShellOutput

__all__ = [
    # Shell
    "Shell",
    "ShellOutput",
    # Git
    "is_git_repo",
    "get_remote_branches",
    "get_remote_url",
    "find_repo_root",
    "to_browser_url",
    # Dart
    "IGNORED_FOLDERS",
    "DartProject",
    "find_dart_projects",
    "get_dart_project_metadata",
    "filter_projects",
]
