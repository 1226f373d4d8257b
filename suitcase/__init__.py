"""Suitcase - personal CLI tools for Git, Dart and Flutter projects.

This package provides a Python CLI application that automates recurring
development tasks such as opening a repository remote, self-updating, and
running commands across every Dart or Flutter project under a directory.
"""

__version__ = "0.4.0"
PACKAGE_NAME = "suitcase"

__all__ = [
    "__version__",
    "PACKAGE_NAME",
]
