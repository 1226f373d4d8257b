"""Installed-package queries and self-upgrade through pip.

pip is always invoked as ``<current interpreter> -m pip`` so the upgrade
targets the environment Suitcase is running from.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

from suitcase.integrations.shell import Shell, ShellOutput
from suitcase.utils.logging import log_message


@dataclass(frozen=True)
class InstalledPackage:
    """One row of ``pip list`` output.

    Attributes:
        name: Distribution name as reported by pip
        version: Installed version (without a leading "v")
        path: Editable project location, if installed from a local path
    """

    name: str
    version: str
    path: str | None = None


def normalize_name(name: str) -> str:
    """Normalize a distribution name (PEP 503)."""
    return re.sub(r"[-_.]+", "-", name).lower()


def parse_package_line(line: str) -> InstalledPackage:
    """Parse a single ``pip list`` row into an InstalledPackage.

    Raises:
        ValueError: If the line has no version column
    """
    parts = line.split()
    if len(parts) < 2:
        raise ValueError(f"cannot parse package name and version from line {line!r}")
    name = parts[0]
    version = parts[1].lstrip("v")
    path = " ".join(parts[2:]) or None
    return InstalledPackage(name=name, version=version, path=path)


def parse_installed_packages(output: str) -> list[InstalledPackage]:
    """Parse the columnar output of ``pip list``.

    The header row ("Package Version ...") and the dashed separator row are
    skipped, as is any line that does not start with a letter or digit
    (pip notices and warnings are indented or bracketed). Any other line
    without a version column is logged and skipped.
    """
    packages: list[InstalledPackage] = []
    for line in output.splitlines():
        if not line or not line[0].isalnum():
            continue
        if line.split()[0] == "Package":
            continue
        if line.startswith("WARNING") or line.startswith("DEPRECATION"):
            continue
        try:
            packages.append(parse_package_line(line))
        except ValueError as e:
            log_message(f"skipping pip list line: {e}")
    return packages


def list_installed_packages(shell: Shell) -> list[InstalledPackage]:
    output = shell.run(sys.executable, "-m", "pip", "list", "--disable-pip-version-check")
    return parse_installed_packages(output.stdout)


def find_package(packages: list[InstalledPackage], name: str) -> InstalledPackage | None:
    wanted = normalize_name(name)
    return next((p for p in packages if normalize_name(p.name) == wanted), None)


def install_from_path(shell: Shell, path: str) -> ShellOutput:
    return shell.run(
        sys.executable, "-m", "pip", "install", "--upgrade", "--editable", path,
        "--disable-pip-version-check",
    )


def install_from_index(shell: Shell, name: str) -> ShellOutput:
    return shell.run(
        sys.executable, "-m", "pip", "install", "--upgrade", name,
        "--disable-pip-version-check",
    )


def parse_installed_version(output: str, name: str) -> str | None:
    """Find the version of ``name`` in pip's "Successfully installed" line.

    The line lists ``<name>-<version>`` tokens; the last such line wins.
    """
    wanted = normalize_name(name)
    version = None
    for line in output.splitlines():
        line = line.strip()
        if not line.startswith("Successfully installed"):
            continue
        for token in line[len("Successfully installed"):].split():
            dist, sep, dist_version = token.rpartition("-")
            if sep and normalize_name(dist) == wanted:
                version = dist_version
    return version


def is_already_satisfied(output: str, name: str) -> bool:
    """True if pip reported that ``name`` needed no change."""
    pattern = re.compile(
        rf"^Requirement already satisfied:\s+{re.escape(name)}\b",
        re.IGNORECASE | re.MULTILINE,
    )
    return bool(pattern.search(output))


__all__ = [
    "InstalledPackage",
    "normalize_name",
    "parse_package_line",
    "parse_installed_packages",
    "list_installed_packages",
    "find_package",
    "install_from_path",
    "install_from_index",
    "parse_installed_version",
    "is_already_satisfied",
]
