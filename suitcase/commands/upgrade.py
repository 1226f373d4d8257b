"""Self-upgrade of the installed suitcase package."""

from __future__ import annotations

from suitcase import PACKAGE_NAME
from suitcase.integrations.pip import (
    find_package,
    install_from_index,
    install_from_path,
    is_already_satisfied,
    list_installed_packages,
    parse_installed_version,
)
from suitcase.integrations.shell import Shell
from suitcase.utils.console import print_info, print_success
from suitcase.utils.errors import PackageNotInstalledError
from suitcase.utils.logging import log_message
from suitcase.utils.progress import progress


def upgrade(shell: Shell, package_name: str = PACKAGE_NAME) -> str:
    """Reinstall ``package_name`` from its local path or from PyPI.

    Packages installed in editable mode are reinstalled from their project
    location; everything else is upgraded from the package index.

    Returns the summary message that was printed.

    Raises:
        PackageNotInstalledError: If the package is not installed
        ShellError: If pip fails
    """
    with progress("Getting installed packages"):
        packages = list_installed_packages(shell)

    log_message(f"installed packages: {[p.name for p in packages]}")

    package = find_package(packages, package_name)
    if package is None:
        raise PackageNotInstalledError(package_name, [p.name for p in packages])

    log_message(
        f"package name: {package.name}, version: {package.version}, "
        f"path: {package.path or 'None'}"
    )

    if package.path:
        with progress(f"Upgrading {package_name} from local path ({package.path})"):
            output = install_from_path(shell, package.path)
    else:
        with progress(f"Upgrading {package_name} from PyPI"):
            output = install_from_index(shell, package_name)

    new_version = parse_installed_version(output.stdout, package_name)
    if new_version:
        message = f"Upgraded {package_name} from v{package.version} to v{new_version}"
        print_success(message)
    elif is_already_satisfied(output.stdout, package_name):
        message = f"{package_name} is already up to date (v{package.version})"
        print_info(message)
    else:
        message = f"Upgraded {package_name} successfully (but failed to parse output from pip)"
        print_info(message)
    return message


__all__ = ["upgrade"]
