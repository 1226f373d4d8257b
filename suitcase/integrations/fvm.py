"""Flutter Version Management (FVM) helpers."""

from __future__ import annotations

import shlex

from suitcase.integrations.shell import Shell, ShellOutput

DEFAULT_FVM_COMMAND = "fvm"


def install_version(
    shell: Shell,
    version: str,
    fvm_command: str = DEFAULT_FVM_COMMAND,
) -> ShellOutput:
    """Make sure ``version`` of Flutter is installed (``fvm install``)."""
    return shell.run(fvm_command, "install", version)


def use_command(version: str, force: bool = False, fvm_command: str = DEFAULT_FVM_COMMAND) -> str:
    """Build the shell command that pins a project to ``version``.

    ``--force`` makes FVM accept projects that do not depend on Flutter.
    """
    parts = [fvm_command, "use", version]
    if force:
        parts.append("--force")
    return shlex.join(parts)


__all__ = ["DEFAULT_FVM_COMMAND", "install_version", "use_command"]
