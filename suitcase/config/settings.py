"""Settings dataclass for Suitcase configuration."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

CONFIG_FILE = Path.home() / ".suitcase-config"

# Environment overrides use the config key with this prefix
# (e.g. SUITCASE_FAIL_FAST=true), which keeps keys like BATCH_SHELL from
# clashing with unrelated variables such as $SHELL.
ENV_PREFIX = "SUITCASE_"


@dataclass
class Settings:
    """Effective configuration values.

    Attributes:
        batch_shell: Program used to run per-project commands (``-c`` is passed)
        open_command: Program that opens URLs; empty means platform default
        fvm_command: FVM executable
        git_remote: Remote opened by ``gho`` when none is given
        fail_fast: Default for ``--fail-fast`` in batch commands
        show_output: Default for ``--show-output`` in batch commands
        extra_ignored_folders: Comma-separated folder names skipped during discovery
    """

    batch_shell: str = "bash"
    open_command: str = ""
    fvm_command: str = "fvm"
    git_remote: str = "origin"
    fail_fast: bool = False
    show_output: bool = False
    extra_ignored_folders: str = ""

    _key_mapping: ClassVar[dict[str, str]] = {
        "BATCH_SHELL": "batch_shell",
        "OPEN_COMMAND": "open_command",
        "FVM_COMMAND": "fvm_command",
        "GIT_REMOTE": "git_remote",
        "FAIL_FAST": "fail_fast",
        "SHOW_OUTPUT": "show_output",
        "EXTRA_IGNORED_FOLDERS": "extra_ignored_folders",
    }

    @classmethod
    def get_config_keys(cls) -> list[str]:
        return list(cls._key_mapping.keys())

    def get_attribute_for_key(self, key: str) -> str | None:
        return self._key_mapping.get(key)

    def get_extra_ignored_folders(self) -> list[str]:
        return [name.strip() for name in self.extra_ignored_folders.split(",") if name.strip()]

    def get_open_command(self) -> str:
        """Return the configured open command or the platform default."""
        if self.open_command:
            return self.open_command
        if sys.platform == "darwin":
            return "open"
        if sys.platform == "win32":
            return "explorer"
        return "xdg-open"


__all__ = ["CONFIG_FILE", "ENV_PREFIX", "Settings"]
