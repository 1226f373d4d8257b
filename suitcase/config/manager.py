"""Configuration manager for Suitcase.

This module provides the ConfigManager class for loading, saving, and
managing configuration values with a cascading hierarchy:

    1. Environment Variables (highest priority, ``SUITCASE_<KEY>``)
    2. Local Config (.suitcase in the current or a parent directory)
    3. Global Config (~/.suitcase-config)
    4. Built-in Defaults (lowest priority)

Config files hold flat KEY=VALUE or KEY="VALUE" lines; ``#`` starts a
comment line.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Literal

from suitcase.config.settings import CONFIG_FILE, ENV_PREFIX, Settings
from suitcase.integrations.git import find_repo_root
from suitcase.utils.errors import ConfigError
from suitcase.utils.logging import log_message, log_once

logger = logging.getLogger(__name__)

_LINE_PATTERN = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)=(.*)$")


class ConfigManager:
    """Manages configuration loading and saving with cascading hierarchy.

    Parsing is strictly line-by-line; values are never evaluated. Writes are
    atomic and leave the file readable only by its owner.
    """

    LOCAL_CONFIG_NAME = ".suitcase"
    GLOBAL_CONFIG_NAME = ".suitcase-config"

    def __init__(self, global_config_path: Path | None = None) -> None:
        self.global_config_path = global_config_path or CONFIG_FILE
        self.local_config_path: Path | None = None
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Load configuration from all sources with cascading precedence.

        Each call starts again from clean defaults, so repeated loads never
        keep stale values.
        """
        self.settings = Settings()
        self.local_config_path = None
        self._raw_values = {}
        self._config_sources = {}

        if self.global_config_path.exists():
            log_message(f"Loading global configuration from {self.global_config_path}")
            self._load_file(self.global_config_path, source="global")

        local_path = self._find_local_config()
        if local_path:
            self.local_config_path = local_path
            log_message(f"Loading local configuration from {local_path}")
            self._load_file(local_path, source=f"local ({local_path})")

        self._load_environment()

        for key, value in self._raw_values.items():
            self._apply_value_to_settings(key, value)

        log_message(f"Configuration loaded successfully ({len(self._raw_values)} keys)")
        return self.settings

    def _find_local_config(self) -> Path | None:
        """Find a local .suitcase file by walking up from the cwd.

        The search stops at the repository root (a directory holding .git)
        or at the filesystem root.
        """
        current = Path.cwd()
        while True:
            config_path = current / self.LOCAL_CONFIG_NAME
            if config_path.is_file():
                return config_path

            if (current / ".git").exists():
                break

            parent = current.parent
            if parent == current:
                break
            current = parent

        return None

    def _load_file(self, path: Path, source: str = "file") -> None:
        """Load key=value pairs from a config file."""
        for key, value in self._read_file_values(path).items():
            self._raw_values[key] = value
            self._config_sources[key] = source

    def _load_environment(self) -> None:
        """Override config with SUITCASE_-prefixed environment variables.

        Only known keys are read so unrelated variables never leak in.
        """
        for key in Settings.get_config_keys():
            env_value = os.environ.get(f"{ENV_PREFIX}{key}")
            if env_value is not None:
                self._raw_values[key] = env_value
                self._config_sources[key] = "environment"

    def _apply_value_to_settings(self, key: str, value: str) -> None:
        """Apply a raw config value to the settings object."""
        attr = self.settings.get_attribute_for_key(key)
        if attr is None:
            log_once(f"unknown-config-key:{key}", f"Ignoring unknown config key {key}")
            return

        if isinstance(getattr(self.settings, attr), bool):
            setattr(self.settings, attr, value.lower() in ("true", "1", "yes"))
        else:
            setattr(self.settings, attr, value)

    def save(
        self,
        key: str,
        value: str,
        scope: Literal["global", "local"] = "global",
        warn_on_override: bool = True,
    ) -> str | None:
        """Save a configuration value and reload.

        With ``scope="local"`` and no local file yet, a .suitcase file is
        created at the repository root, or in the cwd outside a repository.

        Returns a warning string when the saved value is shadowed by a
        higher-priority source, otherwise None.

        Raises:
            ValueError: If the key name or scope is invalid.
            ConfigError: If the config file cannot be read or written.
        """
        if not re.match(r"^[a-zA-Z_][a-zA-Z0-9_]*$", key):
            raise ValueError(f"Invalid config key: {key}")

        if not re.match(r"^[A-Z][A-Z0-9_]*$", key):
            logger.warning("Config key %r is not in UPPER_SNAKE_CASE format", key)

        if scope not in ("global", "local"):
            raise ValueError(f"Invalid scope: {scope}. Must be 'global' or 'local'")

        if scope == "local":
            if self.local_config_path is None:
                repo_root = find_repo_root()
                base = repo_root if repo_root else Path.cwd()
                self.local_config_path = base / self.LOCAL_CONFIG_NAME
            target_path = self.local_config_path
        else:
            target_path = self.global_config_path

        existing_lines: list[str] = []
        if target_path.exists():
            try:
                existing_lines = target_path.read_text().splitlines()
            except OSError as e:
                raise ConfigError(f"failed to read config file '{target_path}': {e}") from e

        new_line = f'{key}="{self._escape_value_for_storage(value)}"'
        new_lines: list[str] = []
        written = False
        for line in existing_lines:
            match = _LINE_PATTERN.match(line.strip())
            if match and match.group(1) == key:
                new_lines.append(new_line)
                written = True
            else:
                new_lines.append(line)
        if not written:
            new_lines.append(new_line)

        self._atomic_write_to_path(new_lines, target_path)
        log_message(f"Configuration saved to {scope}: {key}")

        warning = self._check_override_warning(key, scope, warn_on_override)
        self.load()
        return warning

    def _check_override_warning(
        self,
        key: str,
        scope: Literal["global", "local"],
        warn_on_override: bool,
    ) -> str | None:
        """Check if a saved value is overridden by a higher-priority source."""
        if not warn_on_override:
            return None

        env_value = os.environ.get(f"{ENV_PREFIX}{key}")
        if env_value is not None:
            return (
                f"'{key}' saved to {scope} config but is overridden by environment "
                f"variable {ENV_PREFIX}{key} (effective value: '{env_value}')"
            )

        if scope == "global" and self.local_config_path and self.local_config_path.exists():
            local_values = self._read_file_values(self.local_config_path)
            if key in local_values:
                return (
                    f"'{key}' saved to global config but is overridden by local config "
                    f"at {self.local_config_path} (effective value: '{local_values[key]}')"
                )

        return None

    def _read_file_values(self, path: Path) -> dict[str, str]:
        """Read key=value pairs from a config file without modifying state."""
        values: dict[str, str] = {}
        if not path.exists():
            return values

        try:
            with path.open() as f:
                lines = f.readlines()
        except OSError as e:
            raise ConfigError(f"failed to read config file '{path}': {e}") from e

        for line in lines:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            match = _LINE_PATTERN.match(line)
            if not match:
                continue
            key, value = match.groups()
            # Double quotes support escapes; single quotes are literal
            if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
                value = self._unescape_value(value[1:-1])
            elif len(value) >= 2 and value.startswith("'") and value.endswith("'"):
                value = value[1:-1]
            values[key] = value
        return values

    def _atomic_write_to_path(self, lines: list[str], target_path: Path) -> None:
        """Atomically write lines to a config file with 0600 permissions."""
        try:
            target_path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(dir=target_path.parent, prefix=".suitcase-config-")
        except OSError as e:
            raise ConfigError(f"failed to write config file '{target_path}': {e}") from e

        try:
            with os.fdopen(fd, "w") as f:
                f.write("\n".join(lines))
                if lines:
                    f.write("\n")
            os.chmod(temp_path, 0o600)
            Path(temp_path).replace(target_path)
        except Exception as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            if isinstance(e, OSError):
                raise ConfigError(f"failed to write config file '{target_path}': {e}") from e
            raise

    @staticmethod
    def _escape_value_for_storage(value: str) -> str:
        # Backslashes first so the quote escapes are not doubled
        return value.replace("\\", "\\\\").replace('"', '\\"')

    @staticmethod
    def _unescape_value(value: str) -> str:
        return value.replace("\\\\", "\\").replace('\\"', '"')

    def get(self, key: str, default: str = "") -> str:
        return self._raw_values.get(key, default)

    def get_source(self, key: str) -> str:
        """Describe where the effective value of ``key`` came from."""
        return self._config_sources.get(key, "default")

    def show(self) -> None:
        """Display current configuration using Rich formatting."""
        from suitcase.config.display import show_config

        show_config(self)


__all__ = ["ConfigManager"]
