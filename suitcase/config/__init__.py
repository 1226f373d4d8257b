"""Configuration management for Suitcase.

This package contains:
- settings: Settings dataclass with configuration fields
- manager: ConfigManager class for loading/saving configuration
- display: Rich rendering of the effective configuration
"""

from suitcase.config.manager import ConfigManager
from suitcase.config.settings import CONFIG_FILE, ENV_PREFIX, Settings

__all__ = [
    "CONFIG_FILE",
    "ENV_PREFIX",
    "Settings",
    "ConfigManager",
]
