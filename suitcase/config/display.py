"""Configuration display for Suitcase."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

from suitcase.config.settings import ENV_PREFIX, Settings
from suitcase.utils.console import console, print_header, print_info

if TYPE_CHECKING:
    from suitcase.config.manager import ConfigManager


def show_config(manager: ConfigManager) -> None:
    """Print config file locations and every key with its effective value and source."""
    print_header("Current Configuration")

    print_info(f"Global config: {manager.global_config_path}")
    if manager.local_config_path:
        print_info(f"Local config:  {manager.local_config_path}")
    else:
        print_info("Local config:  (not found)")
    print_info(f"Environment overrides use the {ENV_PREFIX} prefix")
    console.print()

    table = Table(show_header=True, header_style="bold")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_column("Source", style="dim")

    s = manager.settings
    for key in Settings.get_config_keys():
        attr = s.get_attribute_for_key(key)
        value = getattr(s, attr) if attr else ""
        if key == "OPEN_COMMAND" and not value:
            value = f"{s.get_open_command()} (auto)"
        elif value == "":
            value = "(not set)"
        table.add_row(key, str(value), manager.get_source(key))

    console.print(table)
    console.print()


__all__ = ["show_config"]
