"""Logging configuration for Suitcase.

File logging is opt-in through environment variables:

    SUITCASE_LOG=true                  enable logging to a file
    SUITCASE_LOG_FILE=/path/to/file    override the log file (~/.suitcase.log)

The ``--verbose`` CLI flag additionally mirrors debug messages to the
terminal through a Rich handler.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_ENABLED = os.environ.get("SUITCASE_LOG", "false").lower() in ("true", "1", "yes")
LOG_FILE = Path(os.environ.get("SUITCASE_LOG_FILE", str(Path.home() / ".suitcase.log")))
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

_logger: logging.Logger | None = None
_logged_once_keys: set[str] = set()


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure and return the ``suitcase`` logger.

    Handlers are rebuilt on every call so that repeated setup (and module
    reloads in tests) never stack duplicate handlers.
    """
    global _logger

    logger = logging.getLogger("suitcase")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if LOG_ENABLED:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    if verbose:
        rich_handler = RichHandler(
            console=Console(stderr=True),
            level=logging.DEBUG,
            show_path=False,
            markup=False,
        )
        logger.addHandler(rich_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the configured logger, setting it up on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def log_message(message: str, level: int = logging.DEBUG) -> None:
    get_logger().log(level, message)


def log_command(command: str, exit_code: int | None = None) -> None:
    """Log an external command and its exit code."""
    logger = get_logger()
    logger.debug(f"COMMAND: {command}")
    if exit_code is not None:
        logger.debug(f"EXIT_CODE: {exit_code}")


def log_once(key: str, message: str) -> None:
    """Log a message only the first time ``key`` is seen in this process."""
    if key in _logged_once_keys:
        return
    _logged_once_keys.add(key)
    log_message(message)


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "setup_logging",
    "get_logger",
    "log_message",
    "log_command",
    "log_once",
]
