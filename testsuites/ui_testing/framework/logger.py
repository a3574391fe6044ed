"""
================================================================================
Logging Setup
================================================================================

Centralized Loguru configuration for the UI suite.

Page objects and framework helpers import ``logger`` from loguru directly;
this module only decides where the records go and at what level.

Author: Automation Team
License: MIT
================================================================================
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config_loader import get_config


DEFAULT_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(level: Optional[str] = None, format_str: Optional[str] = None) -> None:
    """
    Initializes the global Loguru logger with the configured sinks.

    Safe to call more than once; only the first call has an effect until
    ``reset_logger()`` is called.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    log_level = (level or get_config("logging.level", "INFO")).upper()
    log_format = format_str or get_config("logging.format", DEFAULT_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    log_file = get_config("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def get_logger():
    """Return the Loguru logger, initializing it on first use."""
    if not _logger_initialized:
        init_logger()
    return logger


def reset_logger() -> None:
    """Allow ``init_logger`` to reconfigure sinks (used by tests)."""
    global _logger_initialized
    _logger_initialized = False


__all__ = [
    "init_logger",
    "get_logger",
    "reset_logger",
]
