"""
Logging configuration for IRC log management.

This module provides a centralized logging configuration that can be used
throughout the irc_log_manager package. Diagnostics always go to stderr so
that stdout only carries the machine-readable command output.

Usage:
    from irc_log_manager.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Checking %s", file_name)

The command line maps ``-v`` to ``enable_verbose`` and ``-vv`` to
``enable_debug`` with the detailed format, which names the worker thread
each message came from.
"""

import logging
import sys
from typing import Dict, Optional, TextIO

# Format strings
DEFAULT_FORMAT = "%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(message)s"

ROOT_LOGGER_NAME = "irc_log_manager"

# Module-level logger cache
_loggers: Dict[str, logging.Logger] = {}
_configured: bool = False


def configure_logging(
    level: int = logging.WARNING,
    stream: Optional[TextIO] = None,
    simple_mode: bool = True,
) -> None:
    """
    Configure the package logger.

    Args:
        level: Logging level (default: WARNING, so only errors are shown
            unless verbose output is requested).
        stream: Output stream (default: sys.stderr).
        simple_mode: If True, print bare messages without timestamps.
    """
    global _configured

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(SIMPLE_FORMAT if simple_mode else DEFAULT_FORMAT))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    root_logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__).

    Returns:
        Configured logger instance.
    """
    global _configured

    # Auto-configure on first use if not already configured
    if not _configured:
        configure_logging()

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]


def set_level(level: int) -> None:
    """
    Set the logging level for all irc_log_manager loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)


def enable_verbose() -> None:
    """Narrate progress (INFO level)."""
    set_level(logging.INFO)


def enable_debug() -> None:
    """Enable debug-level logging."""
    set_level(logging.DEBUG)
