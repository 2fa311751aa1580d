"""
Centralized logging configuration for datasize.

This module provides functions for setting up logging in a consistent
way across the entire package. This helps avoid double logging and
ensures that logging is properly configured regardless of how the
package is imported or used.
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ROOT_LOGGER_NAME = "datasize"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

# Track if logging has been configured
_logging_configured = False


def configure_logging(level: Optional[str] = None, format_str: Optional[str] = None):
    """
    Configure the package logger for datasize.

    Only the first call has an effect. It attaches a stdout handler to the
    'datasize' logger with the given level and format and stops propagation
    to the root logger.

    Args:
        level: The logging level as a string ('debug', 'info', etc.), defaults to 'warning'
        format_str: The log format string (defaults to DEFAULT_FORMAT)
    """
    global _logging_configured

    if _logging_configured:
        return

    log_level = logging.WARNING if level is None else _get_level_from_string(level)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(format_str or DEFAULT_FORMAT))
    logger.addHandler(handler)

    # Prevent propagation to the root logger to avoid double logging
    logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    The name is prefixed with 'datasize' if it isn't already, so every
    logger in the package hangs off the configured package logger.

    Args:
        name: The name of the logger

    Returns:
        A logger instance
    """
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)


def _get_level_from_string(level: str) -> int:
    """
    Convert a string log level to a logging level constant.

    Unrecognised names map to INFO.
    """
    return _LEVELS.get(level.lower(), logging.INFO)


def update_log_level(level: str):
    """
    Update the log level of all datasize loggers.

    Args:
        level: The new log level as a string ('debug', 'info', etc.)
    """
    log_level = _get_level_from_string(level)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)

    for handler in logger.handlers:
        handler.setLevel(log_level)
