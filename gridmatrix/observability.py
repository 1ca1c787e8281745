"""
Observability utilities for the gridmatrix package.

The library itself only emits records through ``logging.getLogger(__name__)``;
applications opt in to seeing them with ``configure_logging``.
"""

import logging
from typing import Optional

from .config import (
    LOGGER_NAME, DEFAULT_LOG_LEVEL, CONSOLE_LOG_FORMAT,
    DETAILED_LOG_FORMAT, LOG_DATE_FORMAT
)


def configure_logging(level: str = DEFAULT_LOG_LEVEL, log_file: Optional[str] = None):
    """
    Configure logging for the gridmatrix package.

    Calling this more than once replaces the handlers installed by the
    previous call instead of stacking duplicates.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs

    Returns:
        The configured ``gridmatrix`` logger.
    """
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown logging level: {level!r}")

    console_formatter = logging.Formatter(CONSOLE_LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    detailed_formatter = logging.Formatter(DETAILED_LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(log_level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(console_formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file
        file_handler.setFormatter(detailed_formatter)
        package_logger.addHandler(file_handler)

    # Prevent propagation to root logger
    package_logger.propagate = False

    return package_logger
