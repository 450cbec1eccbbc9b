"""Minimal logging utilities for htmlkit.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from htmlkit.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.warning("Child tag 'tr' is not allowed for tag 'td'")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "htmlkit." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'htmlkit.mymodule'
    """
    if not (name == "htmlkit" or name.startswith("htmlkit.")):
        name = f"htmlkit.{name}"
    return logging.getLogger(name)
