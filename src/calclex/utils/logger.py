"""Minimal logging utilities for calclex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from calclex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing expression")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "calclex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'calclex.mymodule'
    """
    if not (name == "calclex" or name.startswith("calclex.")):
        name = f"calclex.{name}"
    return logging.getLogger(name)
