"""Minimal logging utilities for stringseq.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure logging.

Example:
    >>> from stringseq.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Dropping oversized buffer")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "stringseq." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'stringseq.mymodule'
    """
    # Ensure stringseq prefix for consistent namespacing
    if not (name == "stringseq" or name.startswith("stringseq.")):
        name = f"stringseq.{name}"
    return logging.getLogger(name)
