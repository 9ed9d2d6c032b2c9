"""Minimal logging utilities for plexer.

Wraps the standard library logging so every logger lives under the
``plexer`` namespace. The library never installs handlers; applications
configure output the usual way.

Example:
    >>> from plexer.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing %d characters", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("rules").name
        'plexer.rules'
    """
    if not (name == "plexer" or name.startswith("plexer.")):
        name = f"plexer.{name}"
    return logging.getLogger(name)
