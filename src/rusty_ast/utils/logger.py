"""Logging helpers for rusty-ast.

Example:
    >>> from rusty_ast.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsed %d bytes", 120)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``rusty_ast``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("cli").name
        'rusty_ast.cli'
    """
    if not (name == "rusty_ast" or name.startswith("rusty_ast.")):
        name = f"rusty_ast.{name}"
    return logging.getLogger(name)
