"""
Logging setup for the docstore logger hierarchy.

Library modules log through logging.getLogger(__name__) and never configure
handlers themselves; entry points call setup_logger once.

Usage:
    from docstore.logger import setup_logger
    setup_logger("DEBUG")
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "docstore"
LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(message)s'


def setup_logger(level: str = "WARNING", name: str = LOGGER_NAME) -> logging.Logger:
    """
    Configure the named logger with a single stderr handler.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR)
        name: Logger to configure (default: package root)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers on repeated calls
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
        logger.addHandler(handler)

    return logger
