"""
Loggers for schema_to_class.

Library modules call ``get_logger(__name__)`` and only emit records; the
command line installs the single stderr handler.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "schema_to_class"


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger for a module, flattened to ``schema_to_class.<module>``."""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name.rsplit('.', 1)[-1]}")


def configure_gen_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Set the level of the package logger and attach a message-only stderr
    handler on first use. Verbose wins over quiet.
    """
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
