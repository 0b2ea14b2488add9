"""Logging helpers."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOGGER_NAME = "contact_scout"


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Send logs to stderr so stdout stays free for the JSON result."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or one of its children."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
