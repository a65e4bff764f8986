"""Logging configuration for the CLI and server."""

from __future__ import annotations

import logging
import sys

from stageboard.config.constants import LOG_DATE_FORMAT, LOG_FORMAT


def setup_logging(level: str | int = logging.INFO) -> None:
    """Install a single stderr handler on the ``stageboard`` logger.

    Safe to call more than once; existing handlers are replaced.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger("stageboard")
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(handler)
    root.propagate = False

    logging.captureWarnings(True)
