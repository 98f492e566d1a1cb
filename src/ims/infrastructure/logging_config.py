"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr and set the level of the ``ims`` loggers.

    ``basicConfig`` does nothing if the root logger already has handlers,
    so calling this more than once is harmless.
    """
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("ims").setLevel(level.upper())
