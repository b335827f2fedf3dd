"""Logging setup for the command line."""
from __future__ import annotations

import logging
import sys


def setup_logging(level: int | str = logging.WARNING) -> None:
    """Send log records to stderr so they never mix with the game output on stdout."""
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)-10s  %(levelname)-8s  %(name)-24s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(handler)
