"""Logging setup for the game.

The display owns the terminal while a game runs, so by default only
warnings reach stderr.  ``--log-file`` sends everything to a file instead.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> logging.Logger:
    """Configure the ``hanoi`` logger and return it."""
    logger = logging.getLogger("hanoi")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for old in logger.handlers[:]:
        logger.removeHandler(old)
        old.close()

    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
    logger.addHandler(handler)
    return logger
