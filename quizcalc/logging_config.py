"""Logging setup: quizcalc loggers go to stderr through Rich."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route quizcalc logging through Rich on stderr."""
    logger = logging.getLogger("quizcalc")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not logger.handlers:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            log_time_format="%H:%M:%S",
        )
        logger.addHandler(handler)
