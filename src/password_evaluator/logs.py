"""Logging setup for the command line and the HTTP server."""
from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "password_evaluator"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a rich handler writing to stderr to the package logger.

    Calling it again replaces the handler instead of stacking another one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger
