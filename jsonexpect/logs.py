"""
Logging setup for jsonexpect.

Modules log through logging.getLogger(__name__). Nothing is printed
unless the application configures logging, or calls configure_logging().
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config.models import LogLevel

PACKAGE_LOGGER = "jsonexpect"


def configure_logging(
    level: LogLevel | str = LogLevel.WARNING,
    console: Console | None = None,
) -> logging.Logger:
    """
    Send jsonexpect log records to a rich handler.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Minimum level to emit
        console: Console to write to (stderr by default)

    Returns:
        The package logger
    """
    level_name = level.value if isinstance(level, LogLevel) else str(level).upper()

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level_name)
    return logger
