"""
Reporter factory for creating reporters from settings.

This module provides a factory function to create the appropriate
reporter based on Settings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .reporter import (
    BaseReporter,
    ConsoleReporter,
    FailureCollector,
    LoggingReporter,
    RaisingReporter,
)

if TYPE_CHECKING:
    from ..config import Settings


def create_reporter(settings: Settings) -> BaseReporter:
    """
    Create a reporter instance from Settings.

    Args:
        settings: Parsed settings

    Returns:
        The reporter matching settings.reporter

    Raises:
        ValueError: If the reporter type is unsupported

    Example:
        settings, _ = load_settings("jsonexpect.yaml")
        reporter = create_reporter(settings)
    """
    from ..config import ReporterType

    if settings.reporter == ReporterType.COLLECT:
        return FailureCollector(max_value_length=settings.max_value_length)

    elif settings.reporter == ReporterType.RAISE:
        return RaisingReporter()

    elif settings.reporter == ReporterType.LOG:
        return LoggingReporter(
            level=logging.WARNING,
            max_value_length=settings.max_value_length,
        )

    elif settings.reporter == ReporterType.CONSOLE:
        return ConsoleReporter(max_value_length=settings.max_value_length)

    else:
        raise ValueError(f"Unsupported reporter type: {settings.reporter}")
