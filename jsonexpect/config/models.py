"""
Typed settings for jsonexpect.

This module contains the enums and dataclasses that represent
a parsed settings file.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..reporting.models import DEFAULT_MAX_VALUE_LENGTH


class ReporterType(str, Enum):
    """Where failures are sent."""
    COLLECT = "collect"  # keep failures in memory
    RAISE = "raise"  # raise on the first failure
    LOG = "log"  # log through the logging module
    CONSOLE = "console"  # print with rich


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class Settings:
    """Fully parsed and validated settings."""
    reporter: ReporterType = ReporterType.COLLECT
    log_level: LogLevel = LogLevel.WARNING
    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH
