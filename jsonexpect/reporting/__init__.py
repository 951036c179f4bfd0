"""
Failure Reporting

This package defines the Failure record produced by a failed assertion
and the reporters that receive it.

Features:
    - Flat failure taxonomy (FailureKind)
    - Immutable Failure records with readable formatting
    - In-memory collection, raising, logging and console reporters
    - Reporter factory driven by Settings

Usage:
    from jsonexpect.reporting import FailureCollector, FailureKind
    from jsonexpect import new_object

    collector = FailureCollector()
    new_object(collector, {"foo": 123}).contains_key("bar")

    if collector.failed:
        print(collector.summary())
"""

# Models
from .models import Failure, FailureKind, format_value

# Reporters
from .reporter import (
    BaseReporter,
    ConsoleReporter,
    FailureCollector,
    LoggingReporter,
    RaisingReporter,
)

# Factory
from .factory import create_reporter

__all__ = [
    # Models
    "Failure",
    "FailureKind",
    "format_value",
    # Reporters
    "BaseReporter",
    "FailureCollector",
    "RaisingReporter",
    "LoggingReporter",
    "ConsoleReporter",
    # Factory
    "create_reporter",
]
