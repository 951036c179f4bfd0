"""
Reporters that receive assertion failures.

A reporter is the only thing a chain talks to when an assertion fails.
The classes here cover in-memory collection, hard failures for test
runners, logging, and console output.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import Counter

from rich.console import Console
from rich.panel import Panel

from ..exceptions import ExpectationError
from .models import DEFAULT_MAX_VALUE_LENGTH, Failure, FailureKind

logger = logging.getLogger(__name__)


class BaseReporter(ABC):
    """
    Abstract base class for failure reporters.

    Any object with a compatible report() method can be passed where
    a reporter is expected; subclassing is a convenience.
    """

    @abstractmethod
    def report(self, failure: Failure) -> None:
        """
        Receive a single failure.

        Called synchronously from Chain.fail(), once per failed assertion.
        """
        pass


class FailureCollector(BaseReporter):
    """
    Keeps every reported failure in memory.

    Example:
        collector = FailureCollector()
        new_object(collector, {"foo": 123}).contains_key("bar")

        assert collector.failed
        assert collector.kinds() == [FailureKind.KEY_MISSING]
        print(collector.summary())
    """

    def __init__(self, max_value_length: int = DEFAULT_MAX_VALUE_LENGTH):
        self.failures: list[Failure] = []
        self.max_value_length = max_value_length

    def report(self, failure: Failure) -> None:
        self.failures.append(failure)

    @property
    def failed(self) -> bool:
        return len(self.failures) > 0

    def kinds(self) -> list[FailureKind]:
        """Failure kinds in report order."""
        return [f.kind for f in self.failures]

    def last(self) -> Failure | None:
        """The most recent failure, or None."""
        return self.failures[-1] if self.failures else None

    def clear(self) -> None:
        self.failures.clear()

    def summary(self) -> str:
        """Generate a human-readable summary."""
        if not self.failures:
            return "✅ No failures"

        counts = Counter(f.kind.value for f in self.failures)
        breakdown = ", ".join(f"{kind}: {n}" for kind, n in sorted(counts.items()))
        lines = [f"{len(self.failures)} failure(s) ({breakdown})"]
        lines.extend(f.format(self.max_value_length) for f in self.failures)
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self.failures)


class RaisingReporter(BaseReporter):
    """
    Raises ExpectationError on the first failure.

    Use it to make a soft chain behave like a plain assert inside a
    test function.
    """

    def report(self, failure: Failure) -> None:
        raise ExpectationError(failure)


class LoggingReporter(BaseReporter):
    """Logs each failure through the logging module."""

    def __init__(
        self,
        log: logging.Logger | None = None,
        level: int = logging.WARNING,
        max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
    ):
        self.log = log or logger
        self.level = level
        self.max_value_length = max_value_length

    def report(self, failure: Failure) -> None:
        self.log.log(self.level, failure.format(self.max_value_length))


class ConsoleReporter(BaseReporter):
    """Prints each failure to a rich console as it arrives."""

    def __init__(
        self,
        console: Console | None = None,
        max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
    ):
        self.console = console or Console(stderr=True)
        self.max_value_length = max_value_length
        self.count = 0

    def report(self, failure: Failure) -> None:
        self.count += 1
        self.console.print(
            Panel(
                failure.format(self.max_value_length),
                title=f"[red]Failure #{self.count}[/red]",
                title_align="left",
                border_style="red",
            )
        )
