"""
Entry point that binds the wrapper constructors to one reporter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from .assertions import (
    Array,
    Boolean,
    Match,
    Number,
    Object,
    String,
    Value,
    new_array,
    new_boolean,
    new_match,
    new_number,
    new_object,
    new_string,
    new_value,
)
from .logs import configure_logging
from .reporting import create_reporter

if TYPE_CHECKING:
    from .config import Settings
    from .reporting import BaseReporter


class Expect:
    """
    Creates root wrappers that all report to the same reporter.

    Each call starts a new chain, so a failure on one root value does
    not mark another root as failed.

    Example:
        e = Expect(FailureCollector())

        e.object(body).contains_key("id").value_equal("status", "active")
        e.array(body["items"]).not_empty()
        e.string(headers["Content-Type"]).contains("json")
    """

    def __init__(self, reporter: BaseReporter):
        self.reporter = reporter

    @classmethod
    def from_settings(cls, settings: Settings) -> Expect:
        """
        Build the reporter described by settings and configure logging.

        Example:
            settings, result = load_settings("jsonexpect.yaml")
            e = Expect.from_settings(settings)
        """
        configure_logging(settings.log_level)
        return cls(create_reporter(settings))

    def value(self, value: Any) -> Value:
        return new_value(self.reporter, value)

    def object(self, value: Any) -> Object:
        return new_object(self.reporter, value)

    def array(self, value: Any) -> Array:
        return new_array(self.reporter, value)

    def string(self, value: str) -> String:
        return new_string(self.reporter, value)

    def number(self, value: Any) -> Number:
        return new_number(self.reporter, value)

    def boolean(self, value: bool) -> Boolean:
        return new_boolean(self.reporter, value)

    def match(
        self,
        submatches: Sequence[str] | None,
        names: Sequence[str] | None = None,
    ) -> Match:
        return new_match(self.reporter, submatches, names)
