"""
Exceptions raised by jsonexpect.

Assertions never raise on a mismatch; they report a Failure instead.
These exceptions cover the two places where raising is the contract:
internal value conversion, and the reporter that turns failures into
test errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .reporting.models import Failure


class JsonExpectError(Exception):
    """Base class for all jsonexpect exceptions."""


class CanonicalizationError(JsonExpectError):
    """A value could not be converted to canonical form."""

    def __init__(self, message: str, value: Any = None):
        self.value = value
        super().__init__(message)


class ExpectationError(AssertionError):
    """Raised by RaisingReporter for the first reported failure."""

    def __init__(self, failure: Failure):
        self.failure = failure
        super().__init__(str(failure))
