"""
Assertions on string, number and boolean values.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from ..canonical import canon_number
from ..reporting.models import Failure, FailureKind
from .chain import Chain
from .match import Match, match_parts

if TYPE_CHECKING:
    from ..reporting import BaseReporter


# ─────────────────────────────────────────────────────────────────────────────
# String
# ─────────────────────────────────────────────────────────────────────────────

class String:
    """
    Wraps a string value.

    Example:
        s = new_string(reporter, "Hello")
        s.not_empty().equal_fold("HELLO").contains("ell")
        s.length().equal(5)
    """

    def __init__(self, chain: Chain, value: str):
        self.chain = chain
        self._value = value

    def raw(self) -> str:
        return self._value

    def length(self) -> Number:
        return Number(self.chain, float(len(self._value)))

    def empty(self) -> String:
        if self._value != "":
            self._fail("String.empty", FailureKind.EMPTY, actual=self._value)
        return self

    def not_empty(self) -> String:
        if self._value == "":
            self._fail("String.not_empty", FailureKind.NOT_EMPTY)
        return self

    def equal(self, value: str) -> String:
        if not self._check_input("String.equal", value):
            return self
        if self._value != value:
            self._fail("String.equal", FailureKind.EQUAL, value, self._value)
        return self

    def not_equal(self, value: str) -> String:
        if not self._check_input("String.not_equal", value):
            return self
        if self._value == value:
            self._fail("String.not_equal", FailureKind.NOT_EQUAL, value)
        return self

    def equal_fold(self, value: str) -> String:
        """Case-insensitive equal."""
        if not self._check_input("String.equal_fold", value):
            return self
        if self._value.casefold() != value.casefold():
            self._fail("String.equal_fold", FailureKind.EQUAL, value, self._value)
        return self

    def not_equal_fold(self, value: str) -> String:
        if not self._check_input("String.not_equal_fold", value):
            return self
        if self._value.casefold() == value.casefold():
            self._fail("String.not_equal_fold", FailureKind.NOT_EQUAL, value)
        return self

    def contains(self, value: str) -> String:
        if not self._check_input("String.contains", value):
            return self
        if value not in self._value:
            self._fail("String.contains", FailureKind.CONTAINS, value, self._value)
        return self

    def not_contains(self, value: str) -> String:
        if not self._check_input("String.not_contains", value):
            return self
        if value in self._value:
            self._fail("String.not_contains", FailureKind.NOT_CONTAINS, value, self._value)
        return self

    def contains_fold(self, value: str) -> String:
        """Case-insensitive contains."""
        if not self._check_input("String.contains_fold", value):
            return self
        if value.casefold() not in self._value.casefold():
            self._fail("String.contains_fold", FailureKind.CONTAINS, value, self._value)
        return self

    def not_contains_fold(self, value: str) -> String:
        if not self._check_input("String.not_contains_fold", value):
            return self
        if value.casefold() in self._value.casefold():
            self._fail("String.not_contains_fold", FailureKind.NOT_CONTAINS, value, self._value)
        return self

    def match(self, pattern: str | re.Pattern[str]) -> Match:
        """
        Search the string for a regular expression.

        Returns a Match with the submatches of the first occurrence. If
        there is none, reports failure and returns an empty Match.
        """
        compiled = self._compile("String.match", pattern)
        if compiled is None:
            return Match(self.chain, [])

        m = compiled.search(self._value)
        submatches, names = match_parts(m, compiled)
        if m is None:
            self._fail(
                "String.match",
                FailureKind.PATTERN_MISMATCH,
                compiled.pattern,
                self._value,
            )
        return Match(self.chain, submatches, names)

    def not_match(self, pattern: str | re.Pattern[str]) -> String:
        compiled = self._compile("String.not_match", pattern)
        if compiled is None:
            return self
        if compiled.search(self._value) is not None:
            self.chain.fail(Failure(
                assertion_name="String.not_match",
                kind=FailureKind.PATTERN_MISMATCH,
                expected=compiled.pattern,
                actual=self._value,
                message="String unexpectedly matches pattern",
            ))
        return self

    def _compile(self, name: str, pattern: str | re.Pattern[str]) -> re.Pattern[str] | None:
        try:
            compiled = re.compile(pattern)
        except (re.error, TypeError) as e:
            self.chain.fail(Failure(
                assertion_name=name,
                kind=FailureKind.INVALID_INPUT,
                actual=repr(pattern),
                message=f"Invalid regular expression: {e}",
            ))
            return None

        # bytes patterns cannot search a str
        if not isinstance(compiled.pattern, str):
            self.chain.fail(Failure(
                assertion_name=name,
                kind=FailureKind.INVALID_INPUT,
                actual=repr(pattern),
                message="Expected a str pattern, got a bytes pattern",
            ))
            return None
        return compiled

    def _check_input(self, name: str, value: Any) -> bool:
        if isinstance(value, str):
            return True
        self.chain.fail(Failure(
            assertion_name=name,
            kind=FailureKind.INVALID_INPUT,
            actual=repr(value),
            message=f"Expected a string, got {type(value).__name__}",
        ))
        return False

    def _fail(self, name: str, kind: FailureKind, expected: Any = None, actual: Any = None) -> None:
        self.chain.fail(Failure(name, kind, expected, actual))


# ─────────────────────────────────────────────────────────────────────────────
# Number
# ─────────────────────────────────────────────────────────────────────────────

class Number:
    """
    Wraps a number. Every numeric input is held as a float.

    Example:
        n = new_number(reporter, 123)
        n.equal(123).gt(100).in_range(0, 200)
    """

    def __init__(self, chain: Chain, value: float):
        self.chain = chain
        self._value = value

    def raw(self) -> float:
        return self._value

    def equal(self, value: Any) -> Number:
        expected, ok = canon_number(self.chain, value, "Number.equal")
        if ok and self._value != expected:
            self._fail("Number.equal", FailureKind.EQUAL, expected)
        return self

    def not_equal(self, value: Any) -> Number:
        expected, ok = canon_number(self.chain, value, "Number.not_equal")
        if ok and self._value == expected:
            self._fail("Number.not_equal", FailureKind.NOT_EQUAL, expected)
        return self

    def equal_delta(self, value: Any, delta: Any) -> Number:
        """Succeeds if |number - value| <= delta."""
        args = self._pair("Number.equal_delta", value, delta)
        if args is None:
            return self
        expected, delta = args
        if abs(self._value - expected) > delta:
            self.chain.fail(Failure(
                assertion_name="Number.equal_delta",
                kind=FailureKind.EQUAL,
                expected=expected,
                actual=self._value,
                message=f"Difference exceeds delta {delta}",
            ))
        return self

    def not_equal_delta(self, value: Any, delta: Any) -> Number:
        args = self._pair("Number.not_equal_delta", value, delta)
        if args is None:
            return self
        expected, delta = args
        if abs(self._value - expected) <= delta:
            self.chain.fail(Failure(
                assertion_name="Number.not_equal_delta",
                kind=FailureKind.NOT_EQUAL,
                expected=expected,
                actual=self._value,
                message=f"Difference within delta {delta}",
            ))
        return self

    def gt(self, value: Any) -> Number:
        expected, ok = canon_number(self.chain, value, "Number.gt")
        if ok and not self._value > expected:
            self._fail("Number.gt", FailureKind.GT, expected)
        return self

    def ge(self, value: Any) -> Number:
        expected, ok = canon_number(self.chain, value, "Number.ge")
        if ok and not self._value >= expected:
            self._fail("Number.ge", FailureKind.GE, expected)
        return self

    def lt(self, value: Any) -> Number:
        expected, ok = canon_number(self.chain, value, "Number.lt")
        if ok and not self._value < expected:
            self._fail("Number.lt", FailureKind.LT, expected)
        return self

    def le(self, value: Any) -> Number:
        expected, ok = canon_number(self.chain, value, "Number.le")
        if ok and not self._value <= expected:
            self._fail("Number.le", FailureKind.LE, expected)
        return self

    def in_range(self, low: Any, high: Any) -> Number:
        """Succeeds if low <= number <= high."""
        bounds = self._pair("Number.in_range", low, high)
        if bounds is not None and not bounds[0] <= self._value <= bounds[1]:
            self._fail("Number.in_range", FailureKind.IN_RANGE, list(bounds))
        return self

    def not_in_range(self, low: Any, high: Any) -> Number:
        bounds = self._pair("Number.not_in_range", low, high)
        if bounds is not None and bounds[0] <= self._value <= bounds[1]:
            self._fail("Number.not_in_range", FailureKind.NOT_IN_RANGE, list(bounds))
        return self

    def _pair(self, name: str, first: Any, second: Any) -> tuple[float, float] | None:
        first_value, ok = canon_number(self.chain, first, name)
        if not ok:
            return None
        second_value, ok = canon_number(self.chain, second, name)
        if not ok:
            return None
        return first_value, second_value

    def _fail(self, name: str, kind: FailureKind, expected: Any) -> None:
        self.chain.fail(Failure(name, kind, expected, self._value))


# ─────────────────────────────────────────────────────────────────────────────
# Boolean
# ─────────────────────────────────────────────────────────────────────────────

class Boolean:
    """
    Wraps a boolean.

    Example:
        new_boolean(reporter, True).true().not_equal(False)
    """

    def __init__(self, chain: Chain, value: bool):
        self.chain = chain
        self._value = value

    def raw(self) -> bool:
        return self._value

    def equal(self, value: bool) -> Boolean:
        return self._check("Boolean.equal", value, FailureKind.EQUAL)

    def not_equal(self, value: bool) -> Boolean:
        return self._check("Boolean.not_equal", value, FailureKind.NOT_EQUAL)

    def true(self) -> Boolean:
        return self._check("Boolean.true", True, FailureKind.EQUAL)

    def false(self) -> Boolean:
        return self._check("Boolean.false", False, FailureKind.EQUAL)

    def _check(self, name: str, value: Any, kind: FailureKind) -> Boolean:
        if not isinstance(value, bool):
            self.chain.fail(Failure(
                assertion_name=name,
                kind=FailureKind.INVALID_INPUT,
                actual=repr(value),
                message=f"Expected a bool, got {type(value).__name__}",
            ))
            return self

        matches = self._value == value
        if kind == FailureKind.EQUAL and not matches:
            self.chain.fail(Failure(name, kind, value, self._value))
        elif kind == FailureKind.NOT_EQUAL and matches:
            self.chain.fail(Failure(name, kind, value))
        return self


# ─────────────────────────────────────────────────────────────────────────────
# Constructors
# ─────────────────────────────────────────────────────────────────────────────

def new_string(reporter: BaseReporter, value: str) -> String:
    """Create a String with a fresh chain. Non-strings are invalid input."""
    chain = Chain(reporter)
    if not isinstance(value, str):
        chain.fail(Failure(
            assertion_name="",
            kind=FailureKind.INVALID_INPUT,
            actual=repr(value),
            message=f"Expected a string, got {type(value).__name__}",
        ))
        return String(chain, "")
    return String(chain, value)


def new_number(reporter: BaseReporter, value: Any) -> Number:
    """Create a Number with a fresh chain. Non-numbers are invalid input."""
    chain = Chain(reporter)
    number, _ = canon_number(chain, value)
    return Number(chain, number)


def new_boolean(reporter: BaseReporter, value: bool) -> Boolean:
    """Create a Boolean with a fresh chain. Non-bools are invalid input."""
    chain = Chain(reporter)
    if not isinstance(value, bool):
        chain.fail(Failure(
            assertion_name="",
            kind=FailureKind.INVALID_INPUT,
            actual=repr(value),
            message=f"Expected a bool, got {type(value).__name__}",
        ))
        return Boolean(chain, False)
    return Boolean(chain, value)
