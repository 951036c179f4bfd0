"""
Failure models for soft assertions.

This module defines the record produced by a failed assertion and
the flat taxonomy of failure kinds.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_MAX_VALUE_LENGTH = 100


class FailureKind(str, Enum):
    """Category of an assertion failure."""
    EQUAL = "equal"
    NOT_EQUAL = "not-equal"
    CONTAINS = "contains"
    NOT_CONTAINS = "not-contains"
    KEY_MISSING = "key-missing"
    OUT_OF_BOUNDS = "out-of-bounds"
    EMPTY = "empty"
    NOT_EMPTY = "not-empty"
    INVALID_INPUT = "invalid-input"
    PATTERN_MISMATCH = "pattern-mismatch"
    TYPE_MISMATCH = "type-mismatch"
    # Number comparisons
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"
    IN_RANGE = "in-range"
    NOT_IN_RANGE = "not-in-range"


@dataclass(frozen=True)
class Failure:
    """
    A single assertion mismatch.

    Attributes:
        assertion_name: Qualified name of the failed assertion, e.g. "Object.Equal"
        kind: Category of the failure
        expected: What the assertion expected (None when not populated)
        actual: What was actually found (None when not populated)
        message: Free-text reason, mostly used for invalid input
    """
    assertion_name: str
    kind: FailureKind
    expected: Any = None
    actual: Any = None
    message: str = ""

    def __str__(self) -> str:
        return self.format()

    def format(self, max_length: int = DEFAULT_MAX_VALUE_LENGTH) -> str:
        """Format as a human-readable string."""
        name = self.assertion_name or "<construction>"
        lines = [f"❌ {name}: {self.kind.value}"]

        if self.message:
            lines.append(f"   Reason:   {self.message}")

        if self.expected is not None:
            lines.append(f"   Expected: {format_value(self.expected, max_length)}")

        if self.actual is not None:
            lines.append(f"   Actual:   {format_value(self.actual, max_length)}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "assertion_name": self.assertion_name,
            "kind": self.kind.value,
            "expected": _safe_serialize(self.expected),
            "actual": _safe_serialize(self.actual),
            "message": self.message,
        }


def format_value(value: Any, max_length: int = DEFAULT_MAX_VALUE_LENGTH) -> str:
    """Format a value for display, truncating if too long."""
    if value is None:
        return "null"

    if isinstance(value, str):
        formatted = repr(value)
    elif isinstance(value, (list, tuple, dict)):
        try:
            formatted = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            formatted = repr(value)
    else:
        formatted = repr(value)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted


def _safe_serialize(value: Any) -> Any:
    """Safely serialize a value, handling non-JSON types."""
    if value is None:
        return None
    try:
        json.dumps(value)
        return value
    except (TypeError, ValueError):
        return str(value)
