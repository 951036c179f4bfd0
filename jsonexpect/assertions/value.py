"""
Assertions on a value of any JSON type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..canonical import canon_value, type_name, values_equal
from ..reporting.models import Failure, FailureKind
from .array import Array
from .chain import Chain
from .object import Object
from .path import evaluate_path
from .scalars import Boolean, Number, String

if TYPE_CHECKING:
    from ..reporting import BaseReporter


class Value:
    """
    Wraps a canonical value of unknown type.

    Use object(), array(), string(), number() or boolean() to get a
    typed wrapper; each reports type-mismatch if the value has another
    type.

    Example:
        value = new_value(reporter, {"users": [{"name": "john"}]})

        value.path("$.users[0].name").string().equal("john")
        value.path("$.users[*].name").array().contains_only("john")
        value.object().value("users").array().length().equal(1)
    """

    def __init__(self, chain: Chain, value: Any):
        self.chain = chain
        self._value = value

    def raw(self) -> Any:
        """Underlying value in canonical form."""
        return self._value

    def path(self, path: str) -> Value:
        """
        Value at a JSONPath expression.

        A definite path such as "$.users[0].name" gives the value it
        points to and reports key-missing if there is none. Paths with
        wildcards, slices or filters, such as "$.users[*].name", give
        an array of every match. Indexes select array elements only,
        never characters of a string.

        Example:
            value = new_value(reporter, {"users": [{"name": "john"}, {"name": "bob"}]})
            value.path("$.users[1].name").string().equal("bob")
            value.path("$.users[*].name").array().equal(["john", "bob"])
        """
        result, _ = evaluate_path(self.chain, self._value, path, "Value.path")
        return Value(self.chain, result)

    def object(self) -> Object:
        if not isinstance(self._value, dict):
            self._type_mismatch("Value.object", "object")
            return Object(self.chain, {})
        return Object(self.chain, self._value)

    def array(self) -> Array:
        if not isinstance(self._value, list):
            self._type_mismatch("Value.array", "array")
            return Array(self.chain, [])
        return Array(self.chain, self._value)

    def string(self) -> String:
        if not isinstance(self._value, str):
            self._type_mismatch("Value.string", "string")
            return String(self.chain, "")
        return String(self.chain, self._value)

    def number(self) -> Number:
        if isinstance(self._value, bool) or not isinstance(self._value, float):
            self._type_mismatch("Value.number", "number")
            return Number(self.chain, 0.0)
        return Number(self.chain, self._value)

    def boolean(self) -> Boolean:
        if not isinstance(self._value, bool):
            self._type_mismatch("Value.boolean", "boolean")
            return Boolean(self.chain, False)
        return Boolean(self.chain, self._value)

    def null(self) -> Value:
        if self._value is not None:
            self.chain.fail(Failure(
                assertion_name="Value.null",
                kind=FailureKind.EQUAL,
                actual=self._value,
            ))
        return self

    def not_null(self) -> Value:
        if self._value is None:
            self.chain.fail(Failure(
                assertion_name="Value.not_null",
                kind=FailureKind.NOT_EQUAL,
                message="Value is null",
            ))
        return self

    def equal(self, value: Any) -> Value:
        """Succeeds if the value equals value, compared in canonical form."""
        expected, ok = canon_value(self.chain, value, "Value.equal")
        if not ok:
            return self
        if not values_equal(expected, self._value):
            self.chain.fail(Failure(
                assertion_name="Value.equal",
                kind=FailureKind.EQUAL,
                expected=expected,
                actual=self._value,
            ))
        return self

    def not_equal(self, value: Any) -> Value:
        expected, ok = canon_value(self.chain, value, "Value.not_equal")
        if not ok:
            return self
        if values_equal(expected, self._value):
            self.chain.fail(Failure(
                assertion_name="Value.not_equal",
                kind=FailureKind.NOT_EQUAL,
                expected=expected,
            ))
        return self

    def _type_mismatch(self, name: str, expected_type: str) -> None:
        self.chain.fail(Failure(
            assertion_name=name,
            kind=FailureKind.TYPE_MISMATCH,
            expected=expected_type,
            actual=type_name(self._value),
        ))


def new_value(reporter: BaseReporter, value: Any) -> Value:
    """
    Create a Value with a fresh chain.

    value may be anything canonicalizable, None included. Unsupported
    values are reported as invalid input and the Value wraps null.
    """
    chain = Chain(reporter)
    canonical, _ = canon_value(chain, value)
    return Value(chain, canonical)
