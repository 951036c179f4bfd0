"""
Assertions on JSON objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..canonical import canon_map, canon_value, contains_key, contains_map, values_equal
from ..reporting.models import Failure, FailureKind
from .chain import Chain
from .path import evaluate_path

if TYPE_CHECKING:
    from ..reporting import BaseReporter
    from .array import Array
    from .value import Value


class Object:
    """
    Wraps a mapping in canonical form.

    Example:
        obj = new_object(reporter, {"foo": 123, "bar": {"a": True, "b": False}})

        obj.contains_key("foo").value_equal("foo", 123)
        obj.contains_map({"bar": {"a": True}})
        obj.value("bar").object().not_contains_key("c")
    """

    def __init__(self, chain: Chain, value: dict[str, Any]):
        self.chain = chain
        self._value = value

    def raw(self) -> dict[str, Any]:
        """Underlying value in canonical form (numbers are floats)."""
        return self._value

    def path(self, path: str) -> Value:
        """Value at a JSONPath expression, see Value.path()."""
        from .value import Value

        result, _ = evaluate_path(self.chain, self._value, path, "Object.path")
        return Value(self.chain, result)

    def keys(self) -> Array:
        """
        Object keys as an Array.

        Key order is not guaranteed; use contains_only() rather than
        equal() on the result.
        """
        from .array import Array

        return Array(self.chain, list(self._value.keys()))

    def values(self) -> Array:
        """Object values as an Array. Order is not guaranteed."""
        from .array import Array

        return Array(self.chain, list(self._value.values()))

    def value(self, key: str) -> Value:
        """
        Value for the given key.

        If the key is missing, reports failure and returns a null Value.
        """
        from .value import Value

        if not contains_key(self._value, key):
            self.chain.fail(Failure(
                assertion_name="Object.value",
                kind=FailureKind.KEY_MISSING,
                expected=key,
                actual=self._value,
            ))
            return Value(self.chain, None)
        return Value(self.chain, self._value[key])

    def empty(self) -> Object:
        if self._value:
            self.chain.fail(Failure(
                assertion_name="Object.empty",
                kind=FailureKind.EMPTY,
                actual=self._value,
            ))
        return self

    def not_empty(self) -> Object:
        if not self._value:
            self.chain.fail(Failure(
                assertion_name="Object.not_empty",
                kind=FailureKind.NOT_EMPTY,
            ))
        return self

    def equal(self, value: Any) -> Object:
        """
        Succeeds if the object equals a mapping, dataclass or serializable
        object. Both sides are compared in canonical form.
        """
        expected, ok = canon_map(self.chain, value, "Object.equal")
        if not ok:
            return self
        if not values_equal(expected, self._value):
            self.chain.fail(Failure(
                assertion_name="Object.equal",
                kind=FailureKind.EQUAL,
                expected=expected,
                actual=self._value,
            ))
        return self

    def not_equal(self, value: Any) -> Object:
        expected, ok = canon_map(self.chain, value, "Object.not_equal")
        if not ok:
            return self
        if values_equal(expected, self._value):
            self.chain.fail(Failure(
                assertion_name="Object.not_equal",
                kind=FailureKind.NOT_EQUAL,
                expected=expected,
            ))
        return self

    def contains_key(self, key: str) -> Object:
        if not contains_key(self._value, key):
            self.chain.fail(Failure(
                assertion_name="Object.contains_key",
                kind=FailureKind.KEY_MISSING,
                expected=key,
                actual=self._value,
            ))
        return self

    def not_contains_key(self, key: str) -> Object:
        if contains_key(self._value, key):
            self.chain.fail(Failure(
                assertion_name="Object.not_contains_key",
                kind=FailureKind.NOT_CONTAINS,
                expected=key,
                actual=self._value,
            ))
        return self

    def contains_map(self, value: Any) -> Object:
        """
        Succeeds if the object contains every key of value with a matching
        value. Nested objects are matched the same way; arrays must match
        exactly.

        Example:
            obj = new_object(reporter, {
                "foo": 123,
                "bar": {"a": True, "b": False},
                "baz": ["x", "y"],
            })

            obj.contains_map({"foo": 123, "bar": {"a": True}})  # success
            obj.contains_map({"foo": 123, "qux": 456})  # failure
            obj.contains_map({"baz": ["x"]})  # failure, arrays match exactly
        """
        submap, ok = canon_map(self.chain, value, "Object.contains_map")
        if not ok:
            return self
        if not contains_map(self._value, submap):
            self.chain.fail(Failure(
                assertion_name="Object.contains_map",
                kind=FailureKind.CONTAINS,
                expected=submap,
                actual=self._value,
            ))
        return self

    def not_contains_map(self, value: Any) -> Object:
        submap, ok = canon_map(self.chain, value, "Object.not_contains_map")
        if not ok:
            return self
        if contains_map(self._value, submap):
            self.chain.fail(Failure(
                assertion_name="Object.not_contains_map",
                kind=FailureKind.NOT_CONTAINS,
                expected=submap,
                actual=self._value,
            ))
        return self

    def value_equal(self, key: str, value: Any) -> Object:
        """
        Succeeds if the value for key equals value.

        A missing key is reported once, as key-missing, and nothing else
        is checked.
        """
        self.contains_key(key)
        if self.chain.failed:
            return self

        expected, ok = canon_value(self.chain, value, "Object.value_equal")
        if not ok:
            return self
        if not values_equal(expected, self._value[key]):
            self.chain.fail(Failure(
                assertion_name="Object.value_equal",
                kind=FailureKind.EQUAL,
                expected=expected,
                actual=self._value[key],
            ))
        return self

    def value_not_equal(self, key: str, value: Any) -> Object:
        """
        Succeeds if the value for key differs from value.

        A missing key is a failure, not a success.
        """
        self.contains_key(key)
        if self.chain.failed:
            return self

        expected, ok = canon_value(self.chain, value, "Object.value_not_equal")
        if not ok:
            return self
        if values_equal(expected, self._value[key]):
            self.chain.fail(Failure(
                assertion_name="Object.value_not_equal",
                kind=FailureKind.NOT_EQUAL,
                expected=expected,
            ))
        return self


def new_object(reporter: BaseReporter, value: Any) -> Object:
    """
    Create an Object with a fresh chain.

    value should be a mapping with string keys, a dataclass, or an object
    with to_dict(). None and non-mappings are reported as invalid input
    and the Object wraps an empty mapping.

    Example:
        obj = new_object(reporter, {"foo": 123})
        assert obj.raw() == {"foo": 123.0}
    """
    chain = Chain(reporter)
    if value is None:
        chain.fail(Failure(
            assertion_name="",
            kind=FailureKind.INVALID_INPUT,
            message="Expected a non-None mapping",
        ))
        return Object(chain, {})

    mapping, _ = canon_map(chain, value)
    return Object(chain, mapping)
