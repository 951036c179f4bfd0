"""
Assertions on JSON arrays.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..canonical import canon_list, canon_value, contains_element, in_bounds, values_equal
from ..reporting.models import Failure, FailureKind
from .chain import Chain
from .path import evaluate_path
from .scalars import Number

if TYPE_CHECKING:
    from ..reporting import BaseReporter
    from .value import Value


class Array:
    """
    Wraps a sequence in canonical form.

    Example:
        arr = new_array(reporter, ["foo", 123])

        arr.length().equal(2)
        arr.element(0).string().equal("foo")
        arr.contains(123).not_contains("bar")
        arr.contains_only(123, "foo")
    """

    def __init__(self, chain: Chain, value: list[Any]):
        self.chain = chain
        self._value = value

    def raw(self) -> list[Any]:
        return self._value

    def path(self, path: str) -> Value:
        """Value at a JSONPath expression, see Value.path()."""
        from .value import Value

        result, _ = evaluate_path(self.chain, self._value, path, "Array.path")
        return Value(self.chain, result)

    def length(self) -> Number:
        return Number(self.chain, float(len(self._value)))

    def element(self, index: int) -> Value:
        """
        Element with the given index.

        If the index is out of bounds, reports failure and returns a null
        Value.
        """
        from .value import Value

        if not in_bounds(index, len(self._value)):
            self.chain.fail(Failure(
                assertion_name="Array.element",
                kind=FailureKind.OUT_OF_BOUNDS,
                expected=index,
                actual=len(self._value),
            ))
            return Value(self.chain, None)
        return Value(self.chain, self._value[index])

    def first(self) -> Value:
        return self._edge("Array.first", 0)

    def last(self) -> Value:
        return self._edge("Array.last", -1)

    def iter(self) -> list[Value]:
        """
        One Value per element, all sharing this array's chain.

        Example:
            for item in arr.iter():
                item.object().contains_key("id")
        """
        from .value import Value

        return [Value(self.chain, item) for item in self._value]

    def empty(self) -> Array:
        if self._value:
            self.chain.fail(Failure(
                assertion_name="Array.empty",
                kind=FailureKind.EMPTY,
                actual=self._value,
            ))
        return self

    def not_empty(self) -> Array:
        if not self._value:
            self.chain.fail(Failure(
                assertion_name="Array.not_empty",
                kind=FailureKind.NOT_EMPTY,
            ))
        return self

    def equal(self, value: Any) -> Array:
        """Succeeds if the array equals value, element by element, in order."""
        expected, ok = canon_list(self.chain, value, "Array.equal")
        if not ok:
            return self
        if not values_equal(expected, self._value):
            self.chain.fail(Failure(
                assertion_name="Array.equal",
                kind=FailureKind.EQUAL,
                expected=expected,
                actual=self._value,
            ))
        return self

    def not_equal(self, value: Any) -> Array:
        expected, ok = canon_list(self.chain, value, "Array.not_equal")
        if not ok:
            return self
        if values_equal(expected, self._value):
            self.chain.fail(Failure(
                assertion_name="Array.not_equal",
                kind=FailureKind.NOT_EQUAL,
                expected=expected,
            ))
        return self

    def contains(self, *values: Any) -> Array:
        """Succeeds if every given value is an element of the array."""
        elements, ok = self._canon_all("Array.contains", values)
        if not ok:
            return self
        for element in elements:
            if not contains_element(self._value, element):
                self.chain.fail(Failure(
                    assertion_name="Array.contains",
                    kind=FailureKind.CONTAINS,
                    expected=element,
                    actual=self._value,
                ))
                break
        return self

    def not_contains(self, *values: Any) -> Array:
        """Succeeds if none of the given values is an element of the array."""
        elements, ok = self._canon_all("Array.not_contains", values)
        if not ok:
            return self
        for element in elements:
            if contains_element(self._value, element):
                self.chain.fail(Failure(
                    assertion_name="Array.not_contains",
                    kind=FailureKind.NOT_CONTAINS,
                    expected=element,
                    actual=self._value,
                ))
                break
        return self

    def contains_only(self, *values: Any) -> Array:
        """
        Succeeds if the array holds exactly the given values, in any order.

        Example:
            new_array(reporter, ["foo", 123]).contains_only(123, "foo")
        """
        elements, ok = self._canon_all("Array.contains_only", values)
        if not ok:
            return self

        matches = len(elements) == len(self._value) and all(
            contains_element(self._value, e) for e in elements
        ) and all(
            contains_element(elements, e) for e in self._value
        )
        if not matches:
            self.chain.fail(Failure(
                assertion_name="Array.contains_only",
                kind=FailureKind.CONTAINS,
                expected=elements,
                actual=self._value,
            ))
        return self

    def _canon_all(self, name: str, values: tuple[Any, ...]) -> tuple[list[Any], bool]:
        elements = []
        for value in values:
            element, ok = canon_value(self.chain, value, name)
            if not ok:
                return [], False
            elements.append(element)
        return elements, True

    def _edge(self, name: str, index: int) -> Value:
        from .value import Value

        if not self._value:
            self.chain.fail(Failure(
                assertion_name=name,
                kind=FailureKind.NOT_EMPTY,
            ))
            return Value(self.chain, None)
        return Value(self.chain, self._value[index])


def new_array(reporter: BaseReporter, value: Any) -> Array:
    """
    Create an Array with a fresh chain.

    value should be a list or a tuple. None and non-sequences are
    reported as invalid input and the Array wraps an empty list.
    """
    chain = Chain(reporter)
    if value is None:
        chain.fail(Failure(
            assertion_name="",
            kind=FailureKind.INVALID_INPUT,
            message="Expected a non-None sequence",
        ))
        return Array(chain, [])

    sequence, _ = canon_list(chain, value)
    return Array(chain, sequence)
