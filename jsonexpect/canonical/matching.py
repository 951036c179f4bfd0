"""
Equality and containment over canonical values.

These functions assume both sides are already canonical (see
canonicalizer.to_canonical). They never use == between containers
directly, because Python considers True == 1.0 while a JSON boolean
is never equal to a number.
"""

from __future__ import annotations

from typing import Any


def values_equal(a: Any, b: Any) -> bool:
    """
    Deep structural equality.

    Mappings compare by key set and values, ignoring key order.
    Sequences compare by length and position.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b

    if a is None or b is None:
        return a is None and b is None

    if isinstance(a, dict):
        if not isinstance(b, dict) or a.keys() != b.keys():
            return False
        return all(values_equal(a[k], b[k]) for k in a)

    if isinstance(a, list):
        if not isinstance(b, list) or len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))

    if isinstance(a, float):
        return isinstance(b, float) and a == b

    if isinstance(a, str):
        return isinstance(b, str) and a == b

    return False


def contains_key(mapping: dict[str, Any], key: str) -> bool:
    """Check if a key is present, independent of its value."""
    return key in mapping


def contains_map(outer: dict[str, Any], inner: dict[str, Any]) -> bool:
    """
    Check that outer contains every key of inner with a matching value.

    Nested mappings on both sides are compared recursively with the
    same rule. Any other value, sequences included, must be equal.
    A single mismatch anywhere fails the whole check.
    """
    for key, inner_value in inner.items():
        if key not in outer:
            return False

        outer_value = outer[key]
        if isinstance(outer_value, dict) and isinstance(inner_value, dict):
            if not contains_map(outer_value, inner_value):
                return False
            continue

        if not values_equal(outer_value, inner_value):
            return False

    return True


def contains_element(sequence: list[Any], item: Any) -> bool:
    """Check if any element of the sequence equals item."""
    return any(values_equal(element, item) for element in sequence)


def in_bounds(index: int, length: int) -> bool:
    """Check 0 <= index < length."""
    return 0 <= index < length


def type_name(value: Any) -> str:
    """JSON type name of a canonical value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
