"""
Canonical Values and Matching

This package converts heterogeneous Python values into one comparable
representation and implements equality and containment over it.

Usage:
    from jsonexpect.canonical import to_canonical, values_equal, contains_map

    outer = to_canonical({"foo": 123, "bar": {"a": True, "b": False}})
    inner = to_canonical({"bar": {"a": True}})

    values_equal(to_canonical({"a": 1}), to_canonical({"a": 1.0}))  # True
    contains_map(outer, inner)  # True
"""

# Canonicalizer
from .canonicalizer import (
    CanonicalValue,
    canon_list,
    canon_map,
    canon_number,
    canon_value,
    to_canonical,
)

# Matching
from .matching import (
    contains_element,
    contains_key,
    contains_map,
    in_bounds,
    type_name,
    values_equal,
)

__all__ = [
    # Canonicalizer
    "CanonicalValue",
    "to_canonical",
    "canon_value",
    "canon_map",
    "canon_list",
    "canon_number",
    # Matching
    "values_equal",
    "contains_key",
    "contains_map",
    "contains_element",
    "in_bounds",
    "type_name",
]
