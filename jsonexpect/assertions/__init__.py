"""
Fluent Soft Assertions for JSON Values

This package provides wrappers around decoded JSON values whose
assertion methods report failures through a shared Chain instead of
raising. Every wrapper derived from a root value shares its chain.

Wrappers:
    - Value: any JSON value, with JSONPath navigation
    - Object: mapping; keys, values, equality and containment
    - Array: sequence; indexing, equality and membership
    - String, Number, Boolean: scalar leaves
    - Match: regular expression submatches

Usage:
    from jsonexpect.assertions import new_object
    from jsonexpect.reporting import FailureCollector

    collector = FailureCollector()
    obj = new_object(collector, {"foo": 123, "bar": {"a": True}})

    obj.contains_key("foo").value_equal("foo", 123)
    obj.contains_map({"bar": {"a": True}})
    obj.value("missing").string().equal("x")  # reported, never raised

    if obj.chain.failed:
        print(collector.summary())
"""

# Chain
from .chain import Chain

# Wrappers
from .array import Array, new_array
from .match import Match, match_parts, new_match, new_match_from
from .object import Object, new_object
from .scalars import Boolean, Number, String, new_boolean, new_number, new_string
from .value import Value, new_value

__all__ = [
    # Chain
    "Chain",
    # Wrappers
    "Value",
    "Object",
    "Array",
    "String",
    "Number",
    "Boolean",
    "Match",
    # Constructors
    "new_value",
    "new_object",
    "new_array",
    "new_string",
    "new_number",
    "new_boolean",
    "new_match",
    "new_match_from",
    "match_parts",
]
