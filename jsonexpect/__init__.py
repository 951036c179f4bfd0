"""
jsonexpect - Fluent Soft Assertions for JSON Values

This package wraps decoded JSON values (objects, arrays, scalars and
regular expression matches) in chainable assertions that report
failures instead of raising them.

Subpackages:
    - canonical: Canonical value model, equality and containment
    - assertions: Chain and the wrapper types (Value, Object, Array, ...)
    - reporting: Failure records and reporters
    - config: YAML settings

Usage:
    from jsonexpect import Expect, FailureCollector

    collector = FailureCollector()
    e = Expect(collector)

    body = {"foo": 123, "bar": {"a": True, "b": False}}
    obj = e.object(body)

    obj.contains_map({"foo": 123, "bar": {"a": True}})
    obj.value("bar").object().value_equal("b", False)
    obj.path("$.bar.a").boolean().true()

    if collector.failed:
        print(collector.summary())
"""

__version__ = "0.1.0"

# Re-export canonical for convenience
from .canonical import (
    to_canonical,
    values_equal,
    contains_map,
)

# Re-export reporting for convenience
from .reporting import (
    # Models
    Failure,
    FailureKind,
    # Reporters
    BaseReporter,
    FailureCollector,
    RaisingReporter,
    LoggingReporter,
    ConsoleReporter,
    create_reporter,
)

# Re-export assertions for convenience
from .assertions import (
    Chain,
    # Wrappers
    Value,
    Object,
    Array,
    String,
    Number,
    Boolean,
    Match,
    # Constructors
    new_value,
    new_object,
    new_array,
    new_string,
    new_number,
    new_boolean,
    new_match,
    new_match_from,
    match_parts,
)

# Re-export config for convenience
from .config import (
    Settings,
    ReporterType,
    LogLevel,
    load_settings,
    settings_from_yaml,
)

from .exceptions import CanonicalizationError, ExpectationError, JsonExpectError
from .expect import Expect
from .logs import configure_logging

__all__ = [
    # Package info
    "__version__",
    # Entry point
    "Expect",
    # Canonical
    "to_canonical",
    "values_equal",
    "contains_map",
    # Reporting
    "Failure",
    "FailureKind",
    "BaseReporter",
    "FailureCollector",
    "RaisingReporter",
    "LoggingReporter",
    "ConsoleReporter",
    "create_reporter",
    # Assertions
    "Chain",
    "Value",
    "Object",
    "Array",
    "String",
    "Number",
    "Boolean",
    "Match",
    "new_value",
    "new_object",
    "new_array",
    "new_string",
    "new_number",
    "new_boolean",
    "new_match",
    "new_match_from",
    "match_parts",
    # Config
    "Settings",
    "ReporterType",
    "LogLevel",
    "load_settings",
    "settings_from_yaml",
    "configure_logging",
    # Exceptions
    "JsonExpectError",
    "CanonicalizationError",
    "ExpectationError",
]
