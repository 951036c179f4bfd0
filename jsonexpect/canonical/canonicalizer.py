"""
Conversion of arbitrary Python values to canonical form.

The canonical form is a tree built only from None, bool, float, str,
list and dict with str keys. Every integer and floating point input
becomes a float, so 1, 1.0 and Decimal("1") all compare equal.
Dataclasses and objects that can serialize themselves (to_dict() or
model_dump()) are flattened to their dict representation first.
"""

from __future__ import annotations

import dataclasses
import logging
import math
import numbers
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from ..exceptions import CanonicalizationError
from ..reporting.models import Failure, FailureKind

if TYPE_CHECKING:
    from ..assertions.chain import Chain

logger = logging.getLogger(__name__)

CanonicalValue = Union[None, bool, float, str, list, dict]

# Serialization hooks tried, in order, on otherwise unsupported objects
SERIALIZATION_METHODS = ("to_dict", "model_dump")


def to_canonical(value: Any) -> CanonicalValue:
    """
    Convert a value to canonical form.

    Args:
        value: Mapping, sequence, dataclass, serializable object or scalar

    Returns:
        The canonical tree

    Raises:
        CanonicalizationError: If the value (or anything inside it) is
            not representable as a JSON-like document, refers to itself,
            or is nested deeper than the interpreter recursion limit
    """
    try:
        return _convert(value, set())
    except RecursionError as e:
        raise CanonicalizationError(
            f"Value is nested too deeply: {type(value).__name__}",
            value=value,
        ) from e


def _convert(value: Any, active: set[int]) -> CanonicalValue:
    # active holds the ids of the containers on the current path
    if value is None:
        return None

    # bool is an int subclass, so it has to go first
    if isinstance(value, bool):
        return value

    if isinstance(value, Enum):
        return _convert(value.value, active)

    if isinstance(value, str):
        return str(value)

    if isinstance(value, (numbers.Real, Decimal)):
        return _to_float(value)

    if isinstance(value, Mapping):
        with _entered(value, active):
            result = {}
            for key, item in value.items():
                if isinstance(key, Enum):
                    key = key.value
                if not isinstance(key, str):
                    raise CanonicalizationError(
                        f"Mapping keys must be strings, got {type(key).__name__}",
                        value=key,
                    )
                result[str(key)] = _convert(item, active)
            return result

    if isinstance(value, (list, tuple)):
        with _entered(value, active):
            return [_convert(item, active) for item in value]

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        with _entered(value, active):
            return _convert(dataclasses.asdict(value), active)

    for method_name in SERIALIZATION_METHODS:
        method = getattr(value, method_name, None)
        if callable(method) and not isinstance(value, type):
            try:
                serialized = method()
            except Exception as e:
                raise CanonicalizationError(
                    f"{type(value).__name__}.{method_name}() failed: {type(e).__name__}: {e}",
                    value=value,
                ) from e
            with _entered(value, active):
                return _convert(serialized, active)

    raise CanonicalizationError(
        f"Unsupported type: {type(value).__name__}",
        value=value,
    )


def canon_value(
    chain: Chain, value: Any, assertion_name: str = ""
) -> tuple[CanonicalValue, bool]:
    """
    Canonicalize a value, reporting invalid input through the chain.

    Returns:
        Tuple of (canonical value, ok). When ok is False the failure has
        already been reported and the caller should stop.
    """
    try:
        return to_canonical(value), True
    except CanonicalizationError as e:
        logger.debug(f"Rejected value of type {type(value).__name__}: {e}")
        chain.fail(Failure(
            assertion_name=assertion_name,
            kind=FailureKind.INVALID_INPUT,
            actual=_describe(value),
            message=str(e),
        ))
        return None, False


def canon_map(
    chain: Chain, value: Any, assertion_name: str = ""
) -> tuple[dict[str, Any], bool]:
    """Canonicalize a value that must become a mapping."""
    result, ok = canon_value(chain, value, assertion_name)
    if not ok:
        return {}, False

    if not isinstance(result, dict):
        chain.fail(Failure(
            assertion_name=assertion_name,
            kind=FailureKind.INVALID_INPUT,
            actual=_describe(value),
            message=f"Expected a mapping or an object, got {type(value).__name__}",
        ))
        return {}, False

    return result, True


def canon_list(
    chain: Chain, value: Any, assertion_name: str = ""
) -> tuple[list[Any], bool]:
    """Canonicalize a value that must become a sequence."""
    result, ok = canon_value(chain, value, assertion_name)
    if not ok:
        return [], False

    if not isinstance(result, list):
        chain.fail(Failure(
            assertion_name=assertion_name,
            kind=FailureKind.INVALID_INPUT,
            actual=_describe(value),
            message=f"Expected a list or a tuple, got {type(value).__name__}",
        ))
        return [], False

    return result, True


def canon_number(
    chain: Chain, value: Any, assertion_name: str = ""
) -> tuple[float, bool]:
    """Canonicalize a value that must become a number."""
    result, ok = canon_value(chain, value, assertion_name)
    if not ok:
        return 0.0, False

    if isinstance(result, bool) or not isinstance(result, float):
        chain.fail(Failure(
            assertion_name=assertion_name,
            kind=FailureKind.INVALID_INPUT,
            actual=_describe(value),
            message=f"Expected a number, got {type(value).__name__}",
        ))
        return 0.0, False

    return result, True


def _to_float(value: numbers.Real | Decimal) -> float:
    try:
        result = float(value)
    except (OverflowError, ValueError) as e:
        raise CanonicalizationError(f"Number out of range: {e}", value=value) from e

    if math.isnan(result) or math.isinf(result):
        raise CanonicalizationError(f"Non-finite number: {value!r}", value=value)

    return result


@contextmanager
def _entered(value: Any, active: set[int]) -> Iterator[None]:
    key = id(value)
    if key in active:
        raise CanonicalizationError(
            f"Circular reference to {type(value).__name__}",
            value=value,
        )
    active.add(key)
    try:
        yield
    finally:
        active.discard(key)


def _describe(value: Any) -> Any:
    """Raw input as it should appear in a Failure."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    try:
        return f"<{type(value).__name__}> {value!r}"
    except RecursionError:
        return f"<{type(value).__name__}>"
