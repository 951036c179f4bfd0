"""
JSONPath navigation over canonical values.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError
from jsonpath_ng.jsonpath import Child, DatumInContext, Fields, Index, Root, This

from ..reporting.models import Failure, FailureKind

if TYPE_CHECKING:
    from .chain import Chain

logger = logging.getLogger(__name__)


def evaluate_path(
    chain: Chain, value: Any, path: str, assertion_name: str
) -> tuple[Any, bool]:
    """
    Evaluate a JSONPath expression on a canonical value.

    A definite path (only fields and single indexes, e.g. "$.users[0].name")
    yields the one value it points to, and reports key-missing when it
    points nowhere. Any other path (wildcards, slices, filters, recursive
    descent) yields the list of all matches, possibly empty.

    Indexes only select array elements. "$.name[0]" does not pick the
    first character of a string, it points nowhere.

    Returns:
        Tuple of (result, ok). If ok is False a failure was reported and
        result is None.
    """
    try:
        expr = parse_jsonpath(path)
    except (JsonPathLexerError, JsonPathParserError) as e:
        chain.fail(Failure(
            assertion_name=assertion_name,
            kind=FailureKind.INVALID_INPUT,
            actual=path,
            message=f"Invalid JSONPath expression: {e}",
        ))
        return None, False
    except Exception as e:
        chain.fail(Failure(
            assertion_name=assertion_name,
            kind=FailureKind.INVALID_INPUT,
            actual=path,
            message=f"Failed to parse JSONPath: {type(e).__name__}: {e}",
        ))
        return None, False

    try:
        matches = expr.find(value)
    except Exception as e:
        chain.fail(Failure(
            assertion_name=assertion_name,
            kind=FailureKind.INVALID_INPUT,
            actual=path,
            message=f"Failed to evaluate JSONPath: {type(e).__name__}: {e}",
        ))
        return None, False

    # jsonpath-ng also indexes into strings; only arrays have elements
    matches = [m for m in matches if not _indexes_non_array(m)]
    logger.debug(f"JSONPath {path!r} matched {len(matches)} value(s)")

    if not _is_definite(expr):
        return [m.value for m in matches], True

    if not matches:
        chain.fail(Failure(
            assertion_name=assertion_name,
            kind=FailureKind.KEY_MISSING,
            expected=path,
            actual=value,
        ))
        return None, False

    return matches[0].value, True


def _indexes_non_array(match: DatumInContext) -> bool:
    """True if any step of the match indexed into something other than a list."""
    datum = match
    while datum.context is not None:
        if isinstance(datum.path, Index) and not isinstance(datum.context.value, list):
            return True
        datum = datum.context
    return False


def _is_definite(expr: Any) -> bool:
    """True if the expression can match at most one value."""
    if isinstance(expr, (Root, This)):
        return True
    if isinstance(expr, Child):
        return _is_definite(expr.left) and _is_definite(expr.right)
    if isinstance(expr, Fields):
        return len(expr.fields) == 1 and expr.fields[0] != "*"
    if isinstance(expr, Index):
        indices = getattr(expr, "indices", None)
        return indices is None or len(indices) == 1
    return False
