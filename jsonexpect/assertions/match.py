"""
Assertions on regular expression match results.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Sequence

from ..reporting.models import Failure, FailureKind
from .chain import Chain

if TYPE_CHECKING:
    from ..reporting import BaseReporter
    from .scalars import Number, String


class Match:
    """
    Submatches of a regular expression plus their group names.

    Index 0 holds the whole match, index N the N-th group. Group names
    are resolved to indexes once, at construction.

    Example:
        s = "http://example.com/users/john"
        m = String(chain, s).match(r"http://(?P<host>.+)/users/(?P<user>.+)")

        m.not_empty()
        m.length().equal(3)
        m.index(1).equal("example.com")
        m.name("user").equal("john")
        m.values("example.com", "john")
    """

    def __init__(
        self,
        chain: Chain,
        submatches: Sequence[str] | None,
        names: Sequence[str] | None = None,
    ):
        self.chain = chain
        self._submatches = list(submatches) if submatches is not None else []
        self._names: dict[str, int] = {}
        for index, name in enumerate(names or []):
            if name:
                self._names[name] = index

    def raw(self) -> list[str]:
        """Underlying submatches."""
        return self._submatches

    def length(self) -> Number:
        """Number of submatches, whole match included."""
        from .scalars import Number

        return Number(self.chain, float(len(self._submatches)))

    def index(self, index: int) -> String:
        """
        Submatch with the given index.

        If the index is out of bounds, reports failure and returns an
        empty string.
        """
        from .scalars import String

        if not 0 <= index < len(self._submatches):
            self.chain.fail(Failure(
                assertion_name="Match.index",
                kind=FailureKind.OUT_OF_BOUNDS,
                expected=index,
                actual=len(self._submatches),
            ))
            return String(self.chain, "")
        return String(self.chain, self._submatches[index])

    def name(self, name: str) -> String:
        """
        Submatch for the given group name.

        If there is no group with that name, reports failure and returns
        an empty string.
        """
        from .scalars import String

        if name not in self._names:
            self.chain.fail(Failure(
                assertion_name="Match.name",
                kind=FailureKind.PATTERN_MISMATCH,
                expected=dict(self._names),
                actual=name,
            ))
            return String(self.chain, "")
        return self.index(self._names[name])

    def empty(self) -> Match:
        if self._submatches:
            self.chain.fail(Failure(
                assertion_name="Match.empty",
                kind=FailureKind.EMPTY,
                actual=self._submatches,
            ))
        return self

    def not_empty(self) -> Match:
        if not self._submatches:
            self.chain.fail(Failure(
                assertion_name="Match.not_empty",
                kind=FailureKind.NOT_EMPTY,
            ))
        return self

    def values(self, *values: str) -> Match:
        """
        Succeeds if the submatches from index 1 onward equal values.

        The whole match (index 0) is not compared.
        """
        expected = list(values)
        actual = self._groups()
        if expected != actual:
            self.chain.fail(Failure(
                assertion_name="Match.values",
                kind=FailureKind.EQUAL,
                expected=expected,
                actual=actual,
            ))
        return self

    def not_values(self, *values: str) -> Match:
        """Succeeds if the submatches from index 1 onward differ from values."""
        expected = list(values)
        if expected == self._groups():
            self.chain.fail(Failure(
                assertion_name="Match.not_values",
                kind=FailureKind.NOT_EQUAL,
                expected=expected,
            ))
        return self

    def _groups(self) -> list[str]:
        return self._submatches[1:]


def new_match(
    reporter: BaseReporter,
    submatches: Sequence[str] | None,
    names: Sequence[str] | None = None,
) -> Match:
    """
    Create a Match with a fresh chain.

    names is aligned with submatches: names[i] is the group name of
    submatches[i], or "" for an unnamed group. Both may be None.

    Example:
        r = re.compile(r"http://(?P<host>.+)/users/(?P<user>.+)")
        m = new_match(reporter, *match_parts(r.search(url), r))
    """
    return Match(Chain(reporter), submatches, names)


def new_match_from(
    reporter: BaseReporter, pattern: str | re.Pattern[str], text: str
) -> Match:
    """
    Search text for pattern and wrap the result.

    Reports invalid-input for a bad pattern, and pattern-mismatch when
    nothing matches. Non-string text is invalid input and is searched
    as an empty string.
    """
    from .scalars import new_string

    return new_string(reporter, text).match(pattern)


def match_parts(
    m: re.Match[str] | None, pattern: re.Pattern[str]
) -> tuple[list[str], list[str]]:
    """
    Split a re.Match into (submatches, names) for new_match().

    Unmatched optional groups become empty strings. A None match gives
    no submatches.
    """
    names = [""] * (pattern.groups + 1)
    for name, index in pattern.groupindex.items():
        names[index] = name

    if m is None:
        return [], names

    submatches = [m.group(0)] + [g if g is not None else "" for g in m.groups()]
    return submatches, names
