"""
Failure chain shared by all wrappers derived from one root value.

A Chain remembers whether any assertion on the root value, or on
anything navigated from it, has failed. It is created once by a
constructor such as new_object() and passed by reference to every
derived wrapper.

Chains are not thread-safe. Assertions sharing one chain must be
called from a single thread, or serialized by the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..reporting import BaseReporter, Failure

logger = logging.getLogger(__name__)


class Chain:
    """
    Monotonic ok -> failed state plus the reporter failures go to.

    Example:
        chain = Chain(FailureCollector())
        chain.fail(Failure("Object.Equal", FailureKind.EQUAL))
        assert chain.failed
    """

    def __init__(self, reporter: BaseReporter):
        self.reporter = reporter
        self._failed = False

    @property
    def failed(self) -> bool:
        """True once any failure has been recorded on this chain."""
        return self._failed

    def fail(self, failure: Failure) -> None:
        """
        Record a failure and forward it to the reporter.

        Every call is reported, including calls made after the chain
        has already failed. The state itself never goes back to ok.
        """
        if not self._failed:
            logger.debug(f"Chain failed: {failure.assertion_name} ({failure.kind.value})")
        self._failed = True
        self.reporter.report(failure)

    def __repr__(self) -> str:
        return f"Chain(failed={self._failed})"
