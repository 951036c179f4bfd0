"""
Shared pytest fixtures.
"""

import pytest

from jsonexpect.reporting import FailureCollector


@pytest.fixture
def collector() -> FailureCollector:
    """Reporter that keeps every failure for inspection."""
    return FailureCollector()
