"""Shared fixtures"""

import pytest

from dlog import LoggingContext, set_default_context


@pytest.fixture
def context():
    """Isolated context with default settings."""
    return LoggingContext()


@pytest.fixture
def default_context():
    """Fresh default context, restored after the test."""
    fresh = LoggingContext()
    previous = set_default_context(fresh)
    yield fresh
    set_default_context(previous)
