"""Shared fixtures for stackiter tests."""

from __future__ import annotations

import pytest

from stackiter import Stack
from stackiter._term import force_color


@pytest.fixture
def stack():
    """The stack the command line builds: 0..4 pushed in order."""
    s = Stack()
    for i in range(5):
        s.push(i)
    return s


@pytest.fixture
def reset_color():
    """Undo any force_color() a test (or main()) left behind."""
    yield
    force_color(None)
