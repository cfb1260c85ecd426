"""Hypothesis strategies producing populated :class:`Stack` instances."""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

from stackiter._stack import Stack


def stack_contents(
    elements: st.SearchStrategy[Any] | None = None, *, max_size: int = 20
) -> st.SearchStrategy[tuple[Stack[Any], list[Any]]]:
    """Draw ``(stack, pushed)`` where ``pushed`` is the push order used."""
    if elements is None:
        elements = st.integers()
    return st.lists(elements, max_size=max_size).map(lambda xs: (Stack(xs), list(xs)))


def stacks(elements: st.SearchStrategy[Any] | None = None, *, max_size: int = 20) -> st.SearchStrategy[Stack[Any]]:
    return stack_contents(elements, max_size=max_size).map(lambda pair: pair[0])
