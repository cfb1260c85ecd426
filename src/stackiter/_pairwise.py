from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

from stackiter._stack import Stack

T = TypeVar("T")


def pairwise(stack: Stack[T]) -> Iterator[tuple[T, T]]:
    """Yield each element together with the one pushed right after it.

    Two cursors walk the stack, the second kept one step ahead of the first.
    A stack of n elements gives max(0, n - 1) pairs.
    """
    current = stack.iter()
    ahead = stack.iter()
    ahead.next()

    while True:
        # Exhaustion is checked by position so stored None values still pair.
        if current.exhausted():
            return
        value = current.next()
        if ahead.exhausted():
            return
        yield value, ahead.next()  # type: ignore[misc]
