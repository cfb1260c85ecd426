"""Array-backed LIFO stack.

Iterating a stack walks it bottom-to-top (oldest push first), the reverse of
the order ``pop`` hands elements back.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from stackiter._cursor import Cursor

T = TypeVar("T")


class Stack(Generic[T]):
    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        # Bumped on every mutation so live cursors can notice.
        self._changes = 0
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: T) -> None:
        self._items.append(value)
        self._changes += 1

    def pop(self) -> T | None:
        if not self._items:
            return None
        self._changes += 1
        return self._items.pop()

    def peek(self) -> T | None:
        if not self._items:
            return None
        return self._items[-1]

    def iter(self) -> Cursor[T]:
        """Return a fresh cursor positioned at the bottom element."""
        return Cursor(self)

    def drain(self) -> Iterator[T]:
        """Hand every element over bottom-to-top, leaving the stack empty.

        The stack is emptied immediately, not as the returned iterator is
        consumed, so it can be pushed to again right away.
        """
        items, self._items = self._items, []
        self._changes += 1
        return iter(items)
