from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from stackiter._stack import Stack

T = TypeVar("T")


class Cursor(Generic[T]):
    """Forward-only read view over a :class:`Stack`.

    ``next()`` returns ``None`` once the cursor runs off the top, and keeps
    doing so.  The cursor is also a regular Python iterator, so it can be fed
    to ``filter``, ``itertools`` or a ``for`` loop.

    The stack must not be pushed to or popped from while a cursor over it is
    still in use; the next advance raises ``RuntimeError`` if it was.
    """

    __slots__ = ("_stack", "_index", "_changes")

    def __init__(self, stack: Stack[T]) -> None:
        self._stack = stack
        self._index = 0
        self._changes = stack._changes

    @property
    def position(self) -> int:
        return self._index

    def _check_unchanged(self) -> None:
        if self._changes != self._stack._changes:
            raise RuntimeError("Stack changed during iteration")

    def exhausted(self) -> bool:
        self._check_unchanged()
        return self._index >= len(self._stack._items)

    def next(self) -> T | None:
        if self.exhausted():
            return None
        item = self._stack._items[self._index]
        self._index += 1
        return item

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self.exhausted():
            raise StopIteration
        return self.next()  # type: ignore[return-value]

    def filter(self, predicate: Callable[[T], bool]) -> Iterator[T]:
        return (item for item in self if predicate(item))
