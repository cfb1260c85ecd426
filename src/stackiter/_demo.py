from __future__ import annotations

import sys
from typing import Any, TextIO

from stackiter._pairwise import pairwise
from stackiter._stack import Stack


def print_stack(stack: Stack[Any], out: TextIO | None = None) -> None:
    out = sys.stdout if out is None else out
    for value in stack:
        print(value, file=out)


def print_stack_iter(stack: Stack[Any], out: TextIO | None = None) -> None:
    out = sys.stdout if out is None else out
    cursor = stack.iter()
    while not cursor.exhausted():
        print(cursor.next(), file=out)


def print_pairs(stack: Stack[Any], out: TextIO | None = None) -> None:
    out = sys.stdout if out is None else out
    for first, second in pairwise(stack):
        print(first, second, file=out)


def print_evens(stack: Stack[int], out: TextIO | None = None) -> None:
    out = sys.stdout if out is None else out
    for value in stack.iter().filter(lambda v: v % 2 == 0):
        print(value, file=out)
