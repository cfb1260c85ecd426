from stackiter._cli import main
from stackiter._cursor import Cursor
from stackiter._pairwise import pairwise
from stackiter._stack import Stack
from stackiter._strategies import stack_contents, stacks

__all__ = [
    "Cursor",
    "Stack",
    "main",
    "pairwise",
    "stack_contents",
    "stacks",
]
