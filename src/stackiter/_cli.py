from __future__ import annotations

import argparse
import sys

from stackiter._demo import print_evens, print_pairs, print_stack, print_stack_iter
from stackiter._stack import Stack
from stackiter._term import force_color, heading


def _count(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"count must be >= 0, got {value}")
    return value


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="stackiter", description="Walk a stack of integers every supported way.")
    p.add_argument("-n", "--count", type=_count, default=5, help="Push the integers 0..COUNT-1 (default 5)")
    p.add_argument("--evens", action="store_true", help="Also print the even values through a filtered cursor")
    p.add_argument("-v", "--verbose", action="store_true", help="Print a heading before each section")
    p.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    args = p.parse_args(argv)

    if args.no_color:
        force_color(False)

    stack: Stack[int] = Stack()
    for i in range(args.count):
        stack.push(i)

    sections = [
        ("for loop", print_stack),
        ("cursor", print_stack_iter),
        ("pairs", print_pairs),
    ]
    if args.evens:
        sections.append(("evens", print_evens))

    for title, show in sections:
        if args.verbose:
            print(heading(title))
        show(stack, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
