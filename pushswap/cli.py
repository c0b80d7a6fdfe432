"""Command-line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parse import PushSwapError, assign_index, parse_args
from pushswap.small import sort_three, sort_two
from pushswap.stack import Item, Stacks, is_sorted
from pushswap.turk import turk_sort


def solve(args: Sequence[str]) -> list[str]:
    """Return the operations that sort the given numbers.

    Raises PushSwapError on invalid input.
    """
    values = parse_args(args)
    if len(values) <= 1 or is_sorted(values):
        return []
    indices = assign_index(values)
    stacks = Stacks(Item(value, index) for value, index in zip(values, indices))
    if len(values) == 2:
        sort_two(stacks)
    elif len(values) == 3:
        sort_three(stacks)
    else:
        turk_sort(stacks)
    return stacks.ops


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        ops = solve(args)
    except PushSwapError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    for op in ops:
        sys.stdout.write(f"{op}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())