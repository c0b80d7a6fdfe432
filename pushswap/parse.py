"""Reading and validating the integers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[+-]?[0-9]+")


class PushSwapError(ValueError):
    """Raised for any invalid input; its message is always ``Error``."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_args(args: Iterable[str]) -> list[int]:
    """Parse arguments into distinct 32-bit integers, first argument on top.

    Raises PushSwapError for a non-number, an out-of-range value or a duplicate.
    """
    result: list[int] = []
    seen: set[int] = set()
    for arg in args:
        if not _NUMBER.fullmatch(arg):
            raise PushSwapError()
        value = int(arg)
        if not INT_MIN <= value <= INT_MAX or value in seen:
            raise PushSwapError()
        seen.add(value)
        result.append(value)
    return result


def assign_index(values: Sequence[int]) -> list[int]:
    """Return, for each value, how many values are smaller than it."""
    return [sum(other < value for other in values) for value in values]