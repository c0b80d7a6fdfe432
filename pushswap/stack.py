"""The two stacks and the eleven push_swap operations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import pairwise


@dataclass
class Item:
    """One element of a stack: its value and its rank among all values."""

    value: int
    index: int = 0


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values never decrease from first to last."""
    return all(left <= right for left, right in pairwise(values))


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a log of the operations applied.

    Each operation is recorded in ``ops`` even when it changes nothing,
    just as every operation is always printed.
    """

    def __init__(self, a: Iterable[Item] = (), b: Iterable[Item] = ()) -> None:
        self.a: deque[Item] = deque(a)
        self.b: deque[Item] = deque(b)
        self.ops: list[str] = []

    @staticmethod
    def _swap(stack: deque[Item]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _push(dst: deque[Item], src: deque[Item]) -> None:
        if src:
            dst.appendleft(src.popleft())

    @staticmethod
    def _rotate(stack: deque[Item]) -> None:
        if len(stack) >= 2:
            stack.rotate(-1)

    @staticmethod
    def _rev_rotate(stack: deque[Item]) -> None:
        if len(stack) >= 2:
            stack.rotate(1)

    def sa(self) -> None:
        """Swap the top two items of ``a``."""
        self._swap(self.a)
        self.ops.append("sa")

    def sb(self) -> None:
        """Swap the top two items of ``b``."""
        self._swap(self.b)
        self.ops.append("sb")

    def ss(self) -> None:
        """Swap the top two items of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self.ops.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self.a, self.b)
        self.ops.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self.b, self.a)
        self.ops.append("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self.a)
        self.ops.append("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self.b)
        self.ops.append("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        self.ops.append("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._rev_rotate(self.a)
        self.ops.append("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._rev_rotate(self.b)
        self.ops.append("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._rev_rotate(self.a)
        self._rev_rotate(self.b)
        self.ops.append("rrr")