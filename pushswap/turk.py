"""The cost-driven ("Turk") sort used for stacks of four or more items."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pushswap.small import sort_three
from pushswap.stack import Stacks


@dataclass(frozen=True)
class Move:
    """How to bring one item of ``b`` on top of its place in ``a``.

    A positive cost counts forward rotations, a negative one reverse rotations.
    """

    pos: int
    target_pos: int
    cost_a: int
    cost_b: int


def target_position(index: int, a_indices: Sequence[int]) -> int:
    """Return where in ``a`` an item with this index belongs.

    That is the position of the smallest index above it, or of the smallest
    index overall when none is above it.
    """
    above = [(value, pos) for pos, value in enumerate(a_indices) if value > index]
    if above:
        return min(above)[1]
    return min(range(len(a_indices)), key=lambda pos: a_indices[pos])


def rotation_cost(pos: int, size: int) -> int:
    """Return the signed number of rotations that bring ``pos`` to the top."""
    if pos <= size // 2:
        return pos
    return -(size - pos)


def plan_moves(stacks: Stacks) -> list[Move]:
    """Return one move for each item of ``b``, in stack order."""
    a_indices = [item.index for item in stacks.a]
    size_a = len(stacks.a)
    size_b = len(stacks.b)
    moves = []
    for pos, item in enumerate(stacks.b):
        target = target_position(item.index, a_indices)
        moves.append(
            Move(
                pos=pos,
                target_pos=target,
                cost_a=rotation_cost(target, size_a),
                cost_b=rotation_cost(pos, size_b),
            )
        )
    return moves


def total_cost(cost_a: int, cost_b: int) -> int:
    """Return the number of rotations a move needs, sharing rr and rrr."""
    if cost_a >= 0 and cost_b >= 0:
        return max(cost_a, cost_b)
    if cost_a <= 0 and cost_b <= 0:
        return max(-cost_a, -cost_b)
    return abs(cost_a) + abs(cost_b)


def cheapest(moves: Iterable[Move]) -> Move:
    """Return the first move of the lowest total cost."""
    return min(moves, key=lambda move: total_cost(move.cost_a, move.cost_b))


def do_move(stacks: Stacks, move: Move) -> None:
    """Perform the rotations of a move, then push the item onto ``a``."""
    cost_a, cost_b = move.cost_a, move.cost_b
    while cost_a > 0 and cost_b > 0:
        stacks.rr()
        cost_a -= 1
        cost_b -= 1
    while cost_a < 0 and cost_b < 0:
        stacks.rrr()
        cost_a += 1
        cost_b += 1
    for _ in range(max(cost_b, 0)):
        stacks.rb()
    for _ in range(max(-cost_b, 0)):
        stacks.rrb()
    for _ in range(max(cost_a, 0)):
        stacks.ra()
    for _ in range(max(-cost_a, 0)):
        stacks.rra()
    stacks.pa()


def _push_to_b(stacks: Stacks) -> None:
    size = len(stacks.a)
    groups = 5 if size <= 100 else 11
    group_size = size // groups
    pushed = 0
    while len(stacks.a) > 3:
        if stacks.a[0].index <= pushed + group_size:
            stacks.pb()
            if stacks.b[0].index < pushed - group_size // 2:
                stacks.rb()
            pushed += 1
        else:
            stacks.ra()


def _rotate_min(stacks: Stacks) -> None:
    size = len(stacks.a)
    pos = next(pos for pos, item in enumerate(stacks.a) if item.index == 0)
    if pos <= size // 2:
        for _ in range(pos):
            stacks.ra()
    else:
        for _ in range(size - pos):
            stacks.rra()


def turk_sort(stacks: Stacks) -> None:
    """Sort ``a`` (at least four items, ranked 0..n-1) leaving ``b`` empty."""
    _push_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        do_move(stacks, cheapest(plan_moves(stacks)))
    _rotate_min(stacks)