"""Hard-coded sorts for stacks of two and three items."""

from __future__ import annotations

from pushswap.stack import Stacks


def sort_two(stacks: Stacks) -> None:
    """Sort a two-item stack ``a`` by index."""
    if stacks.a[0].index > stacks.a[1].index:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Sort a three-item stack ``a`` by index with at most two operations."""
    top, mid, bot = (item.index for item in list(stacks.a)[:3])
    if top > mid and mid < bot and top < bot:
        stacks.sa()
    elif top > mid and mid > bot:
        stacks.sa()
        stacks.rra()
    elif top > mid and mid < bot and top > bot:
        stacks.ra()
    elif top < mid and mid > bot and top < bot:
        stacks.sa()
        stacks.ra()
    elif top < mid and mid > bot and top > bot:
        stacks.rra()