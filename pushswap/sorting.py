"""Choosing the moves that sort stack ``a`` with the help of stack ``b``."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import pairwise
from operator import attrgetter

from .stacks import Item, Stacks


def _non_decreasing(keys: Iterable[int]) -> bool:
    return all(first <= second for first, second in pairwise(keys))


def assign_orders(items: Iterable[Item]) -> int:
    """Rank the items by value from 0 upwards and return the highest rank.

    Equal values keep their stack order: the earlier one gets the lower rank.
    """
    ranked = sorted(items, key=attrgetter("value"))
    for rank, item in enumerate(ranked):
        item.order = rank
    return len(ranked) - 1


def is_ordered(stacks: Stacks) -> bool:
    """Whether both stacks are ascending by rank and ``a``'s top is not below ``b``'s."""
    a, b = stacks.a, stacks.b
    if a and b and a[0].order < b[0].order:
        return False
    return _non_decreasing(item.order for item in a) and _non_decreasing(
        item.order for item in b
    )


def values_sorted(items: Iterable[Item]) -> bool:
    """Whether the values are in non-decreasing order."""
    return _non_decreasing(item.value for item in items)


def sort_three(stacks: Stacks) -> None:
    """Sort the three items of ``a`` by value in at most two moves."""
    a = stacks.a
    n1, n2, n3 = a[0].value, a[1].value, a[-1].value
    if n3 > n2 and n1 > n3:
        stacks.ra()
    elif n1 > n2 > n3:
        stacks.ra()
        stacks.sa()
    elif n1 > n2 and n3 > n1:
        stacks.sa()
    elif n1 > n3 and n2 > n1:
        stacks.rra()
    elif n3 > n1 and n2 > n3:
        stacks.rra()
        stacks.sa()


def sort_four(stacks: Stacks) -> None:
    """Sort four ranked items: park the lowest on ``b``, sort three, bring it back."""
    a = stacks.a
    position = next(
        (index for index, item in enumerate(a) if item.order == 0), len(a) - 1
    )
    if position == 1:
        stacks.sa()
    elif position == 2:
        stacks.ra()
        stacks.sa()
    elif position == 3:
        stacks.rra()
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def bring_to_top(stacks: Stacks, order: int) -> None:
    """Rotate ``a`` the shorter way until the item of rank ``order`` is on top."""
    a = stacks.a
    position = next(
        (index for index, item in enumerate(a) if item.order == order), None
    )
    if position is None:
        raise ValueError(f"no item of rank {order} on stack a")
    move = stacks.rra if position > len(a) // 2 else stacks.ra
    while a[0].order != order:
        move()


def radix_pass(stacks: Stacks, bit: int) -> None:
    """Split ``a`` on one bit of the ranks, then bring ``b`` back onto ``a``."""
    for _ in range(len(stacks.a)):
        if is_ordered(stacks):
            break
        if (stacks.a[0].order >> bit) & 1:
            stacks.ra()
        else:
            stacks.pb()
    while stacks.b:
        stacks.pa()


def radix_sort(stacks: Stacks, max_order: int) -> None:
    """Run a radix pass for every bit needed to write ``max_order``."""
    bit = 0
    while (1 << bit) <= max_order:
        radix_pass(stacks, bit)
        bit += 1


def _sort_five(stacks: Stacks) -> None:
    bring_to_top(stacks, 0)
    stacks.pb()
    bring_to_top(stacks, 1)
    stacks.pb()
    sort_three(stacks)
    stacks.pa()
    stacks.pa()


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a``, choosing the strategy by its size."""
    size = len(stacks.a)
    if size == 2:
        if stacks.a[0].value > stacks.a[-1].value:
            stacks.ra()
        return
    if size < 2:
        return
    if size == 3:
        if not values_sorted(stacks.a):
            sort_three(stacks)
        return
    max_order = assign_orders(stacks.a)
    if is_ordered(stacks):
        return
    if size == 4:
        sort_four(stacks)
    elif size == 5:
        _sort_five(stacks)
    else:
        radix_sort(stacks, max_order)


def solve(values: Iterable[int]) -> list[str]:
    """Return the moves chosen to sort ``values``."""
    stacks = Stacks(values)
    sort_stacks(stacks)
    return stacks.moves