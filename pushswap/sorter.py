"""Sorting stack ``a`` with the cheapest-move strategy.

Elements are moved to ``b`` one at a time, each time choosing the element of
``a`` that costs the fewest rotations to place above its target in ``b``. Once
three are left in ``a`` they are sorted directly, and the contents of ``b`` are
pushed back each onto its place in ``a``.
"""

from __future__ import annotations

import io
from collections import deque
from collections.abc import Iterable

from pushswap.stacks import Stacks, is_sorted


def _index_above_median(index: int, length: int) -> bool:
    return index <= length // 2


def _above_median(stack: deque[int], value: int) -> bool:
    return _index_above_median(stack.index(value), len(stack))


def _target_in_b(value: int, b: deque[int]) -> int:
    """The largest value of ``b`` below ``value``, else the largest of ``b``."""
    smaller = [candidate for candidate in b if candidate < value]
    return max(smaller) if smaller else max(b)


def _target_in_a(value: int, a: deque[int]) -> int:
    """The smallest value of ``a`` above ``value``, else the smallest of ``a``."""
    larger = [candidate for candidate in a if candidate > value]
    return min(larger) if larger else min(a)


def _cheapest_move(a: deque[int], b: deque[int]) -> tuple[int, int]:
    """The element of ``a`` cheapest to push onto its target in ``b``, with that target.

    Among equal costs the one nearest the bottom of ``a`` wins.
    """
    a_len, b_len = len(a), len(b)
    best: tuple[int, int] | None = None
    best_cost = 0
    for index, value in enumerate(a):
        target = _target_in_b(value, b)
        target_index = b.index(target)
        cost = index if _index_above_median(index, a_len) else a_len - index
        if _index_above_median(target_index, b_len):
            cost += target_index
        else:
            cost += b_len - target_index
        if best is None or cost <= best_cost:
            best, best_cost = (value, target), cost
    assert best is not None
    return best


def _bring_to_top_a(stacks: Stacks, value: int, above_median: bool) -> None:
    while stacks.a[0] != value:
        if above_median:
            stacks.ra()
        else:
            stacks.rra()


def _bring_to_top_b(stacks: Stacks, value: int, above_median: bool) -> None:
    while stacks.b[0] != value:
        if above_median:
            stacks.rb()
        else:
            stacks.rrb()


def _push_cheapest_to_b(stacks: Stacks) -> None:
    node, target = _cheapest_move(stacks.a, stacks.b)
    node_above = _above_median(stacks.a, node)
    target_above = _above_median(stacks.b, target)
    if node_above and target_above:
        while stacks.a[0] != node and stacks.b[0] != target:
            stacks.rr()
        node_above = _above_median(stacks.a, node)
        target_above = _above_median(stacks.b, target)
    elif not node_above and not target_above:
        while stacks.a[0] != node and stacks.b[0] != target:
            stacks.rrr()
        node_above = _above_median(stacks.a, node)
        target_above = _above_median(stacks.b, target)
    _bring_to_top_a(stacks, node, node_above)
    _bring_to_top_b(stacks, target, target_above)
    stacks.pb()


def _push_top_of_b_to_a(stacks: Stacks) -> None:
    target = _target_in_a(stacks.b[0], stacks.a)
    _bring_to_top_a(stacks, target, _above_median(stacks.a, target))
    stacks.pa()


def sort_three(stacks: Stacks) -> None:
    """Sort the three elements of ``a`` in at most two moves."""
    a = stacks.a
    biggest = max(a)
    if a[0] == biggest:
        stacks.ra()
    elif a[1] == biggest:
        stacks.rra()
    if a[0] > a[1]:
        stacks.sa()


def sort_all(stacks: Stacks) -> None:
    """Sort ``a`` when it holds more than three elements, using ``b`` as scratch."""
    remaining = len(stacks.a)
    for _ in range(2):
        if remaining > 3 and not is_sorted(stacks.a):
            stacks.pb()
        remaining -= 1
    while True:
        more = remaining > 3
        remaining -= 1
        if not more or is_sorted(stacks.a):
            break
        _push_cheapest_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        _push_top_of_b_to_a(stacks)
    smallest = min(stacks.a)
    _bring_to_top_a(stacks, smallest, _above_median(stacks.a, smallest))


def sort_stacks(stacks: Stacks) -> None:
    """Sort ``a`` with the method suited to its size.

    Two elements are always swapped, so the caller checks first whether ``a``
    is already sorted.
    """
    length = len(stacks.a)
    if length <= 1:
        return
    if length == 2:
        stacks.sa()
    elif length == 3:
        sort_three(stacks)
    else:
        sort_all(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Return the moves that sort ``values``, without printing them."""
    stacks = Stacks(values, out=io.StringIO())
    if len(set(stacks.a)) != len(stacks.a):
        raise ValueError("values must be distinct")
    if not is_sorted(stacks.a):
        sort_stacks(stacks)
    return stacks.moves