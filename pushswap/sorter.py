"""The sorting strategy: direct handling of small inputs, chunks otherwise."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.parsing import check_duplicates
from pushswap.stacks import Operation, Stacks, is_sorted


def get_range(size: int) -> int:
    """Return the initial chunk width for a stack of ``size`` items."""
    if size <= 16:
        return size // 2
    if size <= 100:
        return 16
    return 38


def _index_of_min(items: Iterable[int]) -> int:
    values = list(items)
    return values.index(min(values))


def _index_of_max(items: Iterable[int]) -> int:
    values = list(items)
    return values.index(max(values))


def sort_three(stacks: Stacks) -> None:
    """Sort exactly three items in ``a`` with swaps and rotations."""
    if len(stacks.a) != 3:
        raise ValueError("sort_three needs exactly three items in stack a")
    while not is_sorted(stacks.a):
        top, middle, bottom = stacks.a
        if top > middle > bottom:
            stacks.ra()
        elif top > middle:
            stacks.sa()
        elif middle > bottom:
            stacks.rra()


def sort_five(stacks: Stacks) -> None:
    """Sort four or five items by parking the smallest ones on ``b``."""
    size = len(stacks.a)
    while size > 3:
        smallest = min(stacks.a)
        while stacks.a[0] != smallest:
            if _index_of_min(stacks.a) <= size // 2:
                stacks.ra()
            else:
                stacks.rra()
        stacks.pb()
        size -= 1
    sort_three(stacks)
    while stacks.b:
        stacks.pa()


def sort_small(stacks: Stacks) -> None:
    """Sort a stack ``a`` of at most five items."""
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size in (4, 5):
        sort_five(stacks)


def _classify(top: int, ranks: Sequence[int], width: int, start: int) -> int:
    if top < ranks[start]:
        return 0
    if top in ranks[start:width]:
        return 1
    return 2


def _settle_b(stacks: Stacks) -> None:
    b = stacks.b
    if len(b) < 2:
        return
    if b[-1] > b[0]:
        stacks.rb()
    elif b[0] < b[1]:
        stacks.sb()


def push_chunks(stacks: Stacks, ranks: Sequence[int]) -> None:
    """Move every item of ``a`` to ``b`` in chunks of a sliding range.

    ``ranks`` holds the values of ``a`` in ascending order.
    """
    size = len(stacks.a)
    width = get_range(size)
    start = 0
    while start < size:
        kind = _classify(stacks.a[0], ranks, width, start)
        if kind == 0:
            stacks.pb()
            stacks.rb()
        elif kind == 1:
            stacks.pb()
            _settle_b(stacks)
        else:
            stacks.ra()
            continue
        if width < size:
            width += 1
        start += 1


def push_back(stacks: Stacks) -> None:
    """Return items from ``b`` to ``a``, always the largest first."""
    while stacks.b:
        position = _index_of_max(stacks.b)
        largest = max(stacks.b)
        if position >= len(stacks.b) // 2:
            while stacks.b[0] != largest:
                stacks.rrb()
        else:
            while stacks.b[0] != largest:
                stacks.rb()
        stacks.pa()


def push_swap(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` into ascending order."""
    items = list(values)
    check_duplicates(items)
    if not items or is_sorted(items):
        return []
    stacks = Stacks(items)
    if len(items) <= 5:
        sort_small(stacks)
    else:
        push_chunks(stacks, sorted(items))
        push_back(stacks)
    return stacks.ops