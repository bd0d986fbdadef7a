"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """An instruction that can be applied to a pair of stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if ``values`` is non-empty and in ascending order.

    An empty sequence does not count as sorted.
    """
    items = list(values)
    if not items:
        return False
    return all(left <= right for left, right in zip(items, items[1:]))


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


def _push(source: deque[int], target: deque[int]) -> None:
    if source:
        target.appendleft(source.popleft())


class Stacks:
    """Stacks ``a`` and ``b``, each with its top at index 0.

    Every operation performed is appended to ``ops``. Operations that
    cannot act (swapping or rotating fewer than two items, pushing from
    an empty stack) leave the stacks unchanged but are still recorded.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.ops: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def apply(self, op: Operation | str) -> None:
        """Perform ``op``, given as an Operation or its name."""
        operation = Operation(op)
        getattr(self, operation.value)()

    def is_sorted(self) -> bool:
        """Return True if ``a`` is sorted ascending and ``b`` is empty."""
        return not self.b and is_sorted(self.a)

    def sa(self) -> None:
        """Swap the two top items of ``a``."""
        _swap(self.a)
        self.ops.append(Operation.SA)

    def sb(self) -> None:
        """Swap the two top items of ``b``."""
        _swap(self.b)
        self.ops.append(Operation.SB)

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        _swap(self.b)
        _swap(self.a)
        self.ops.append(Operation.SS)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        _push(self.b, self.a)
        self.ops.append(Operation.PA)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        _push(self.a, self.b)
        self.ops.append(Operation.PB)

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        _rotate(self.a)
        self.ops.append(Operation.RA)

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        _rotate(self.b)
        self.ops.append(Operation.RB)

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.b)
        _rotate(self.a)
        self.ops.append(Operation.RR)

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        _reverse_rotate(self.a)
        self.ops.append(Operation.RRA)

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        _reverse_rotate(self.b)
        self.ops.append(Operation.RRB)

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _reverse_rotate(self.b)
        _reverse_rotate(self.a)
        self.ops.append(Operation.RRR)