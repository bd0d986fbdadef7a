"""Command-line entry points: the solver and the instruction checker."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import ParseError, parse_arguments
from pushswap.sorter import push_swap
from pushswap.stacks import Operation, Stacks

_ERROR = "Error\n"


def run_checker(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply the instruction ``lines`` to ``values`` and report success.

    Each line must be an operation name followed by a newline. Returns
    True when stack ``a`` ends sorted and stack ``b`` empty. An unknown
    or unterminated instruction raises ValueError.
    """
    stacks = Stacks(values)
    for line in lines:
        if not line.endswith("\n"):
            raise ValueError(f"unterminated instruction: {line!r}")
        name = line[:-1]
        try:
            operation = Operation(name)
        except ValueError:
            raise ValueError(f"unknown instruction: {name!r}") from None
        stacks.apply(operation)
    return stacks.is_sorted()


def _arguments(argv: Sequence[str] | None) -> list[str]:
    return sys.argv[1:] if argv is None else list(argv)


def push_swap_main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the given integers; return the exit code."""
    args = _arguments(argv)
    if not args:
        return 1
    try:
        operations = push_swap(parse_arguments(args))
    except ParseError:
        sys.stdout.write(_ERROR)
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


def checker_main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = _arguments(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stdout.write(_ERROR)
        return 1
    try:
        sorted_ok = run_checker(values, sys.stdin)
    except ValueError:
        sys.stderr.write(_ERROR)
        return 1
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0