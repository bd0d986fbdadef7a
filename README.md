# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations:

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of `a`, `b`, or both |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b`, or both upwards (top goes to bottom) |
| `rra` / `rrb` / `rrr` | rotate `a`, `b`, or both downwards (bottom goes to top) |

An operation that cannot act (swapping or rotating a stack with fewer than
two items, pushing from an empty stack) leaves the stacks unchanged.

## Installation

```
pip install .
```

## Producing a move list

`push-swap` takes the numbers as arguments, either one per argument or
several separated by spaces inside one argument, and prints one operation
per line that sorts them in ascending order on stack `a`:

```
$ push-swap 2 1 3
sa
$ push-swap "3 2 1"
ra
sa
```

Up to five numbers are sorted directly; larger inputs are moved to `b` in
chunks and brought back largest first.

Input that is already sorted produces no output. Invalid input (letters,
signs in the wrong place, values outside the 32-bit signed range,
duplicates, empty or blank arguments) prints `Error` on standard output and
exits with status 1. Run with no arguments, it prints nothing and exits with
status 1.

## Checking a move list

`push-swap-checker` takes the same arguments, reads operations from standard
input, one per line, applies them, and prints `OK` if stack `a` ends up
sorted with `b` empty, `KO` otherwise. Invalid arguments print `Error` on
standard output; an unknown operation, or a last line without a newline,
prints `Error` on standard error. Both exit with status 1. Run with no
arguments, it prints nothing and exits with status 0.

```
$ push-swap 5 4 3 2 1 | push-swap-checker 5 4 3 2 1
OK
```

## Using it from Python

```python
from pushswap.cli import run_checker
from pushswap.sorter import push_swap
from pushswap.stacks import Stacks

moves = push_swap([3, 2, 1])          # [Operation.RA, Operation.SA]
stacks = Stacks([3, 2, 1])
for op in moves:
    stacks.apply(op)
assert stacks.is_sorted()

print(run_checker([3, 2, 1], ["ra\n", "sa\n"]))  # True
```

- `pushswap.stacks` holds the `Operation` enum, the `Stacks` class (one
  method per operation, `apply`, `is_sorted`, and the list of performed
  operations in `ops`) and the `is_sorted` function.
- `pushswap.sorter.push_swap` returns the list of operations that sorts the
  given values; it raises `ParseError` on duplicate values.
- `pushswap.parsing.parse_arguments` turns command-line style arguments into
  a list of integers and raises `pushswap.parsing.ParseError` on bad input.
- `pushswap.cli.run_checker` applies newline-terminated instruction lines and
  returns whether the result is sorted; it raises `ValueError` on an unknown
  or unterminated instruction.