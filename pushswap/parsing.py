"""Validation and parsing of the integers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"
_SIGNS = "+-"


class ParseError(ValueError):
    """Raised when the input cannot be turned into a stack of integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return ("A" <= char <= "Z") or ("a" <= char <= "z")


def parse_int(text: str) -> int:
    """Parse a leading integer from ``text``.

    Leading whitespace and one sign are accepted; parsing stops at the
    first character that is not a digit. A missing number or a magnitude
    above 2147483647 raises ParseError.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    if not rest or not _is_digit(rest[0]):
        raise ParseError(f"not a number: {text!r}")
    number = 0
    for char in rest:
        if not _is_digit(char):
            break
        number = number * 10 + int(char)
        if number > INT_MAX:
            raise ParseError(f"out of range: {text!r}")
    return sign * number


def validate_argument(arg: str) -> None:
    """Reject an argument that is empty, blank, or badly formed.

    Letters, a sign directly after a digit, two signs in a row, and a sign
    not followed by a digit are all errors.
    """
    if not arg:
        raise ParseError("empty argument")
    if not arg.strip(" "):
        raise ParseError("blank argument")
    if any(_is_alpha(char) for char in arg):
        raise ParseError(f"letters in argument: {arg!r}")
    for current, following in zip(arg, arg[1:] + "\0"):
        if _is_digit(current) and following in _SIGNS:
            raise ParseError(f"misplaced sign in {arg!r}")
        if current in _SIGNS and following in _SIGNS:
            raise ParseError(f"repeated sign in {arg!r}")
        if current in _SIGNS and not _is_digit(following):
            raise ParseError(f"sign without digits in {arg!r}")


def check_duplicates(values: Iterable[int]) -> None:
    """Raise ParseError if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise ParseError(f"duplicate value: {value}")
        seen.add(value)


def _numbers_in(arg: str) -> list[int]:
    if " " in arg:
        return [parse_int(token) for token in arg.split(" ") if token]
    return [parse_int(arg)]


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the program arguments into the initial contents of stack ``a``.

    An argument holding spaces is split into several numbers. All
    arguments are validated before any is parsed, and duplicates are
    rejected.
    """
    arguments = list(args)
    for arg in arguments:
        validate_argument(arg)
    values = [value for arg in arguments for value in _numbers_in(arg)]
    check_duplicates(values)
    return values