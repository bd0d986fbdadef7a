import pytest

from pushswap.parsing import (
    ParseError,
    check_duplicates,
    parse_arguments,
    parse_int,
    validate_argument,
)


def test_parse_int_plain():
    assert parse_int("42") == 42


def test_parse_int_leading_whitespace_and_sign():
    assert parse_int("  -7") == -7
    assert parse_int("\t9") == 9
    assert parse_int("+13") == 13


def test_parse_int_stops_at_non_digit():
    assert parse_int("12.5") == 12


def test_parse_int_max():
    assert parse_int("2147483647") == 2147483647


@pytest.mark.parametrize(
    "text", ["2147483648", "-2147483648", "99999999999", "", "-", ".", "\t"]
)
def test_parse_int_rejects(text):
    with pytest.raises(ParseError):
        parse_int(text)


@pytest.mark.parametrize(
    "arg", ["", "   ", "1a", "x", "1-2", "3+", "--1", "+-1", "+", "- 1", "5 -"]
)
def test_validate_argument_rejects(arg):
    with pytest.raises(ParseError):
        validate_argument(arg)


def test_check_duplicates_rejects():
    with pytest.raises(ParseError):
        check_duplicates([1, 2, 1])


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["1", "1"])


def test_parse_arguments_separate():
    assert parse_arguments(["3", "-1", "+2"]) == [3, -1, 2]


def test_parse_arguments_split_on_spaces():
    assert parse_arguments(["3 1 2"]) == [3, 1, 2]
    assert parse_arguments(["  4  5 ", "6"]) == [4, 5, 6]


def test_parse_arguments_empty_list():
    assert parse_arguments([]) == []


@pytest.mark.parametrize(
    "args",
    [
        ["1", "   "],
        ["1", "1"],
        ["2 2"],
        ["2147483648"],
        ["-2147483648"],
        ["\t"],
        ["1", "two"],
        [""],
    ],
)
def test_parse_arguments_rejects(args):
    with pytest.raises(ParseError):
        parse_arguments(args)


def test_parse_arguments_keeps_order():
    args = ["10", "-4 7", "0"]
    values = parse_arguments(args)
    assert values == [10, -4, 7, 0]
    assert len(set(values)) == len(values)