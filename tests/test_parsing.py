import pytest

from pushswap.parsing import (
    InputError,
    atoi,
    has_doubles,
    is_valid_number,
    parse_stack,
    split_arguments,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-42", -42),
        ("+42", 42),
        ("   \t-7", -7),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi_values(text, expected):
    assert atoi(text) == expected


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == -2147483648


def test_atoi_stops_after_second_sign():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


@pytest.mark.parametrize(
    "text",
    [
        "0",
        "-0",
        "+0",
        "00012",
        "+0003",
        "-0004",
        "-000000",
        "2147483647",
        "-2147483648",
        "17",
        "-17",
    ],
)
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "2147483648",
        "-2147483649",
        "-",
        "+",
        "",
        "1a",
        " 5",
        "5 ",
        "--5",
        "+-5",
        "abc",
    ],
)
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


def test_has_doubles():
    assert has_doubles([1, 2, 3]) is False
    assert has_doubles([1, 2, 1]) is True
    assert has_doubles([]) is False


def test_split_single_argument_on_spaces():
    assert split_arguments(["3 2 1"]) == ["3", "2", "1"]
    assert split_arguments(["  4   5 "]) == ["4", "5"]


def test_split_keeps_several_arguments():
    assert split_arguments(["1", "2"]) == ["1", "2"]


def test_split_leaves_int_min_alone():
    assert split_arguments(["-2147483648"]) == ["-2147483648"]


def test_split_only_on_spaces():
    assert split_arguments(["1\t2"]) == ["1\t2"]


def test_split_blank_argument_gives_nothing():
    assert split_arguments(["   "]) == []


def test_parse_stack_from_one_argument():
    assert parse_stack(["3 2 1"]) == [3, 2, 1]


def test_parse_stack_from_several_arguments():
    assert parse_stack(["5", "-0004", "+7"]) == [5, -4, 7]


def test_parse_stack_int_min_alone():
    assert parse_stack(["-2147483648"]) == [-2147483648]


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["   "],
        [""],
        ["1", "1"],
        ["1 2 1"],
        ["0", "-0"],
        ["1", "x"],
        ["1\t2"],
        ["2147483648"],
    ],
)
def test_parse_stack_errors(args):
    with pytest.raises(InputError):
        parse_stack(args)


def test_input_error_message():
    with pytest.raises(InputError, match="^Error$"):
        parse_stack(["a"])