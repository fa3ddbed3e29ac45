"""Reading the starting stack from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"
_PROGRAM_NAME = "./push_swap"


class InputError(ValueError):
    """The arguments do not describe a valid starting stack."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Read a leading decimal integer the way a 32-bit C ``atoi`` does.

    Leading whitespace and one sign are accepted, reading stops at the first
    non-digit, and values outside the 32-bit range wrap around.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    magnitude = _wrap_int32(int("".join(digits))) if digits else 0
    return _wrap_int32(magnitude * sign)


def _canonical_form(text: str) -> str:
    """Strip one sign and redundant leading zeros, keeping a minus sign."""
    flag = ""
    if text.startswith("+"):
        text = text[1:]
    if text.startswith("-"):
        text = text[1:]
        flag = "-"
    while text.startswith("0") and text[1:] != "":
        text = text[1:]
    if text == "0":
        flag = ""
    return flag + text


def is_valid_number(text: str) -> bool:
    """True when ``text`` is exactly an integer that fits in 32 bits.

    A single sign and leading zeros are allowed; anything else, including
    surrounding whitespace or trailing characters, is rejected.
    """
    number = atoi(text)
    if text in ("-0", "+0", "0") and number == 0:
        return True
    if number == INT_MIN:
        return text.startswith("-")
    return str(number) == _canonical_form(text)


def has_doubles(values: Iterable[int]) -> bool:
    """True when some value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def split_arguments(args: Sequence[str]) -> list[str]:
    """Turn the program's arguments into the list of number strings.

    A single non-empty argument is split on spaces, so that ``"3 2 1"``
    reads as three numbers; any other argument list is taken as it is.
    """
    if len(args) == 1 and args[0] and args[0] != str(INT_MIN):
        joined = f"{_PROGRAM_NAME} {args[0]}"
        return [word for word in joined.split(" ") if word][1:]
    return list(args)


def parse_stack(args: Sequence[str]) -> list[int]:
    """Parse the arguments into the starting stack, top first.

    Raises InputError when there are no numbers, when one is not a valid
    32-bit integer, or when a value repeats.
    """
    words = split_arguments(args)
    if not words:
        raise InputError()
    if not all(is_valid_number(word) for word in words):
        raise InputError()
    values = [atoi(word) for word in words]
    if has_doubles(values):
        raise InputError()
    return values