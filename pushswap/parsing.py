"""Validation of the command-line numbers that fill stack ``a``."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from pushswap.text import split_words

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_WHITESPACE = " \f\n\r\t\v"


class InputError(ValueError):
    """Raised when the input is not a list of distinct integers."""


def parse_integer(text: str) -> int:
    """Parse a whole string as a signed 32-bit integer.

    Leading whitespace and one sign are allowed; anything after the digits,
    an empty number or a value out of range raises ``InputError``.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    if not rest or not all("0" <= ch <= "9" for ch in rest):
        raise InputError(f"not an integer: {text!r}")
    value = sign * int(rest)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"integer out of range: {text!r}")
    return value


def check_unique(values: Iterable[int]) -> List[int]:
    """Return the values as a list, raising ``InputError`` if empty or repeated."""
    result = list(values)
    if not result:
        raise InputError("no numbers given")
    if len(set(result)) != len(result):
        raise InputError("duplicate numbers given")
    return result


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Turn command-line arguments into the numbers for stack ``a``.

    No arguments give an empty list. A single argument is split on spaces;
    several arguments are each read as one number.
    """
    if not args:
        return []
    words = split_words(args[0], " ") if len(args) == 1 else list(args)
    return check_unique(parse_integer(word) for word in words)