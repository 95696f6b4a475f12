"""String helpers: integer parsing and formatting, slicing, trimming, splitting."""

from __future__ import annotations

from typing import Callable, List, MutableSequence

_WHITESPACE = " \f\n\r\t\v"
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def parse_int(text: str) -> int:
    """Read a leading decimal integer the lenient way.

    Leading whitespace is skipped, one optional sign is honoured, and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps like a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    number = int("".join(digits)) if digits else 0
    return _wrap_int(sign * number)


def int_to_str(n: int) -> str:
    """Decimal text of ``n``, with a leading minus sign when negative."""
    return str(int(n))


def substring(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def trim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split_words(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def map_chars(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def apply_chars(chars: MutableSequence[str], f: Callable[[int, str], str]) -> None:
    """Replace each character in ``chars`` in place with ``f(index, char)``."""
    for index, ch in enumerate(list(chars)):
        chars[index] = f(index, ch)