"""A small printf: %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

SPECIFIERS = "cspdiuxX%"
_UINT_MASK = 0xFFFFFFFF


class FormatError(ValueError):
    """Raised for a malformed format string or a missing argument."""


def _to_int32(value: int) -> int:
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Optional[str]) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None or (isinstance(value, int) and value == 0):
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return f"0x{address:x}"


def _decimal(value: int) -> str:
    return str(_to_int32(value))


def _unsigned(value: int) -> str:
    return str(int(value) & _UINT_MASK)


def _hex_lower(value: int) -> str:
    return f"{int(value) & _UINT_MASK:x}"


def _hex_upper(value: int) -> str:
    return f"{int(value) & _UINT_MASK:X}"


_CONVERTERS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _decimal,
    "i": _decimal,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    position = 0
    while position < len(fmt):
        ch = fmt[position]
        if ch == "%":
            if position + 1 >= len(fmt):
                raise FormatError("format string ends with a lone '%'")
            spec = fmt[position + 1]
            if spec == "%":
                yield "%"
                position += 2
                continue
            if spec in _CONVERTERS:
                try:
                    argument = next(remaining)
                except StopIteration:
                    raise FormatError(f"missing argument for %{spec}") from None
                yield _CONVERTERS[spec](argument)
                position += 2
                continue
        yield ch
        position += 1


def render(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write for ``fmt`` and ``args``."""
    if fmt is None:
        raise FormatError("format string is missing")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)