"""Searching, comparing and size-bounded copying of NUL-terminated text."""

from __future__ import annotations

from typing import Optional, Tuple, Union

NUL = "\0"


def _cstr(s: str) -> str:
    """Text up to, not including, the first NUL."""
    return s.split(NUL, 1)[0]


def _as_char(c: Union[str, int]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def find_char(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _as_char(c)
    if ch == NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def rfind_char(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _as_char(c)
    if ch == NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign gives the ordering."""
    a, b = _cstr(s1), _cstr(s2)
    for i in range(min(n, len(a) + 1)):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb:
            return ca - cb
        if ca == 0:
            break
    return 0


def find_bounded(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    haystack = _cstr(big)
    needle = _cstr(little)
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits and the full length of ``src``; with a size of
    zero nothing is copied.
    """
    text = _cstr(src)
    if size <= 0:
        return "", len(text)
    return text[: size - 1], len(text)


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the result would have had with
    unlimited room (``size + len(src)`` when ``dst`` already fills the buffer).
    """
    head, tail = _cstr(dst), _cstr(src)
    if size <= 0:
        return head, len(tail)
    if len(head) >= size:
        return head, size + len(tail)
    room = size - len(head) - 1
    return head + tail[:room], len(head) + len(tail)