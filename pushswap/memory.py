"""Byte-buffer helpers: filling, searching, comparing, copying and moving."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = (1 << 64) - 1


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if any(n > length for length in lengths):
        raise ValueError(f"byte count {n} exceeds buffer length")


def mem_set(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_count(n, len(buf))
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def zero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return mem_set(buf, 0, n)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """A zero-filled buffer for ``count`` elements of ``size`` bytes each.

    Raises ``OverflowError`` when the total would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise OverflowError("requested allocation size overflows")
    return bytearray(total)


def mem_find(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within the first ``n`` bytes."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def mem_compare(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; returns the difference at the first mismatch."""
    _check_count(n, len(a), len(b))
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def mem_copy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_count(n, len(dest), len(src))
    dest[:n] = src[:n]
    return dest


def mem_move(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - src, len(buf) - dest)
    buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf