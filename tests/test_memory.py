import pytest

from pushswap.memory import (
    SIZE_MAX,
    allocate_zeroed,
    mem_compare,
    mem_copy,
    mem_find,
    mem_move,
    mem_set,
    zero,
)


def test_mem_set_fills_prefix_only():
    buf = bytearray(b"This is an example.")
    result = mem_set(buf, ord("x"), 2)
    assert result is buf
    assert buf[:2] == b"xx"
    assert buf[2:] == b"is is an example."


def test_mem_set_value_wraps_to_byte():
    buf = bytearray(3)
    mem_set(buf, 0x141, 3)
    assert buf == bytearray([0x41] * 3)


def test_mem_set_rejects_overlong_count():
    with pytest.raises(ValueError):
        mem_set(bytearray(2), 1, 3)


def test_zero_clears_prefix():
    buf = bytearray(b"abcdef")
    zero(buf, 4)
    assert buf == bytearray(4) + b"ef"


def test_allocate_zeroed_size_and_content():
    buf = allocate_zeroed(10, 8)
    assert len(buf) == 80
    assert not any(buf)


def test_allocate_zeroed_empty():
    assert allocate_zeroed(0, 4) == bytearray()
    assert allocate_zeroed(4, 0) == bytearray()


def test_allocate_zeroed_overflow():
    with pytest.raises(OverflowError):
        allocate_zeroed(SIZE_MAX, 2)


def test_allocate_zeroed_negative():
    with pytest.raises(ValueError):
        allocate_zeroed(-1, 4)


def test_mem_find_within_bound():
    data = b"Search me."
    assert mem_find(data, ord("c"), len(data)) == data.index(b"c")
    assert mem_find(data, ord("c"), 3) is None


def test_mem_find_absent():
    assert mem_find(b"abc", ord("z"), 3) is None


def test_mem_compare_sign_and_equality():
    assert mem_compare(b"abcdef", b"abc\xfdxx", 5) < 0
    assert mem_compare(b"abc\xfdxx", b"abcdef", 5) > 0
    assert mem_compare(b"abcdef", b"abc\xfdxx", 3) == 0


def test_mem_compare_is_unsigned():
    assert mem_compare(b"\xff", b"\x01", 1) > 0


def test_mem_copy_copies_bytes():
    dest = bytearray(16)
    src = b"I am the source."
    result = mem_copy(dest, src, 16)
    assert result is dest
    assert bytes(dest) == src


def test_mem_copy_partial_keeps_length():
    dest = bytearray(b"zzzzzz")
    mem_copy(dest, b"abc", 2)
    assert dest == bytearray(b"abzzzz")


def test_mem_copy_rejects_short_source():
    with pytest.raises(ValueError):
        mem_copy(bytearray(5), b"ab", 4)


def test_mem_move_forward_overlap():
    buf = bytearray(b"Hello, world!")
    mem_move(buf, 0, 7, 6)
    assert buf == bytearray(b"world! world!")


def test_mem_move_backward_overlap():
    buf = bytearray(b"abcdefgh")
    mem_move(buf, 4, 0, 4)
    assert buf == bytearray(b"abcdabcd")


def test_mem_move_overlapping_shift_preserves_order():
    original = bytes(range(10))
    buf = bytearray(original)
    mem_move(buf, 2, 0, 8)
    assert bytes(buf[2:]) == original[:8]
    assert len(buf) == len(original)


def test_mem_move_out_of_bounds():
    with pytest.raises(ValueError):
        mem_move(bytearray(4), 2, 0, 3)