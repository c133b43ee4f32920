import pytest

from pushswap.libft.memory import (
    bzero,
    calloc,
    mem_chr,
    mem_cmp,
    mem_cpy,
    mem_move,
    mem_set,
)


def test_bzero_clears_prefix_only():
    buffer = bytearray(b"abcdef")
    result = bzero(buffer, 3)
    assert result is buffer
    assert buffer == bytearray(b"\0\0\0def")


def test_bzero_zero_count_leaves_buffer():
    buffer = bytearray(b"xyz")
    assert bzero(buffer, 0) == bytearray(b"xyz")


def test_bzero_too_many_bytes():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


def test_calloc_is_zero_filled():
    block = calloc(3, 4)
    assert block == bytearray(12)
    assert all(byte == 0 for byte in block)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_mem_chr_finds_first():
    data = b"hello"
    assert mem_chr(data, ord("l"), len(data)) == data.index(b"l")


def test_mem_chr_respects_limit():
    assert mem_chr(b"hello", ord("o"), 4) is None


def test_mem_chr_uses_low_byte():
    data = b"a\x01b"
    assert mem_chr(data, 0x101, 3) == data.index(b"\x01")


def test_mem_cmp_equal():
    assert mem_cmp(b"abc", b"abc", 3) == 0


def test_mem_cmp_sign():
    assert mem_cmp(b"abc", b"abd", 3) < 0
    assert mem_cmp(b"abd", b"abc", 3) > 0


def test_mem_cmp_within_limit_ignores_tail():
    assert mem_cmp(b"abX", b"abY", 2) == 0


def test_mem_cmp_bytes_are_unsigned():
    assert mem_cmp(b"\x80", b"\x01", 1) > 0


def test_mem_cpy_copies_prefix():
    dest = bytearray(b"......")
    result = mem_cpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest == bytearray(b"abcd..")


def test_mem_cpy_overflow():
    with pytest.raises(ValueError):
        mem_cpy(bytearray(2), b"abc", 3)


def test_mem_move_forward_overlap():
    buffer = bytearray(b"abcdef")
    mem_move(buffer, 2, 0, 4)
    assert buffer == bytearray(b"ababcd")


def test_mem_move_backward_overlap():
    buffer = bytearray(b"abcdef")
    mem_move(buffer, 0, 2, 4)
    assert buffer == bytearray(b"cdefef")


def test_mem_move_out_of_range():
    with pytest.raises(ValueError):
        mem_move(bytearray(4), 2, 0, 3)


def test_mem_set_fills():
    buffer = bytearray(b"abcdef")
    mem_set(buffer, ord("z"), 4)
    assert buffer == bytearray(b"zzzzef")


def test_mem_set_round_trip_with_mem_chr():
    buffer = mem_set(calloc(5, 1), 0x1FF, 5)
    assert mem_chr(buffer, 0xFF, 5) == 0
    assert mem_cmp(buffer, bytes([0xFF]) * 5, 5) == 0