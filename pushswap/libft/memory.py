"""Byte-buffer helpers: zeroing, allocation, search, comparison, copy and fill."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *sizes: int) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if any(n > size for size in sizes):
        raise ValueError(f"byte count {n} exceeds the buffer")


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to zero and return it."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes(n)
    return buffer


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def mem_chr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (low byte) among the first ``n``."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def mem_cmp(s1: BytesLike, s2: BytesLike, n: int) -> int:
    """Difference of the first unequal bytes within ``n``; zero when they match."""
    _check_count(n, len(s1), len(s2))
    for x, y in zip(bytes(s1[:n]), bytes(s2[:n])):
        if x != y:
            return x - y
    return 0


def mem_cpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy ``n`` bytes of ``src`` to the start of ``dest`` and return ``dest``."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def mem_move(
    buffer: bytearray, dest_offset: int, src_offset: int, n: int
) -> bytearray:
    """Move ``n`` bytes inside ``buffer``; overlapping regions are handled."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buffer) - dest_offset, len(buffer) - src_offset)
    buffer[dest_offset : dest_offset + n] = bytes(buffer[src_offset : src_offset + n])
    return buffer


def mem_set(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``c`` (low byte) and return it."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer