"""Writing characters, strings and numbers straight to a file descriptor."""

from __future__ import annotations

import os
from typing import Union

from pushswap.libft.strings import itoa

CharLike = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: CharLike, fd: int) -> None:
    """Write one character, a string of length one or a byte code, to ``fd``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([int(c) & 0xFF])
    _write_all(fd, data)


def put_str_fd(text: str, fd: int) -> None:
    """Write ``text`` to ``fd``."""
    _write_all(fd, text.encode("utf-8"))


def put_endl_fd(text: str, fd: int) -> None:
    """Write ``text`` followed by a newline to ``fd``."""
    _write_all(fd, text.encode("utf-8") + b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of a 32-bit signed integer to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))