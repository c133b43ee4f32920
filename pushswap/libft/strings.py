"""String helpers with bounded copies, searches and character mapping."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _char(c: CharLike) -> str:
    """Turn a one-character string or an integer code into a character (low byte)."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def str_len(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def str_dup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def strl_cpy(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one of them for the terminator.

    Returns the buffer's new content and the length of ``src``. With a size
    of zero the destination is left as it was.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strl_cat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` in a buffer of ``size`` slots.

    Returns the buffer's new content and the length the full result would
    have had: the smaller of ``len(dest)`` and ``size``, plus ``len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    kept = min(len(dest), size)
    if kept < size:
        room = size - 1 - kept
        return dest + src[: max(room, 0)], kept + len(src)
    return dest, kept + len(src)


def str_ncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells which string sorts first."""
    if n < 0:
        raise ValueError("n must not be negative")
    for x, y in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if x == "\0" and y == "\0":
            return 0
        if x != y:
            return (ord(x) & 0xFF) - (ord(y) & 0xFF)
    return 0


def str_chr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``; the terminator matches at the end."""
    char = _char(c)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def str_rchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``; the terminator matches at the end."""
    char = _char(c)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def str_nstr(text: str, to_find: str, length: int) -> Optional[int]:
    """Index of ``to_find`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not to_find:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = text[:length].find(to_find)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]


def str_join(s1: str, s2: str) -> str:
    """Concatenate two strings; both must be given."""
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return s1 + s2


def str_trim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def itoa(n: int) -> str:
    """Decimal representation of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    return str(n)


def str_mapi(text: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character."""
    return "".join(f(index, char) for index, char in enumerate(text))


def str_iteri(
    buffer: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``f(index, char)`` on each element; a non-None result replaces it in place."""
    for index, char in enumerate(list(buffer)):
        replacement = f(index, char)
        if replacement is not None:
            buffer[index] = replacement