"""Character classification and case conversion on ASCII codes."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``, a code point or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 97 <= code <= 122 or 65 <= code <= 90


def is_ascii(c: CharLike) -> bool:
    """True for codes in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits '0' to '9'."""
    return 48 <= _code(c) <= 57


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return _convert(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return _convert(c, code)