"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator

LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"


def correct_base(base: str) -> bool:
    """True when ``base`` has at least two distinct digits and no sign characters."""
    if len(base) < 2:
        return False
    if "-" in base or "+" in base:
        return False
    return len(set(base)) == len(base)


def nbr_base(number: int, base: str) -> str:
    """Render a non-negative ``number`` in ``base``; empty for an invalid base."""
    if number < 0:
        raise ValueError("number must not be negative")
    if not correct_base(base):
        return ""
    if number == 0:
        return base[0]
    size = len(base)
    digits = []
    while number > 0:
        number, remainder = divmod(number, size)
        digits.append(base[remainder])
    return "".join(reversed(digits))


def _signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _next_arg(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "c":
        value = _next_arg(values)
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects one character, got {value!r}")
            return value
        return chr(int(value) & 0xFF)
    if spec == "s":
        value = _next_arg(values)
        return "(null)" if value is None else str(value)
    if spec in ("d", "i"):
        return str(_signed32(int(_next_arg(values))))
    if spec == "u":
        return str(int(_next_arg(values)) & 0xFFFFFFFF)
    if spec == "x":
        return nbr_base(int(_next_arg(values)) & 0xFFFFFFFF, LOWER_HEX)
    if spec == "X":
        return nbr_base(int(_next_arg(values)) & 0xFFFFFFFF, UPPER_HEX)
    if spec == "p":
        value = _next_arg(values)
        if value is None or value == 0:
            return "(nil)"
        address = value if isinstance(value, int) else id(value)
        return "0x" + nbr_base(address & 0xFFFFFFFFFFFFFFFF, LOWER_HEX)
    if spec == "%":
        return "%"
    return "%" + spec


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text that :func:`ft_printf` would write."""
    values = iter(args)
    pieces = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
        else:
            # A lone trailing '%' is printed as is.
            pieces.append(_convert(next(chars, "%"), values))
    return "".join(pieces)


def ft_printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)