"""Reading the puzzle's numbers from command-line arguments."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from pushswap.libft.chars import is_digit

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\r\v\f"


class InputError(ValueError):
    """Raised when the arguments do not describe a valid set of integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _leading_number(text: str) -> int:
    """Parse optional whitespace, an optional sign and the digits that follow."""
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    number = 0
    for char in rest:
        if not is_digit(char):
            break
        number = number * 10 + (ord(char) - 48)
    return -number if negative else number


def atolong(text: str) -> int:
    """Convert the leading decimal number of ``text``; trailing text is ignored."""
    return _leading_number(text)


def atoi(text: str) -> int:
    """Like :func:`atolong`, but the result wraps around as a 32-bit integer."""
    number = _leading_number(text) & 0xFFFFFFFF
    return number - 2**32 if number > INT_MAX else number


def split_words(text: str, separator: str) -> List[str]:
    """Split ``text`` on ``separator``, dropping the empty pieces."""
    return [word for word in text.split(separator) if word]


def _check_token(token: str) -> None:
    digits = token
    if token[:1] in ("-", "+"):
        digits = token[1:]
        if not digits:
            raise InputError()
    if not all(is_digit(char) for char in digits):
        raise InputError()


def has_duplicates(tokens: Iterable[str]) -> bool:
    """True when two tokens convert to the same 32-bit integer."""
    seen: set[int] = set()
    for token in tokens:
        number = atoi(token)
        if number in seen:
            return True
        seen.add(number)
    return False


def check_tokens(tokens: Sequence[str]) -> None:
    """Raise InputError unless every token is a signed digit string and none repeat."""
    for token in tokens:
        _check_token(token)
    if has_duplicates(tokens):
        raise InputError()


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Turn the program arguments into the numbers of stack a, top first.

    A single argument is split on spaces; several arguments give one number each.
    """
    tokens = split_words(args[0], " ") if len(args) == 1 else list(args)
    numbers = [atolong(token) for token in tokens]
    check_tokens(tokens)
    if any(number > INT_MAX or number < INT_MIN for number in numbers):
        raise InputError()
    return numbers