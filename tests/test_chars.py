import string

import pytest

from pushswap.libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert is_alpha(c) is True
    assert is_alnum(c) is True
    assert is_digit(c) is False


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c) is True
    assert is_alnum(c) is True
    assert is_alpha(c) is False


@pytest.mark.parametrize("c", ["?", " ", "\n", "-", "+"])
def test_punctuation_is_not_alnum(c):
    assert is_alnum(c) is False
    assert is_alpha(c) is False
    assert is_digit(c) is False


def test_integer_codes_accepted():
    assert is_digit(48) is True
    assert is_digit(57) is True
    assert is_digit(2) is False
    assert is_digit(0) is False


def test_ascii_range_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_range_bounds():
    assert is_print(32) is True
    assert is_print(126) is True
    assert is_print(31) is False
    assert is_print(127) is False
    assert is_print("\n") is False


def test_case_conversion_codes():
    assert to_upper(97) == 65
    assert to_lower(65) == 97
    assert to_upper(122) == 90
    assert to_lower(90) == 122


@pytest.mark.parametrize("c", list(string.ascii_lowercase))
def test_case_round_trip(c):
    upper = to_upper(c)
    assert upper == c.upper()
    assert to_lower(upper) == c


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " "))
def test_non_letters_unchanged(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_conversion_keeps_type():
    assert to_upper("a") == "A"
    assert to_lower(53) == 53


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")