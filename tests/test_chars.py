import string

import pytest

from filsdefer.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)

ASCII_CHARS = [chr(code) for code in range(128)]


@pytest.mark.parametrize("c", ASCII_CHARS)
def test_classification_matches_ascii_tables(c):
    assert is_alpha(c) == (c in string.ascii_letters)
    assert is_digit(c) == (c in string.digits)
    assert is_alnum(c) == (c in string.ascii_letters + string.digits)
    assert is_print(c) == (c == " " or (c in string.printable and not c.isspace()))


def test_classification_accepts_codes():
    assert is_alpha(ord("q")) is True
    assert is_digit(ord("q")) is False
    assert is_alnum(ord("7")) is True


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_print("é") is False


@pytest.mark.parametrize("c", ASCII_CHARS)
def test_case_conversion_matches_ascii(c):
    if c in string.ascii_letters:
        assert to_upper(c) == c.upper()
        assert to_lower(c) == c.lower()
    else:
        assert to_upper(c) == c
        assert to_lower(c) == c


def test_case_conversion_on_codes_returns_codes():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_upper(ord("1")) == ord("1")


def test_single_character_required():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(TypeError):
        to_upper(1.5)


@pytest.mark.parametrize("n", [0, 1, -1, 42, -2147483648, 2147483647, 1000000])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17 3") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("--5") == 0
    assert atoi("- 5") == 0


def test_atoi_wraps_as_32_bit():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")