"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: int | str) -> int:
    """Return the integer code of a character given as int or one-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def _as_input_type(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _as_input_type(c, code + (ord("a") - ord("A")))
    return c


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _as_input_type(c, code - (ord("a") - ord("A")))
    return c


def _wrap_int(value: int) -> int:
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Convert the leading integer of ``text``.

    Leading whitespace is skipped, one optional sign is read, then digits
    until the first non-digit. Text without digits gives 0. The result
    wraps around as a 32-bit signed integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _wrap_int(_wrap_int(value) * sign)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    if not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(int(n))