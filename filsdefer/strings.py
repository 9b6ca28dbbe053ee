"""String helpers: search, compare, copy, slice, join, trim, split and map."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_NUL = "\0"


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _require_char(c: str) -> str:
    _require_str(c, "character")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _require_count(n: int, name: str) -> int:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    return n


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(_require_str(s, "s"))


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character gives the position just past the text.
    """
    _require_str(s, "s")
    if _require_char(c) == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character gives the position just past the text.
    """
    _require_str(s, "s")
    if _require_char(c) == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when equal, otherwise the code difference of the first
    differing characters. The end of a text compares as a NUL character.
    """
    _require_str(first, "first")
    _require_str(second, "second")
    _require_count(n, "n")
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            return 0
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when absent.
    """
    _require_str(big, "big")
    _require_str(little, "little")
    _require_count(length, "length")
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(_require_str(s, "s"))


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, one kept for the terminator.

    Returns the new destination text and the length of ``src``. With a
    size of 0 the destination is left untouched.
    """
    _require_str(dst, "dst")
    _require_str(src, "src")
    _require_count(size, "size")
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` slots.

    Returns the new destination text and the length the full result would
    have had. When ``dst`` already fills the size, it is left untouched and
    the length reported is ``size + len(src)``.
    """
    _require_str(dst, "dst")
    _require_str(src, "src")
    _require_count(size, "size")
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, size + len(src)
    space = size - dst_len - 1
    return dst + src[:space], dst_len + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from index ``start``; empty past the end."""
    _require_str(s, "s")
    _require_count(start, "start")
    _require_count(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(prefix: str, suffix: str) -> str:
    """Concatenate ``prefix`` and ``suffix``."""
    return _require_str(prefix, "prefix") + _require_str(suffix, "suffix")


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _require_str(s, "s")
    _require_char(sep)
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new text from ``f(index, char)`` for every character of ``s``."""
    _require_str(s, "s")
    if not callable(f):
        raise TypeError("f must be callable")
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str]) -> None:
    """Replace every element of ``chars`` in place with ``f(index, char)``."""
    if not callable(f):
        raise TypeError("f must be callable")
    for index, char in enumerate(chars):
        chars[index] = f(index, char)