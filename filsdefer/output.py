"""Write characters, text and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO

from filsdefer.chars import itoa


def put_char(c: str, stream: TextIO) -> None:
    """Write the single character ``c`` to ``stream``."""
    if not isinstance(c, str):
        raise TypeError(f"expected a character, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s: str, stream: TextIO) -> None:
    """Write the text ``s`` to ``stream``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    stream.write(s)


def put_endl(s: str, stream: TextIO) -> None:
    """Write the text ``s`` followed by a newline to ``stream``."""
    put_str(s, stream)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal text of the integer ``n`` to ``stream``."""
    stream.write(itoa(n))