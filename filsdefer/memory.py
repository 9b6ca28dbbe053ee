"""Byte-buffer helpers: fill, search, compare, copy and allocate."""

from __future__ import annotations

SIZE_MAX = (1 << 64) - 1


def _check_count(n: int, *buffers: bytes | bytearray | memoryview) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (truncated to a byte)."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` within the first ``n``, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Difference of the first differing bytes within ``n``, or 0 if equal."""
    _check_count(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buffer`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly.
    """
    if n < 0 or dest < 0 or src < 0:
        raise ValueError("offsets and byte count must not be negative")
    if dest + n > len(buffer) or src + n > len(buffer):
        raise ValueError("region exceeds buffer length")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate ``nmemb`` elements of ``size`` bytes, all zero."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > SIZE_MAX // size:
        raise OverflowError("requested size overflows")
    return bytearray(nmemb * size)