"""Line-by-line reading from a stream through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 1


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a text or binary stream.

    The stream is read ``buffer_size`` units at a time. Whatever was read
    past the end of a returned line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._newline: str | bytes | None = None

    def _note_chunk(self, chunk: AnyStr) -> None:
        """Fix the newline marker from the kind of data the stream yields."""
        if self._newline is None:
            self._newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"

    def next_line(self) -> AnyStr | None:
        """Return the next line, ending in a newline unless it is the last, or None at the end."""
        parts: list[AnyStr] = [] if self._pending is None else [self._pending]
        self._pending = None
        while not parts or self._newline not in parts[-1]:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._note_chunk(chunk)
            parts.append(chunk)
        if not parts:
            return None
        data = parts[0][:0].join(parts)
        if not data:
            return None
        index = data.find(self._newline)
        if index < 0:
            return data
        line, rest = data[: index + 1], data[index + 1:]
        self._pending = rest if rest else None
        return line

    def reset(self) -> None:
        """Drop anything read ahead but not yet returned."""
        self._pending = None

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.next_line, None)


def read_lines(stream: IO[AnyStr]) -> list[AnyStr]:
    """Return every line of ``stream``, newlines kept."""
    return list(LineReader(stream))