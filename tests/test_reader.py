import io

import pytest

from filsdefer.reader import LineReader, read_lines


class _FailingStream:
    def read(self, size):
        raise OSError("read failed")


def test_lines_keep_newlines():
    reader = LineReader(io.StringIO("ab\ncd\n"))
    assert reader.next_line() == "ab\n"
    assert reader.next_line() == "cd\n"
    assert reader.next_line() is None


def test_last_line_without_newline():
    assert read_lines(io.StringIO("ab\ncd")) == ["ab\n", "cd"]


def test_empty_stream_gives_nothing():
    reader = LineReader(io.StringIO(""))
    assert reader.next_line() is None
    assert read_lines(io.StringIO("")) == []


def test_end_is_sticky():
    reader = LineReader(io.StringIO("x\n"))
    assert reader.next_line() == "x\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_empty_lines():
    assert read_lines(io.StringIO("\n\n")) == ["\n", "\n"]


def test_binary_stream():
    assert read_lines(io.BytesIO(b"0 1\n2 3\n")) == [b"0 1\n", b"2 3\n"]


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, 64, 4096])
def test_round_trip_any_buffer_size(buffer_size):
    text = "first line\n\nthird 1 2 3\nlast"
    lines = list(LineReader(io.StringIO(text), buffer_size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])
    assert len(lines) == text.count("\n") + 1


@pytest.mark.parametrize("buffer_size", [0, -1])
def test_invalid_buffer_size(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a\n"), buffer_size)


def test_reset_discards_read_ahead():
    reader = LineReader(io.StringIO("a\nb\nc\n"), 100)
    assert reader.next_line() == "a\n"
    reader.reset()
    assert reader.next_line() is None


def test_without_reset_read_ahead_is_kept():
    reader = LineReader(io.StringIO("a\nb\nc\n"), 100)
    assert list(reader) == ["a\n", "b\n", "c\n"]


def test_read_error_propagates():
    reader = LineReader(_FailingStream())
    with pytest.raises(OSError):
        reader.next_line()