import io
import os

import pytest

from cubwalk.lines import BUFFER_SIZE, LineReader


def test_default_buffer_size():
    assert BUFFER_SIZE == 42
    assert LineReader(io.BytesIO(b"")).buffer_size == 42


def test_reads_bytes_lines_with_newlines():
    reader = LineReader(io.BytesIO(b"one\ntwo\nthree"))
    assert reader.read_line() == b"one\n"
    assert reader.read_line() == b"two\n"
    assert reader.read_line() == b"three"
    assert reader.read_line() is None


def test_empty_source_gives_none():
    assert LineReader(io.BytesIO(b"")).read_line() is None


def test_text_stream():
    reader = LineReader(io.StringIO("a\nb\n"))
    assert list(reader) == ["a\n", "b\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 1000])
def test_buffer_size_does_not_change_lines(size):
    data = b"first line\n\nsecond\nlast without newline"
    lines = list(LineReader(io.BytesIO(data), buffer_size=size))
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_long_line_spans_many_buffers():
    data = b"x" * 200 + b"\n" + b"y" * 50
    lines = list(LineReader(io.BytesIO(data), buffer_size=7))
    assert lines == [b"x" * 200 + b"\n", b"y" * 50]


def test_blank_lines_are_kept():
    assert list(LineReader(io.BytesIO(b"\n\n"))) == [b"\n", b"\n"]


def test_reads_from_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"alpha\nbeta\n")
        os.close(write_fd)
        lines = list(LineReader(read_fd, buffer_size=3))
    finally:
        os.close(read_fd)
    assert lines == [b"alpha\n", b"beta\n"]


def test_negative_descriptor_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_buffer_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b"x"), buffer_size=size)


def test_iteration_stops_and_stays_exhausted():
    reader = LineReader(io.BytesIO(b"only\n"))
    assert list(reader) == [b"only\n"]
    assert reader.read_line() is None