import io
import os

import pytest

from sigtalk.lines import BUFFER_SIZE, LineReader, read_lines

SAMPLE = "first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("buffer_size", [1, 3, 7, BUFFER_SIZE, 1000])
def test_text_round_trip(buffer_size):
    lines = list(read_lines(io.StringIO(SAMPLE), buffer_size))
    assert "".join(lines) == SAMPLE
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "last without newline"


@pytest.mark.parametrize("buffer_size", [1, 5, 64])
def test_bytes_round_trip(buffer_size):
    data = SAMPLE.encode()
    lines = list(read_lines(io.BytesIO(data), buffer_size))
    assert b"".join(lines) == data
    assert len(lines) == data.count(b"\n") + 1


def test_file_descriptor_source():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"a\nbc\n")
        os.close(write_fd)
        reader = LineReader(read_fd, 2)
        assert reader.read_line() == b"a\n"
        assert reader.read_line() == b"bc\n"
        assert reader.read_line() is None
    finally:
        os.close(read_fd)


def test_empty_source_gives_nothing():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_exhausted_reader_keeps_returning_none():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines_are_kept():
    lines = list(read_lines(io.StringIO("\n\n\n"), 2))
    assert lines == ["\n"] * 3


@pytest.mark.parametrize("buffer_size", [0, -4])
def test_non_positive_buffer_rejected(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO(SAMPLE), buffer_size)


def test_negative_descriptor_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


class _FailingSource:
    def read(self, size):
        raise OSError("read failed")


def test_read_error_propagates():
    reader = LineReader(_FailingSource(), 4)
    with pytest.raises(OSError):
        reader.read_line()