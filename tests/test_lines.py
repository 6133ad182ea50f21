import os

import pytest

from pypipex.libft.lines import LineReader


def pipe_with(data: bytes) -> int:
    r, w = os.pipe()
    os.write(w, data)
    os.close(w)
    return r


@pytest.fixture
def reader_for():
    opened = []

    def make(data: bytes, buffer_size: int = 42) -> LineReader:
        fd = pipe_with(data)
        opened.append(fd)
        return LineReader(fd, buffer_size)

    yield make
    for fd in opened:
        os.close(fd)


def test_lines_keep_newlines(reader_for):
    reader = reader_for(b"abc\ndef")
    assert reader.read_line() == "abc\n"
    assert reader.read_line() == "def"
    assert reader.read_line() is None


def test_empty_input(reader_for):
    assert reader_for(b"").read_line() is None


def test_exhausted_reader_stays_exhausted(reader_for):
    reader = reader_for(b"x\n")
    assert reader.read_line() == "x\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines(reader_for):
    assert list(reader_for(b"\n\nz\n")) == ["\n", "\n", "z\n"]


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 5, 42, 10000])
def test_round_trip_any_buffer_size(reader_for, buffer_size):
    text = "first line\nsecond\n\nthird without end"
    lines = list(reader_for(text.encode(), buffer_size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "third without end"


def test_long_line_over_many_reads(reader_for):
    line = "q" * 500 + "\n"
    reader = reader_for(line.encode() * 2, 7)
    assert list(reader) == [line, line]


def test_multibyte_utf8_split_across_reads(reader_for):
    text = "héllo wörld\nΩmega\n"
    assert "".join(reader_for(text.encode("utf-8"), 1)) == text


def test_reads_from_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(b"one\ntwo\n")
    fd = os.open(path, os.O_RDONLY)
    try:
        assert list(LineReader(fd)) == ["one\n", "two\n"]
    finally:
        os.close(fd)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_buffer_rejected(size):
    r, w = os.pipe()
    try:
        with pytest.raises(ValueError):
            LineReader(r, size)
    finally:
        os.close(r)
        os.close(w)