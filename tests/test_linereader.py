import io

import pytest

from pushswap.linereader import LineReader

TEXT = "sa\npb\nrra\n\nlast"


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 10, 1000])
def test_lines_keep_newlines(buffer_size):
    reader = LineReader(io.StringIO(TEXT), buffer_size)
    assert list(reader) == ["sa\n", "pb\n", "rra\n", "\n", "last"]


@pytest.mark.parametrize("buffer_size", [1, 4, 10])
def test_joined_lines_give_back_the_input(buffer_size):
    reader = LineReader(io.StringIO(TEXT), buffer_size)
    assert "".join(reader) == TEXT


def test_bytes_stream():
    reader = LineReader(io.BytesIO(b"ra\nrb\n"), 3)
    assert list(reader) == [b"ra\n", b"rb\n"]


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None


def test_none_repeats_after_end():
    reader = LineReader(io.StringIO("pa\n"))
    assert reader.read_line() == "pa\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_every_line_but_last_ends_with_newline():
    lines = list(LineReader(io.StringIO("a\nbb\nccc\n"), 2))
    assert lines == ["a\n", "bb\n", "ccc\n"]
    assert all(line.endswith("\n") for line in lines)


@pytest.mark.parametrize("buffer_size", [0, -1])
def test_buffer_size_must_be_positive(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size)