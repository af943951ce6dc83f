import pytest

from pushswap.bytesutils import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    strlcat,
    strlcpy,
    striteri,
)


def test_bzero_clears_prefix_only():
    buffer = bytearray(b"abcdef")
    bzero(buffer, 3)
    assert buffer == bytearray(b"\0\0\0def")


def test_bzero_rejects_oversize():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 5)


def test_calloc_zeroed():
    assert calloc(3, 4) == bytearray(12)
    assert calloc(0, 5) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2147483647, 2)


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")
    assert memchr(data, ord("o"), 3) is None


def test_memchr_value_taken_as_byte():
    assert memchr(b"hello", 256 + ord("h"), 5) == 0


def test_memcmp_order():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"\x05", b"\x02", 1) == 3


def test_memcpy_round_trip():
    dest = bytearray(5)
    memcpy(dest, b"world", 5)
    assert bytes(dest) == b"world"


def test_memmove_overlapping_forward_and_backward():
    buffer = bytearray(b"abcdefgh")
    memmove(buffer, 2, 0, 4)
    assert buffer == bytearray(b"ababcdgh")
    buffer = bytearray(b"abcdefgh")
    memmove(buffer, 0, 2, 4)
    assert buffer == bytearray(b"cdefefgh")


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_fills_with_byte():
    buffer = bytearray(b"xxxxx")
    memset(buffer, ord("a"), 3)
    assert buffer == bytearray(b"aaaxx")
    memset(buffer, 256 + ord("b"), 1)
    assert buffer[:1] == b"b"


def test_strlcpy_copies_and_terminates():
    dest = bytearray(10)
    assert strlcpy(dest, b"hello", 10) == len(b"hello")
    assert dest[:6] == b"hello\0"


def test_strlcpy_truncates():
    dest = bytearray(b"zzzzzz")
    assert strlcpy(dest, b"hello", 3) == len(b"hello")
    assert dest[:3] == b"he\0"


def test_strlcpy_size_zero_leaves_dest():
    dest = bytearray(b"keep")
    assert strlcpy(dest, b"abc", 0) == 3
    assert dest == bytearray(b"keep")


def test_strlcat_appends():
    dest = bytearray(b"ab\0\0\0\0\0\0")
    assert strlcat(dest, b"cd", 8) == len(b"abcd")
    assert dest[:5] == b"abcd\0"


def test_strlcat_size_not_beyond_dest():
    dest = bytearray(b"ab\0\0")
    assert strlcat(dest, b"xyz", 1) == 1 + len(b"xyz")
    assert dest == bytearray(b"ab\0\0")


def test_strlcat_truncates():
    dest = bytearray(b"ab\0\0\0\0")
    assert strlcat(dest, b"cdef", 4) == len(b"abcdef")
    assert dest[:4] == b"abc\0"


def test_striteri_stops_at_nul():
    seen = []
    buffer = bytearray(b"abc\0de")

    def upper(index, value):
        seen.append(index)
        return value - 32

    striteri(buffer, upper)
    assert buffer == bytearray(b"ABC\0de")
    assert seen == [0, 1, 2]


def test_striteri_none_keeps_bytes():
    buffer = bytearray(b"same")
    striteri(buffer, lambda index, value: None)
    assert buffer == bytearray(b"same")