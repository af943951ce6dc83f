import string

import pytest

from pushswap.chartypes import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

CODES = range(-5, 300)


def test_isalpha_matches_ascii_letters():
    for code in CODES:
        expected = 0 <= code < 256 and chr(code) in string.ascii_letters
        assert isalpha(code) is expected


def test_isdigit_matches_ascii_digits():
    for code in CODES:
        expected = 0 <= code < 256 and chr(code) in string.digits
        assert isdigit(code) is expected


def test_isalnum_is_letter_or_digit():
    for code in CODES:
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)
    assert not isascii(-1)


def test_isprint_bounds():
    assert isprint(ord(" "))
    assert isprint(ord("~"))
    assert not isprint(ord("\n"))
    assert not isprint(127)


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_tolower_converts_capitals(letter):
    assert chr(tolower(ord(letter))) == letter.lower()


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_toupper_converts_lowercase(letter):
    assert chr(toupper(ord(letter))) == letter.upper()


def test_case_conversion_leaves_others_alone():
    for code in CODES:
        if not isalpha(code):
            assert tolower(code) == code
            assert toupper(code) == code


def test_case_round_trip():
    for letter in string.ascii_letters:
        code = ord(letter)
        assert tolower(toupper(code)) == tolower(code)
        assert toupper(tolower(code)) == toupper(code)