"""Character classification and case conversion on character codes."""

from __future__ import annotations

_CASE_OFFSET = ord("a") - ord("A")


def isalpha(code: int) -> bool:
    """Whether ``code`` is an ASCII letter."""
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(code: int) -> bool:
    """Whether ``code`` is an ASCII decimal digit."""
    return ord("0") <= code <= ord("9")


def isalnum(code: int) -> bool:
    """Whether ``code`` is an ASCII letter or digit."""
    return isalpha(code) or isdigit(code)


def isascii(code: int) -> bool:
    """Whether ``code`` lies in the 7-bit ASCII range."""
    return 0 <= code <= 127


def isprint(code: int) -> bool:
    """Whether ``code`` is a printable ASCII character, space included."""
    return 32 <= code <= 126


def tolower(code: int) -> int:
    """The lower-case code of an ASCII capital; any other code unchanged."""
    return code + _CASE_OFFSET if ord("A") <= code <= ord("Z") else code


def toupper(code: int) -> int:
    """The capital code of an ASCII lower-case letter; any other code unchanged."""
    return code - _CASE_OFFSET if ord("a") <= code <= ord("z") else code