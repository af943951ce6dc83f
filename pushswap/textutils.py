"""String helpers: conversion, searching, splitting and trimming."""

from __future__ import annotations

from collections.abc import Callable

_WHITESPACE = "\t\n\v\f\r "
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the 32-bit signed range by two's-complement wrapping."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus // 2 else value


def atoi(text: str) -> int:
    """Read a leading integer from ``text`` as a 32-bit signed value.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit.  Text with no digits gives 0.  A value outside the
    32-bit range wraps around.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = ""
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits += char
    value = int(digits) if digits else 0
    return _wrap_int(-value if negative else value)


def itoa(number: int) -> str:
    """Decimal text of ``number``."""
    return str(number)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``, or ``None``.

    Searching for ``"\\0"`` finds the end of the text.
    """
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == "\0" else None


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``, or ``None``.

    Searching for ``"\\0"`` finds the end of the text.
    """
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strncmp(first: str, second: str, size: int) -> int:
    """Compare at most ``size`` characters; the sign gives the order.

    Returns the code difference of the first differing characters, a missing
    character counting as 0.  A negative ``size`` gives -1.
    """
    if size < 0:
        return -1
    for index in range(min(size, max(len(first), len(second)))):
        left = ord(first[index]) if index < len(first) else 0
        right = ord(second[index]) if index < len(second) else 0
        if left != right:
            return left - right
    return 0


def strnstr(big: str, little: str, size: int) -> int | None:
    """Index of ``little`` within the first ``size`` characters of ``big``.

    An empty ``little`` is found at 0; ``None`` when there is no match.
    """
    if not little:
        return 0
    index = big[: max(size, 0)].find(little)
    return index if index >= 0 else None


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A ``start`` past the end gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """``first`` followed by ``second``."""
    return first + second


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string of ``func(index, char)`` for each character of ``text``."""
    return "".join(func(index, char) for index, char in enumerate(text))