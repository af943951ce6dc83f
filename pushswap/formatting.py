"""A small printf-style formatter and helpers that write text to streams."""

from __future__ import annotations

from typing import Any, TextIO

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MODULUS = 1 << 32


def _as_signed_int(value: int) -> int:
    value %= _UINT_MODULUS
    return value - _UINT_MODULUS if value >= _UINT_MODULUS // 2 else value


def _as_unsigned_int(value: int) -> int:
    return value % _UINT_MODULUS


def to_base(number: int, base: str) -> str:
    """Digits of a non-negative ``number`` written with the symbols of ``base``."""
    if len(base) < 2:
        raise ValueError("base needs at least two symbols")
    if number < 0:
        raise ValueError("number must not be negative")
    radix = len(base)
    digits = []
    while True:
        number, remainder = divmod(number, radix)
        digits.append(base[remainder])
        if number == 0:
            break
    return "".join(reversed(digits))


def _format_signed(value: int) -> str:
    value = _as_signed_int(value)
    sign = "-" if value < 0 else ""
    return sign + to_base(abs(value), DECIMAL)


def _format_pointer(value: int | None) -> str:
    if not value:
        return "(nil)"
    if value < 0:
        raise ValueError("address must not be negative")
    return "0x" + to_base(value, HEX_LOWER)


def _format_char(value: str | int) -> str:
    if isinstance(value, int):
        return chr(value % 256)
    if len(value) != 1:
        raise ValueError("%c needs a single character")
    return value


def _convert(spec: str, value: Any) -> str:
    match spec:
        case "c":
            return _format_char(value)
        case "x":
            return to_base(_as_unsigned_int(value), HEX_LOWER)
        case "X":
            return to_base(_as_unsigned_int(value), HEX_UPPER)
        case "u":
            return to_base(_as_unsigned_int(value), DECIMAL)
        case "p":
            return _format_pointer(value)
        case "s":
            return "(null)" if value is None else str(value)
        case "d" | "i":
            return _format_signed(value)
    raise AssertionError(spec)


_TAKES_ARGUMENT = frozenset("cxXupsdi")


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``%c %s %p %d %i %u %x %X %%`` in ``fmt``.

    An unknown conversion, or a ``%`` at the end, produces nothing.
    Raises ``TypeError`` when there are too few arguments.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    remaining = iter(args)
    parts: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, "")
        if spec == "%":
            parts.append("%")
        elif spec in _TAKES_ARGUMENT and spec:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError("not enough arguments for format") from None
            parts.append(_convert(spec, value))
    return "".join(parts)


def write_printf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to ``stream``; return its length."""
    text = format_printf(fmt, *args)
    stream.write(text)
    return len(text)


def write_char(stream: TextIO, char: str) -> None:
    """Write a single character."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    stream.write(char)


def write_str(stream: TextIO, text: str) -> None:
    """Write ``text`` as it is."""
    stream.write(text)


def write_line(stream: TextIO, text: str) -> None:
    """Write ``text`` followed by a newline."""
    stream.write(text)
    stream.write("\n")


def write_number(stream: TextIO, number: int) -> None:
    """Write ``number`` in decimal."""
    stream.write(str(number))