"""Operations on byte buffers, with NUL-terminated string helpers."""

from __future__ import annotations

from collections.abc import Callable

_CALLOC_LIMIT = 2147483647


def _check_size(size: int, *buffers: bytes | bytearray) -> None:
    if size < 0:
        raise ValueError("size must not be negative")
    for buffer in buffers:
        if size > len(buffer):
            raise ValueError(f"size {size} exceeds buffer of {len(buffer)} bytes")


def _c_length(buffer: bytes | bytearray) -> int:
    """Length of the NUL-terminated string held in ``buffer``."""
    end = buffer.find(0)
    return len(buffer) if end < 0 else end


def bzero(buffer: bytearray, size: int) -> bytearray:
    """Set the first ``size`` bytes of ``buffer`` to zero."""
    _check_size(size, buffer)
    buffer[:size] = bytes(size)
    return buffer


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count`` elements of ``size`` bytes each.

    Raises ``OverflowError`` when the total would exceed the 32-bit limit.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > _CALLOC_LIMIT // size:
        raise OverflowError("allocation too large")
    return bytearray(count * size)


def memchr(buffer: bytes | bytearray, value: int, size: int) -> int | None:
    """Index of the first byte equal to ``value`` within ``size`` bytes, or ``None``."""
    _check_size(size, buffer)
    index = buffer.find(value & 0xFF, 0, size)
    return index if index >= 0 else None


def memcmp(first: bytes | bytearray, second: bytes | bytearray, size: int) -> int:
    """Difference of the first unequal bytes within ``size`` bytes, else 0."""
    _check_size(size, first, second)
    for left, right in zip(first[:size], second[:size]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, size: int) -> bytearray:
    """Copy ``size`` bytes of ``src`` to the start of ``dest``."""
    _check_size(size, dest, src)
    dest[:size] = src[:size]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, size: int) -> bytearray:
    """Copy ``size`` bytes from offset ``src`` to offset ``dest`` of ``buffer``.

    The regions may overlap.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_size(size, buffer)
    if max(dest, src) + size > len(buffer):
        raise ValueError("region exceeds buffer")
    buffer[dest : dest + size] = buffer[src : src + size]
    return buffer


def memset(buffer: bytearray, value: int, size: int) -> bytearray:
    """Fill the first ``size`` bytes of ``buffer`` with ``value`` as a byte."""
    _check_size(size, buffer)
    buffer[:size] = bytes([value & 0xFF]) * size
    return buffer


def strlcat(dest: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append the string in ``src`` to that in ``dest``, within ``size`` bytes.

    Returns the length of the string it tried to create.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dest_length = _c_length(dest)
    src_length = _c_length(src)
    if size <= dest_length:
        return size + src_length
    count = min(src_length, size - dest_length - 1)
    end = dest_length + count
    if end >= len(dest):
        raise ValueError("destination buffer too small")
    dest[dest_length:end] = src[:count]
    dest[end] = 0
    return dest_length + src_length


def strlcpy(dest: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy the string in ``src`` into ``dest`` within ``size`` bytes.

    Returns the length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    length = _c_length(src)
    if size == 0:
        return length
    count = min(length, size - 1)
    if count >= len(dest):
        raise ValueError("destination buffer too small")
    dest[:count] = src[:count]
    dest[count] = 0
    return length


def striteri(buffer: bytearray, func: Callable[[int, int], int | None]) -> bytearray:
    """Call ``func(index, byte)`` for each byte of the string in ``buffer``.

    A returned value replaces the byte; ``None`` leaves it as it is.
    """
    for index in range(_c_length(buffer)):
        result = func(index, buffer[index])
        if result is not None:
            buffer[index] = result & 0xFF
    return buffer