"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 10


def _newline(data: str | bytes) -> str | bytes:
    return "\n" if isinstance(data, str) else b"\n"


class LineReader(Generic[AnyStr]):
    """Yields the lines of ``stream``, each with its newline if it had one."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _has_line(self) -> bool:
        pending = self._pending
        return pending is not None and _newline(pending) in pending

    def read_line(self) -> AnyStr | None:
        """The next line, or ``None`` once the stream is exhausted."""
        while not self._has_line():
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        pending = self._pending
        if not pending:
            return None
        end = pending.find(_newline(pending))
        if end < 0:
            self._pending = pending[:0]
            return pending
        self._pending = pending[end + 1 :]
        return pending[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)