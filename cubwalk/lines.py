"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, AnyStr

BUFFER_SIZE = 42


class LineReader:
    """Reads lines, newline included, from a file descriptor or a stream.

    The source is read in chunks of ``buffer_size``; the last line may lack a
    newline. ``read_line`` returns None once the source is exhausted.
    """

    def __init__(self, source: int | Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(source, int):
            if source < 0:
                raise ValueError(f"invalid file descriptor {source}")
            fd = source
            self._read = lambda n: os.read(fd, n)
        else:
            self._read = source.read
        self.buffer_size = buffer_size
        self._buffer: Any = None
        self._pos = 0

    def _refill(self) -> bool:
        chunk = self._read(self.buffer_size)
        if not chunk:
            self._buffer = None
            self._pos = 0
            return False
        self._buffer = chunk
        self._pos = 0
        return True

    def read_line(self) -> AnyStr | None:
        """The next line including its newline, or None at end of input."""
        pieces: list = []
        while True:
            if self._buffer is None or self._pos >= len(self._buffer):
                if not self._refill():
                    if pieces:
                        return pieces[0][:0].join(pieces)
                    return None
            buffer = self._buffer
            newline = b"\n" if isinstance(buffer, (bytes, bytearray)) else "\n"
            index = buffer.find(newline, self._pos)
            if index >= 0:
                pieces.append(buffer[self._pos:index + 1])
                self._pos = index + 1
                return pieces[0][:0].join(pieces)
            pieces.append(buffer[self._pos:])
            self._pos = len(buffer)

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)