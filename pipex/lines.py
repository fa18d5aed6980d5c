"""Line-by-line reading from a file descriptor with a fixed read size."""

from __future__ import annotations

import operator
import os
from typing import Iterator, Optional

__all__ = ["LineReader", "read_lines", "DEFAULT_BUFFER_SIZE", "MAX_FD"]

DEFAULT_BUFFER_SIZE = 10
MAX_FD = 1024


class LineReader:
    """Read newline-terminated lines from a raw file descriptor.

    Each line keeps its trailing newline; the last line may lack one.
    Data is read ``buffer_size`` bytes at a time.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        fd = operator.index(fd)
        buffer_size = operator.index(buffer_size)
        if fd < 0 or fd > MAX_FD:
            raise ValueError(f"file descriptor out of range: {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = bytearray()

    def _fill(self) -> None:
        scanned = 0
        while b"\n" not in self._pending[scanned:]:
            scanned = len(self._pending)
            try:
                chunk = os.read(self._fd, self._buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                return
            self._pending += chunk

    def readline(self) -> Optional[str]:
        """Return the next line, or None when no data is left."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        end = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.readline()) is not None:
            yield line


def read_lines(fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[str]:
    """Yield every remaining line of ``fd``."""
    yield from LineReader(fd, buffer_size)