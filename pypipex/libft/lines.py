"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Return successive lines from a file descriptor.

    Each line keeps its trailing newline; the last line of the input may
    lack one. Reads are made ``buffer_size`` bytes at a time, and bytes
    read past a newline are kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._stash = b""

    def read_line(self) -> str | None:
        """Return the next line, or None when no data remains."""
        while b"\n" not in self._stash:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                break
            self._stash += chunk
        if not self._stash:
            return None
        end = self._stash.find(b"\n")
        if end < 0:
            line, self._stash = self._stash, b""
        else:
            line, self._stash = self._stash[: end + 1], self._stash[end + 1 :]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line