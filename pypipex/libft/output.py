"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from pypipex.libft.chars import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: str | int, fd: int) -> None:
    """Write one character (or one byte given as an int) to ``fd``."""
    if isinstance(c, int):
        _write_all(fd, bytes([c & 0xFF]))
        return
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode("utf-8"))


def put_str(s: str | None, fd: int) -> None:
    """Write ``s`` to ``fd``; a missing string writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def put_endl(s: str | None, fd: int) -> None:
    """Write ``s`` followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8") + b"\n")


def put_nbr(n: int, fd: int) -> None:
    """Write ``n`` in decimal to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))