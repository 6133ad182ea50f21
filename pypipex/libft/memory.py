"""Byte-buffer operations on mutable and immutable byte sequences."""

from __future__ import annotations

from collections.abc import MutableSequence

_CALLOC_LIMIT = 2147483647

BytesLike = bytes | bytearray | memoryview


def _check_length(n: int, *buffers: BytesLike | MutableSequence[int]) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def memcpy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dst``."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to ``dst``.

    The regions may overlap; the result is as if the source bytes were
    copied out first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n, buf)
    if max(dst, src) + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: BytesLike, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers: -1, 0 or 1."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return 1 if x > y else -1
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when either factor reaches the 32-bit signed limit
    while the other is non-zero.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if (count != 0 and size >= _CALLOC_LIMIT) or (size != 0 and count >= _CALLOC_LIMIT):
        raise MemoryError(f"cannot allocate {count} x {size} bytes")
    return bytearray(count * size)