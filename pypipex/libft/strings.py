"""String searching, comparison, slicing and splitting helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; ``c`` may be a code point."""
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str | None, s2: str | None, n: int) -> int:
    """Compare at most ``n`` characters: -1, 0 or 1.

    A missing string orders before a present one; two missing strings are equal.
    """
    _non_negative("n", n)
    if s1 is None and s2 is None:
        return 0
    if s1 is None:
        return -1
    if s2 is None:
        return 1
    a, b = s1[:n], s2[:n]
    if a == b:
        return 0
    return 1 if a > b else -1


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Return where ``needle`` first occurs entirely within the first ``n`` characters.

    An empty needle matches at 0; otherwise None when there is no match.
    """
    _non_negative("n", n)
    if not needle:
        return 0
    if n == 0:
        return None
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the text that fits (at most ``size - 1`` characters) and the
    full length of ``src``, which shows whether truncation happened.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``dest`` already fills the buffer it is returned unchanged and the
    length reported is ``size + len(src)``.
    """
    _non_negative("size", size)
    dest_len = min(len(dest), size)
    if size <= dest_len:
        return dest, size + len(src)
    room = size - 1 - dest_len
    return dest + src[:room], dest_len + len(src)


def substr(s: str, start: int, n: int) -> str:
    """Return at most ``n`` characters of ``s`` beginning at ``start``."""
    _non_negative("start", start)
    _non_negative("n", n)
    if start >= len(s):
        return ""
    return s[start : start + n]


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; None when both are missing."""
    if s1 is None and s2 is None:
        return None
    if s1 is None or s2 is None:
        raise TypeError("cannot join a missing string")
    return s1 + s2


def strtrim(s: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``s``."""
    return s.strip(chars) if chars else s


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    ch = _char(sep)
    if ch == _NUL:
        return [s] if s else []
    return [word for word in s.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str]) -> None:
    """Replace each character in ``chars`` with ``f(index, char)``, in place."""
    for i, ch in enumerate(chars):
        chars[i] = f(i, ch)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)