"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"


def _code(c: int | str) -> int:
    """Return the integer code of ``c``, a code point or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    One optional sign is accepted; parsing stops at the first non-digit.
    Text with no digits gives 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for ch in stripped:
        if not is_digit(ch):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def itoa(n: int) -> str:
    """Render an integer in decimal."""
    if n < 0:
        return "-" + itoa(-n)
    return str(n)