"""Decimal integer parsing and formatting."""

from __future__ import annotations

__all__ = ["INT_MAX", "INT_MIN", "atoi", "printf_atoi", "itoa"]

INT_MAX = 2147483647
INT_MIN = -2147483648

_SPACES = "\t\n\v\f\r "
_DIGITS = "0123456789"
_MAX_DIGITS = 10


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and one ``+`` or ``-`` sign is accepted;
    parsing stops at the first non-digit.  Text with no digits gives 0.
    The result wraps around to a signed 32-bit value.
    """
    rest = text.lstrip(_SPACES)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + int(ch)
    return _wrap_int32(-value if negative else value)


def printf_atoi(text: str) -> tuple[int, int]:
    """Parse the unsigned decimal number at the start of ``text``.

    Returns ``(value, length)`` where ``length`` counts the characters used,
    leading zeros included.  Raises ``OverflowError`` when the number has
    more than ten significant digits or exceeds ``INT_MAX``.
    """
    index = len(text) - len(text.lstrip("0"))
    start = index
    value = 0
    while index < len(text) and text[index] in _DIGITS:
        value = value * 10 + int(text[index])
        if value > INT_MAX or index >= start + _MAX_DIGITS:
            raise OverflowError(f"number too large in {text!r}")
        index += 1
    return value, index


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))