"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

__all__ = [
    "memset",
    "bzero",
    "calloc",
    "memcpy",
    "memccpy",
    "memmove",
    "memchr",
    "memcmp",
]

_ByteSource = bytes | bytearray | memoryview


def _check_span(name: str, data: _ByteSource, start: int, length: int) -> None:
    if length < 0:
        raise ValueError(f"{name}: length must not be negative, got {length}")
    if start < 0 or start + length > len(data):
        raise IndexError(
            f"{name}: span [{start}, {start + length}) is outside "
            f"a buffer of {len(data)} bytes"
        )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value`` (low 8 bits)."""
    _check_span("memset", buffer, 0, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError(f"calloc: negative size {count} x {size}")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: _ByteSource, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_span("memcpy", src, 0, n)
    _check_span("memcpy", dst, 0, n)
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: bytearray, src: _ByteSource, c: int, n: int) -> int | None:
    """Copy bytes from ``src`` to ``dst`` up to and including byte ``c``.

    At most ``n`` bytes are copied.  Returns the index in ``dst`` just past
    the copied ``c``, or ``None`` when ``c`` was not among the first ``n``
    bytes (in which case all ``n`` bytes have been copied).
    """
    _check_span("memccpy", src, 0, n)
    stop = bytes(src[:n]).find(bytes([c & 0xFF]))
    count = n if stop == -1 else stop + 1
    _check_span("memccpy", dst, 0, count)
    dst[:count] = bytes(src[:count])
    return None if stop == -1 else count


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes at offset ``src`` to offset ``dst`` in ``buffer``.

    The regions may overlap; the result is as if the source were first
    copied aside.
    """
    _check_span("memmove", buffer, src, length)
    _check_span("memmove", buffer, dst, length)
    buffer[dst:dst + length] = buffer[src:src + length]
    return buffer


def memchr(data: _ByteSource, c: int, n: int) -> int | None:
    """Return the index of the first byte ``c`` in ``data[:n]``, or ``None``."""
    _check_span("memchr", data, 0, n)
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index == -1 else index


def memcmp(a: _ByteSource, b: _ByteSource, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of differing bytes, or 0 when
    they are all equal or ``n`` is zero.
    """
    _check_span("memcmp", a, 0, n)
    _check_span("memcmp", b, 0, n)
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0