"""String helpers: splitting, searching, comparing, copying and trimming."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable

__all__ = [
    "split",
    "strchr",
    "strrchr",
    "strnstr",
    "strncmp",
    "strlcpy",
    "strlcat",
    "strjoin",
    "strtrim",
    "substr",
    "strmapi",
]


def _c_string(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    return text.partition("\0")[0]


def _check_char(name: str, c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"{name}: expected a single character, got {c!r}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name}: size must not be negative, got {value}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _check_char("split", sep)
    return [word for word in _c_string(text).split(sep) if word]


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for ``"\\0"`` finds the end of the string.
    """
    _check_char("strchr", c)
    s = _c_string(s)
    if c == "\0":
        return len(s)
    index = s.find(c)
    return None if index == -1 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for ``"\\0"`` finds the end of the string.
    """
    _check_char("strrchr", c)
    s = _c_string(s)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index == -1 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return where ``needle`` first lies wholly within ``haystack[:length]``.

    An empty needle is found at index 0; a needle that is not found gives
    ``None``.
    """
    _check_size("strnstr", length)
    needle = _c_string(needle)
    if not needle:
        return 0
    index = _c_string(haystack)[:length].find(needle)
    return None if index == -1 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns the difference of the first pair of differing character codes,
    the end of a string counting as code 0; 0 when they match.
    """
    _check_size("strncmp", n)
    left = _c_string(s1)[:n]
    right = _c_string(s2)[:n]
    for a, b in zip_longest(left, right, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied (possibly truncated) text and the full length of
    ``src``; truncation happened when that length is ``size`` or more.
    """
    _check_size("strlcpy", size)
    src = _c_string(src)
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create.  When
    ``dst`` already fills the buffer it comes back unchanged and the
    length reported is ``size + len(src)``.
    """
    _check_size("strlcat", size)
    dst = _c_string(dst)
    src = _c_string(src)
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _c_string(s1) + _c_string(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return _c_string(s).strip(_c_string(charset))


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end of ``s`` gives an empty string.
    """
    _check_size("substr", start)
    _check_size("substr", length)
    return _c_string(s)[start:start + length]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a string built from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(_c_string(s)))