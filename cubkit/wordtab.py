"""Substring search and word splitting used by the XPM reader."""

from __future__ import annotations

import re

__all__ = ["find", "find_unquoted", "split_words"]

_BLANKS = re.compile(r"[ \t]+")


def _c_string(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    return text.partition("\0")[0]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str, limit: int) -> int:
    """Return the index of the first ``needle`` in ``text``, or -1.

    ``limit`` is the space the caller says is left: a needle longer than
    it is never found.  The search itself stops at the end of the text or
    at a NUL character.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    return _c_string(text).find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches inside double quotes."""
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    text = _c_string(text)
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _BLANKS.split(_c_string(text)) if word]