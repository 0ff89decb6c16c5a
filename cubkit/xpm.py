"""Reading XPM pixmaps into :class:`~cubkit.image.Image` objects."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable, Iterator

from cubkit.colors import lookup_color
from cubkit.image import Image
from cubkit.wordtab import find, find_unquoted, split_words

__all__ = [
    "XpmError",
    "text_to_rgb",
    "strip_comments",
    "quoted_strings",
    "parse_xpm",
    "xpm_to_image",
    "xpm_file_to_image",
]

_TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63
_INTEGER = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def _atoi(word: str) -> int:
    match = _INTEGER.match(word)
    return int(match.group(1)) if match else 0


def _hex_value(text: str) -> int:
    match = _HEX.match(text)
    digits = match.group(2) if match else ""
    if not digits:
        return 0
    value = int(digits, 16)
    if match.group(1) == "-":
        value = -value
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Turn an XPM colour specification into a 0xRRGGBB value.

    ``#rrggbb`` is read as hexadecimal.  Otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up among the named colours;
    ``None`` gives -1 and an unknown name gives 0.
    """
    if name.startswith("#"):
        return _hex_value(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _blank(text: str, start: int, count: int) -> str:
    stop = start + count
    return text[:start] + " " * len(text[start:stop]) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The result has the same length as ``text``.  A line comment is blanked
    together with the newline that ends it.
    """
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        rest = begin + 2
        end = find(text[rest:], "*/", len(text) - rest)
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        rest = begin + 2
        end = find(text[rest:], "\n", len(text) - rest)
        text = _blank(text, begin, end + 3)
    return text


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    size = len(text)
    pos = 0
    while True:
        opening = find(text[pos:], '"', size - pos)
        if opening == -1:
            return
        start = pos + opening + 1
        closing = find(text[start:], '"', size - start)
        if closing == -1:
            return
        yield text[start:start + closing]
        pos = start + closing + 1


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM pixmap.

    The first string is the header ``width height colours chars-per-pixel``,
    then one string per colour and one per pixel row.  Pixels whose colour
    is ``None`` become 0xFF000000; pixels with an undefined key become 0.
    """
    rows = iter(lines)

    def take() -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError("unexpected end of XPM data") from None

    header = split_words(take())
    if len(header) < 4:
        raise XpmError("XPM header needs four fields")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if 0 in (width, height, ncolors, cpp):
        raise XpmError("XPM header fields must be non-zero")
    if min(width, height, ncolors, cpp) < 0:
        raise XpmError("XPM header fields must not be negative")

    # Wide keys keep their first definition, narrow ones their last.
    first_wins = cpp > 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = take()
        words = split_words(line[cpp:])
        try:
            start = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without a 'c' entry: {line!r}") from None
        if start >= len(words):
            raise XpmError(f"colour line without a colour value: {line!r}")
        end = words[start + 1] if start + 1 < len(words) else None
        rgb = text_to_rgb(words[start], end)
        key = line[:cpp]
        if first_wins:
            palette.setdefault(key, rgb)
        else:
            palette[key] = rgb

    image = Image(width, height)
    for y in range(height):
        line = take()
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            image.put_pixel(x, y, _TRANSPARENT if color == -1 else color)
    return image


def xpm_to_image(xpm_data: Iterable[str]) -> Image:
    """Build an image from XPM strings already split into lines."""
    return parse_xpm(xpm_data)


def xpm_file_to_image(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file and build an image from it."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(quoted_strings(strip_comments(text)))