"""In-memory 32-bit pixel images and a gradient rectangle fill."""

from __future__ import annotations

from typing import Iterator

__all__ = ["Image", "draw_rectangle"]

_PIXEL_MASK = 0xFFFFFFFF


class Image:
    """A width x height grid of 32-bit pixels, all zero when created.

    Colours are stored as unsigned 32-bit values (0xAARRGGBB); anything
    wider is truncated, just as a store into an ``unsigned int`` would be.
    """

    __slots__ = ("width", "height", "_pixels")

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image"
            )
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column ``x``, row ``y`` (origin top left)."""
        self._pixels[self._index(x, y)] = color & _PIXEL_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x``, row ``y``."""
        return self._pixels[self._index(x, y)]

    def rows(self) -> Iterator[list[int]]:
        """Yield a copy of each row of pixels, top to bottom."""
        for start in range(0, len(self._pixels), self.width):
            yield self._pixels[start:start + self.width]

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"


def draw_rectangle(image: Image, horizontal: int, vertical: int) -> None:
    """Fill a rectangle inset by the given margins with a blue gradient.

    Rows run from ``vertical`` to ``height - vertical`` and columns from
    ``horizontal`` to ``width - horizontal``, both inclusive.  The first row
    is black and each following row gets one more step of blue, wrapping
    after 255.  A margin of zero reaches past the image edge and raises
    ``IndexError``.
    """
    rows = range(vertical, image.height - vertical + 1)
    columns = range(horizontal, image.width - horizontal + 1)
    for blue, y in enumerate(rows):
        color = blue & 0xFF
        for x in columns:
            image.put_pixel(x, y, color)