"""Images of rgba colors."""

from __future__ import annotations

import math
from typing import Iterator, Union

from .color import Color

_Key = Union[int, tuple]


class Image:
    """A width x height grid of colors, stored row by row from y = 0."""

    __slots__ = ("width", "height", "pixels")

    def __init__(self, width: int = 0, height: int = 0, color: Color | None = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid image size {width}x{height}")
        if color is None:
            color = Color(0.0, 0.0, 0.0)
        self.width = width
        self.height = height
        self.pixels: list[Color] = [color] * (width * height)

    def _index(self, key: _Key) -> int:
        if isinstance(key, tuple):
            x, y = key
            return self.offset(x, y)
        if not 0 <= key < len(self.pixels):
            raise IndexError(f"pixel index out of range: {key}")
        return key

    def __getitem__(self, key: _Key) -> Color:
        """Color of pixel (x, y), or of the i-th pixel."""
        return self.pixels[self._index(key)]

    def __setitem__(self, key: _Key, color: Color) -> None:
        """Set the color of pixel (x, y), or of the i-th pixel."""
        self.pixels[self._index(key)] = color

    def __len__(self) -> int:
        return self.width * self.height

    def __iter__(self) -> Iterator[Color]:
        return iter(self.pixels)

    def offset(self, x: int, y: int) -> int:
        """Index of pixel (x, y); coordinates outside the image are clamped."""
        px = min(max(x, 0), self.width - 1)
        py = min(max(y, 0), self.height - 1)
        p = py * self.width + px
        if not 0 <= p < len(self.pixels):
            raise IndexError(f"pixel ({x}, {y}) is outside an empty image")
        return p

    def sample(self, x: float, y: float) -> Color:
        """Bilinear interpolation of the color at (x, y) in [0 width]x[0 height]."""
        u = x - math.floor(x)
        v = y - math.floor(y)
        ix = int(x)
        iy = int(y)
        return (
            self[ix, iy] * ((1 - u) * (1 - v))
            + self[ix + 1, iy] * (u * (1 - v))
            + self[ix, iy + 1] * ((1 - u) * v)
            + self[ix + 1, iy + 1] * (u * v)
        )

    def texture(self, x: float, y: float) -> Color:
        """Interpolated color at normalized coordinates (x, y) in [0 1]x[0 1]."""
        return self.sample(x * self.width, y * self.height)