"""A two-dimensional grid of RGBA colours."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from PIL import Image

from noisemaps.color_gradient import Color, _as_color

RASTER_MAX_WIDTH = 32_767
RASTER_MAX_HEIGHT = 32_767
OUTPUT_DIR = Path("example_images")

_TRANSPARENT: Color = (0, 0, 0, 0)


def _check_size(width: int, height: int) -> None:
    if not 0 <= width < RASTER_MAX_WIDTH:
        raise ValueError(f"width {width} out of range")
    if not 0 <= height < RASTER_MAX_HEIGHT:
        raise ValueError(f"height {height} out of range")


class NoiseImage:
    """A width-by-height grid of RGBA colours with a colour returned outside it."""

    def __init__(
        self, width: int = 0, height: int = 0, border_color: Iterable[int] = _TRANSPARENT
    ) -> None:
        self._size = (0, 0)
        self._pixels: list[Color] = []
        self.border_color: Color = _as_color(border_color)
        self.resize(width, height)

    def __repr__(self) -> str:
        return f"NoiseImage(size={self._size}, border_color={self.border_color})"

    @property
    def size(self) -> tuple[int, int]:
        """The (width, height) of the image."""
        return self._size

    def resize(self, width: int, height: int) -> None:
        """Change the image's size.

        A zero width or height empties the image and resets the border colour.
        Existing storage is kept when it is already large enough.
        """
        _check_size(width, height)
        if width == 0 or height == 0:
            self._size = (0, 0)
            self._pixels = []
            self.border_color = _TRANSPARENT
            return
        if len(self._pixels) < width * height:
            self._pixels = [_TRANSPARENT] * (width * height)
        self._size = (width, height)

    def _contains(self, x: int, y: int) -> bool:
        width, height = self._size
        return 0 <= x < width and 0 <= y < height

    def set_value(self, x: int, y: int, value: Iterable[int]) -> None:
        """Store the colour at (x, y); raise IndexError outside the image."""
        if not self._contains(x, y):
            raise IndexError(f"point ({x}, {y}) out of bounds for size {self._size}")
        self._pixels[x + y * self._size[0]] = _as_color(value)

    def get_value(self, x: int, y: int) -> Color:
        """Return the colour at (x, y), or the border colour outside the image."""
        if self._contains(x, y):
            return self._pixels[x + y * self._size[0]]
        return self.border_color

    def write_to_file(self, filename: str) -> Path:
        """Save the image as RGBA under ``example_images/``."""
        width, height = self._size
        if width == 0 or height == 0:
            raise ValueError("cannot write an empty noise image")
        OUTPUT_DIR.mkdir(exist_ok=True)
        path = OUTPUT_DIR / filename
        data = bytes(channel for pixel in self._pixels[: width * height] for channel in pixel)
        Image.frombytes("RGBA", (width, height), data).save(path)
        print(f"\nFinished generating {filename}")
        return path