"""A two-dimensional grid of noise values."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

RASTER_MAX_WIDTH = 32_767
RASTER_MAX_HEIGHT = 32_767
OUTPUT_DIR = Path("example_images")


def _check_size(width: int, height: int) -> None:
    if not 0 <= width < RASTER_MAX_WIDTH:
        raise ValueError(f"width {width} out of range")
    if not 0 <= height < RASTER_MAX_HEIGHT:
        raise ValueError(f"height {height} out of range")


class NoiseMap:
    """A width-by-height grid of floats with a value returned outside it."""

    def __init__(self, width: int = 0, height: int = 0, border_value: float = 0.0) -> None:
        self._size = (0, 0)
        self._values: list[float] = []
        self.border_value = border_value
        self.resize(width, height)

    def __repr__(self) -> str:
        return f"NoiseMap(size={self._size}, border_value={self.border_value})"

    @property
    def size(self) -> tuple[int, int]:
        """The (width, height) of the map."""
        return self._size

    def resize(self, width: int, height: int) -> None:
        """Change the map's size.

        A zero width or height empties the map and resets the border value.
        Existing storage is kept when it is already large enough.
        """
        _check_size(width, height)
        if width == 0 or height == 0:
            self._size = (0, 0)
            self._values = []
            self.border_value = 0.0
            return
        if len(self._values) < width * height:
            self._values = [0.0] * (width * height)
        self._size = (width, height)

    def _contains(self, x: int, y: int) -> bool:
        width, height = self._size
        return 0 <= x < width and 0 <= y < height

    def set_value(self, x: int, y: int, value: float) -> None:
        """Store ``value`` at (x, y); raise IndexError outside the map."""
        if not self._contains(x, y):
            raise IndexError(f"point ({x}, {y}) out of bounds for size {self._size}")
        self._values[x + y * self._size[0]] = float(value)

    def get_value(self, x: int, y: int) -> float:
        """Return the value at (x, y), or the border value outside the map."""
        if self._contains(x, y):
            return self._values[x + y * self._size[0]]
        return self.border_value

    def write_to_file(self, filename: str) -> Path:
        """Save the map as an 8-bit grayscale image under ``example_images/``."""
        width, height = self._size
        if width == 0 or height == 0:
            raise ValueError("cannot write an empty noise map")
        OUTPUT_DIR.mkdir(exist_ok=True)
        path = OUTPUT_DIR / filename
        pixels = bytes(
            int(min(max(v * 0.5 + 0.5, 0.0), 1.0) * 255.0)
            for v in self._values[: width * height]
        )
        Image.frombytes("L", (width, height), pixels).save(path)
        print(f"\nFinished generating {filename}")
        return path