"""Colour gradients that map noise values to RGBA colours."""

from __future__ import annotations

import bisect
import math
import sys
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable

Color = tuple[int, int, int, int]

BLACK_TRANSPARENT: Color = (0, 0, 0, 0)


def _as_color(color: Iterable[int]) -> Color:
    channels = tuple(int(c) for c in color)
    if len(channels) != 4:
        raise ValueError(f"a colour needs 4 channels, got {len(channels)}")
    return channels  # type: ignore[return-value]


def _to_u8(value: float) -> int:
    """Convert a float to a byte, truncating and saturating at 0 and 255."""
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), 255.0))


def interpolate_color(color0: Iterable[int], color1: Iterable[int], alpha: float) -> Color:
    """Linearly blend two colours channel by channel."""

    def blend(channel0: int, channel1: int) -> int:
        c0 = channel0 / 255.0
        c1 = channel1 / 255.0
        return _to_u8(((c1 - c0) * alpha + c0) * 255.0)

    return tuple(  # type: ignore[return-value]
        blend(a, b) for a, b in zip(_as_color(color0), _as_color(color1))
    )


@dataclass(frozen=True)
class _GradientPoint:
    pos: float
    color: Color


class ColorGradient:
    """An ordered set of control points, each mapping a position to a colour.

    A new gradient is the grayscale gradient from -1 (black) to 1 (white).
    Builder methods change the gradient in place and return it for chaining.
    """

    def __init__(self) -> None:
        self._points: list[_GradientPoint] = []
        self._min = 0.0
        self._max = 1.0
        self.build_grayscale_gradient()

    def __repr__(self) -> str:
        points = ", ".join(f"{p.pos}: {p.color}" for p in self._points)
        return f"ColorGradient([{points}])"

    def add_gradient_point(self, pos: float, color: Iterable[int]) -> ColorGradient:
        """Add a control point; a point at an existing position is ignored."""
        point = _GradientPoint(float(pos), _as_color(color))

        if self._min > pos:
            self._min = point.pos
            self._points.insert(0, point)
        elif self._max < pos:
            self._max = point.pos
            self._points.append(point)
        elif not any(abs(p.pos - pos) < sys.float_info.epsilon for p in self._points):
            index = bisect.bisect_left(self._points, pos, key=lambda p: p.pos)
            self._points.insert(index, point)

        return self

    def clear_gradient(self) -> ColorGradient:
        """Remove every control point and collapse the domain to zero."""
        self._points.clear()
        self._min = 0.0
        self._max = 0.0
        return self

    def build_grayscale_gradient(self) -> ColorGradient:
        """Replace the gradient with black at -1 and white at 1."""
        return (
            self.clear_gradient()
            .add_gradient_point(-1.0, (0, 0, 0, 255))
            .add_gradient_point(1.0, (255, 255, 255, 255))
        )

    def build_terrain_gradient(self) -> ColorGradient:
        """Replace the gradient with a terrain palette from sea to snow."""
        points = [
            (-1.0, (0, 0, 0, 255)),
            (-256.0 / 16384.0, (6, 58, 127, 255)),
            (-1.0 / 16384.0, (14, 112, 192, 255)),
            (0.0, (70, 120, 60, 255)),
            (1024.0 / 16384.0, (110, 140, 75, 255)),
            (2048.0 / 16384.0, (160, 140, 111, 255)),
            (3072.0 / 16384.0, (184, 163, 141, 255)),
            (4096.0 / 16384.0, (128, 128, 128, 255)),
            (5632.0 / 16384.0, (128, 128, 128, 255)),
            (6144.0 / 16384.0, (250, 250, 250, 255)),
            (1.0, (255, 255, 255, 255)),
        ]
        self.clear_gradient()
        for pos, color in points:
            self.add_gradient_point(pos, color)
        return self

    def build_rainbow_gradient(self) -> ColorGradient:
        """Replace the gradient with a rainbow palette."""
        points = [
            (-1.0, (255, 0, 0, 255)),
            (-0.7, (255, 255, 0, 255)),
            (-0.4, (0, 255, 0, 255)),
            (0.0, (0, 255, 255, 255)),
            (0.3, (0, 0, 255, 255)),
            (0.6, (255, 0, 255, 255)),
            (1.0, (255, 0, 0, 255)),
        ]
        self.clear_gradient()
        for pos, color in points:
            self.add_gradient_point(pos, color)
        return self

    def get_color(self, pos: float) -> Color:
        """Return the colour at ``pos``; transparent black if nothing matches."""
        if not self._points:
            return BLACK_TRANSPARENT
        if pos < self._min:
            return self._points[0].color
        if pos > self._max:
            return self._points[-1].color

        color = BLACK_TRANSPARENT
        for lower, upper in pairwise(self._points):
            if lower.pos <= pos < upper.pos:
                alpha = (pos - lower.pos) / (upper.pos - lower.pos)
                color = interpolate_color(lower.color, upper.color, alpha)
        return color