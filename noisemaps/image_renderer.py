"""Render noise maps into colour images, with optional hill shading."""

from __future__ import annotations

import math
from typing import Iterable

from noisemaps.color_gradient import Color, ColorGradient, _as_color
from noisemaps.noise_image import NoiseImage
from noisemaps.noise_map import NoiseMap

_WHITE: Color = (255, 255, 255, 255)


def color_to_floats(color: Iterable[int]) -> tuple[float, float, float, float]:
    """Scale the four byte channels of a colour to floats in [0, 1]."""
    return tuple(channel / 255.0 for channel in _as_color(color))  # type: ignore[return-value]


def _lerp(a: float, b: float, alpha: float) -> float:
    return (b - a) * alpha + a


def _unit_to_u8(value: float) -> int:
    return int(min(max(value, 0.0), 1.0) * 255.0)


def _neighbour_offsets(index: int, extent: int, wrap: bool) -> tuple[int, int]:
    """Offsets to the lower and upper neighbour of ``index`` along one axis."""
    if wrap:
        if index == 0:
            return extent - 1, 1
        if index == extent - 1:
            return -1, extent - 1
    else:
        if index == 0:
            return 0, 1
        if index == extent - 1:
            return -1, 0
    return -1, 1


class LightSource:
    """A directional light used to shade rendered images."""

    def __init__(
        self,
        azimuth: float = 45.0,
        brightness: float = 1.0,
        color: Iterable[int] = _WHITE,
        contrast: float = 1.0,
        elevation: float = 45.0,
        intensity: float = 1.0,
    ) -> None:
        self._trig: tuple[float, float, float, float] | None = None
        self._azimuth = float(azimuth)
        self._elevation = float(elevation)
        self._contrast = 1.0
        self.contrast = contrast
        self.brightness = float(brightness)
        self.color = color
        self.intensity = float(intensity)

    def __repr__(self) -> str:
        return (
            f"LightSource(azimuth={self._azimuth}, brightness={self.brightness}, "
            f"color={self._color}, contrast={self._contrast}, "
            f"elevation={self._elevation}, intensity={self.intensity})"
        )

    @property
    def azimuth(self) -> float:
        """Azimuth of the light, in degrees."""
        return self._azimuth

    @azimuth.setter
    def azimuth(self, value: float) -> None:
        self._azimuth = float(value)
        self._trig = None

    @property
    def elevation(self) -> float:
        """Elevation of the light, in degrees."""
        return self._elevation

    @elevation.setter
    def elevation(self, value: float) -> None:
        self._elevation = float(value)
        self._trig = None

    @property
    def contrast(self) -> float:
        """Contrast between lit areas and areas in shadow; never negative."""
        return self._contrast

    @contrast.setter
    def contrast(self, value: float) -> None:
        if not value >= 0.0:
            raise ValueError(f"contrast value out of bounds: {value}")
        self._contrast = float(value)

    @property
    def color(self) -> Color:
        """The RGBA colour of the light."""
        return self._color

    @color.setter
    def color(self, value: Iterable[int]) -> None:
        self._color = _as_color(value)

    def _angles(self) -> tuple[float, float, float, float]:
        if self._trig is None:
            azimuth = math.radians(self._azimuth)
            elevation = math.radians(self._elevation)
            self._trig = (
                math.cos(azimuth),
                math.sin(azimuth),
                math.cos(elevation),
                math.sin(elevation),
            )
        return self._trig

    def calc_light_intensity(
        self, center: float, left: float, right: float, down: float, up: float
    ) -> float:
        """Return the light falling on a point given its four neighbours' heights."""
        azimuth_cos, azimuth_sin, elevation_cos, elevation_sin = self._angles()

        i_max = 1.0
        io = i_max * math.sqrt(2.0) * elevation_sin / 2.0
        ix = (i_max - io) * self._contrast * math.sqrt(2.0) * elevation_cos * azimuth_cos
        iy = (i_max - io) * self._contrast * math.sqrt(2.0) * elevation_cos * azimuth_sin

        intensity = ix * (left - right) + iy * (down - up) + io
        return max(intensity, 0.0)


class ImageRenderer:
    """Turns a noise map into a colour image through a gradient and a light."""

    def __init__(
        self,
        gradient: ColorGradient | None = None,
        light_source: LightSource | None = None,
        light_enabled: bool = False,
        wrap_enabled: bool = False,
    ) -> None:
        self.gradient = gradient if gradient is not None else ColorGradient()
        self.light_source = light_source if light_source is not None else LightSource()
        self.light_enabled = light_enabled
        self.wrap_enabled = wrap_enabled

    def __repr__(self) -> str:
        return (
            f"ImageRenderer(gradient={self.gradient!r}, light_source={self.light_source!r}, "
            f"light_enabled={self.light_enabled}, wrap_enabled={self.wrap_enabled})"
        )

    def _light_at(self, noise_map: NoiseMap, x: int, y: int) -> float:
        if not self.light_enabled:
            return 1.0
        width, height = noise_map.size
        left_offset, right_offset = _neighbour_offsets(x, width, self.wrap_enabled)
        down_offset, up_offset = _neighbour_offsets(y, height, self.wrap_enabled)

        intensity = self.light_source.calc_light_intensity(
            noise_map.get_value(x, y),
            noise_map.get_value(x + left_offset, y),
            noise_map.get_value(x + right_offset, y),
            noise_map.get_value(x, y + down_offset),
            noise_map.get_value(x, y + up_offset),
        )
        return intensity * self.light_source.brightness

    def _apply_light(
        self, rgb: tuple[float, float, float], light_value: float
    ) -> tuple[int, int, int]:
        if self.light_enabled:
            light = color_to_floats(self.light_source.color)
            rgb = tuple(  # type: ignore[assignment]
                channel * light_value * light_channel
                for channel, light_channel in zip(rgb, light[:3])
            )
        red, green, blue = (_unit_to_u8(channel) for channel in rgb)
        return red, green, blue

    def render(self, noise_map: NoiseMap) -> NoiseImage:
        """Render ``noise_map`` to a new image of the same size."""
        width, height = noise_map.size
        image = NoiseImage(width, height)

        for y in range(height):
            for x in range(width):
                source_color = self.gradient.get_color(noise_map.get_value(x, y))
                light_value = self._light_at(noise_map, x, y)
                source = color_to_floats(source_color)
                rgb = self._apply_light(source[:3], light_value)
                image.set_value(x, y, (*rgb, source_color[3]))

        return image

    def render_with_background(self, noise_map: NoiseMap, background: NoiseImage) -> NoiseImage:
        """Render ``noise_map`` blended over ``background`` by the gradient's alpha."""
        width, height = noise_map.size
        image = NoiseImage(width, height)

        for y in range(height):
            for x in range(width):
                source_color = self.gradient.get_color(noise_map.get_value(x, y))
                light_value = self._light_at(noise_map, x, y)
                background_color = background.get_value(x, y)

                source = color_to_floats(source_color)
                back = color_to_floats(background_color)
                blended = (
                    _lerp(source[0], back[0], source[3]),
                    _lerp(source[1], back[1], source[3]),
                    _lerp(source[2], back[2], source[3]),
                )
                rgb = self._apply_light(blended, light_value)
                alpha = max(source_color[3], background_color[3])
                image.set_value(x, y, (*rgb, alpha))

        return image