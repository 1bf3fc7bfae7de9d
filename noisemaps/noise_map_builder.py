"""Builders that sample a 3-D noise source over a surface into a noise map."""

from __future__ import annotations

import logging
import math
import warnings
from abc import ABC, abstractmethod
from typing import Callable

from noisemaps.noise_map import NoiseMap

Point3 = tuple[float, float, float]
NoiseSource = Callable[[Point3], float]

_log = logging.getLogger(__name__)

DEFAULT_SIZE = (100, 100)


def _lerp(a: float, b: float, alpha: float) -> float:
    return (b - a) * alpha + a


def _ordered(lower: float, upper: float) -> tuple[float, float]:
    if lower >= upper:
        warnings.warn(
            f"lower bound {lower!r} is larger than upper bound {upper!r}, switching order",
            stacklevel=3,
        )
        return upper, lower
    return lower, upper


def lat_lon_to_xyz(lat: float, lon: float) -> Point3:
    """Convert a latitude and longitude in degrees to a point on the unit sphere."""
    lat_rad = math.radians(lat)
    lon_rad = math.radians(lon)
    r = math.cos(lat_rad)
    return r * math.cos(lon_rad), math.sin(lat_rad), r * math.sin(lon_rad)


class NoiseMapBuilder(ABC):
    """Samples ``source_module`` over a grid of ``size`` = (width, height) points."""

    def __init__(self, source_module: NoiseSource, size: tuple[int, int] = DEFAULT_SIZE) -> None:
        self.source_module = source_module
        self.size = size

    @abstractmethod
    def build(self) -> NoiseMap:
        """Sample the source and return the resulting noise map."""


class CylinderMapBuilder(NoiseMapBuilder):
    """Samples the source over the surface of a unit-radius cylinder."""

    def __init__(
        self,
        source_module: NoiseSource,
        size: tuple[int, int] = DEFAULT_SIZE,
        angle_bounds: tuple[float, float] = (-90.0, 90.0),
        height_bounds: tuple[float, float] = (-1.0, 1.0),
    ) -> None:
        super().__init__(source_module, size)
        self.angle_bounds = angle_bounds
        self.height_bounds = height_bounds

    def set_angle_bounds(self, lower_bound: float, upper_bound: float) -> CylinderMapBuilder:
        """Set the angle range in degrees; reversed bounds are swapped with a warning."""
        self.angle_bounds = _ordered(lower_bound, upper_bound)
        return self

    def set_height_bounds(self, lower_bound: float, upper_bound: float) -> CylinderMapBuilder:
        """Set the height range; reversed bounds are swapped with a warning."""
        self.height_bounds = _ordered(lower_bound, upper_bound)
        return self

    def build(self) -> NoiseMap:
        width, height = self.size
        result = NoiseMap(width, height)
        if width == 0 or height == 0:
            return result

        angle_lo, angle_hi = self.angle_bounds
        height_lo, height_hi = self.height_bounds
        x_step = (angle_hi - angle_lo) / width
        y_step = (height_hi - height_lo) / height

        for y in range(height):
            current_height = height_lo + y_step * y
            for x in range(width):
                angle = math.radians(angle_lo + x_step * x)
                point = (math.cos(angle), current_height, math.sin(angle))
                value = self.source_module(point)
                _log.debug("calculated value %s at %s, %s, %s", value, *point)
                result.set_value(x, y, value)

        return result


class PlaneMapBuilder(NoiseMapBuilder):
    """Samples the source over a rectangle of the z = 0 plane."""

    def __init__(
        self,
        source_module: NoiseSource,
        size: tuple[int, int] = DEFAULT_SIZE,
        x_bounds: tuple[float, float] = (-1.0, 1.0),
        y_bounds: tuple[float, float] = (-1.0, 1.0),
        is_seamless: bool = False,
    ) -> None:
        super().__init__(source_module, size)
        self.x_bounds = x_bounds
        self.y_bounds = y_bounds
        self.is_seamless = is_seamless

    def build(self) -> NoiseMap:
        width, height = self.size
        result = NoiseMap(width, height)
        if width == 0 or height == 0:
            return result

        x_lo, x_hi = self.x_bounds
        y_lo, y_hi = self.y_bounds
        x_extent = x_hi - x_lo
        y_extent = y_hi - y_lo
        x_step = x_extent / width
        y_step = y_extent / height
        source = self.source_module

        for y in range(height):
            current_y = y_lo + y_step * y
            for x in range(width):
                current_x = x_lo + x_step * x
                if self.is_seamless:
                    sw = source((current_x, current_y, 0.0))
                    se = source((current_x + x_extent, current_y, 0.0))
                    nw = source((current_x, current_y + y_extent, 0.0))
                    ne = source((current_x + x_extent, current_y + y_extent, 0.0))
                    x_blend = 1.0 - (current_x - x_lo) / x_extent
                    y_blend = 1.0 - (current_y - y_lo) / y_extent
                    y0 = _lerp(sw, se, x_blend)
                    y1 = _lerp(nw, ne, x_blend)
                    value = _lerp(y0, y1, y_blend)
                else:
                    value = source((current_x, current_y, 0.0))
                result.set_value(x, y, value)

        return result


class SphereMapBuilder(NoiseMapBuilder):
    """Samples the source over a latitude/longitude patch of the unit sphere."""

    def __init__(
        self,
        source_module: NoiseSource,
        size: tuple[int, int] = DEFAULT_SIZE,
        latitude_bounds: tuple[float, float] = (-1.0, 1.0),
        longitude_bounds: tuple[float, float] = (-1.0, 1.0),
    ) -> None:
        super().__init__(source_module, size)
        self.latitude_bounds = latitude_bounds
        self.longitude_bounds = longitude_bounds

    def set_bounds(
        self,
        min_lat_bound: float,
        max_lat_bound: float,
        min_lon_bound: float,
        max_lon_bound: float,
    ) -> SphereMapBuilder:
        """Set the latitude and longitude ranges, in degrees, at once."""
        self.latitude_bounds = (min_lat_bound, max_lat_bound)
        self.longitude_bounds = (min_lon_bound, max_lon_bound)
        return self

    def build(self) -> NoiseMap:
        width, height = self.size
        result = NoiseMap(width, height)
        if width == 0 or height == 0:
            return result

        lat_lo, lat_hi = self.latitude_bounds
        lon_lo, lon_hi = self.longitude_bounds
        x_step = (lon_hi - lon_lo) / width
        y_step = (lat_hi - lat_lo) / height

        for y in range(height):
            current_lat = lat_lo + y_step * y
            for x in range(width):
                current_lon = lon_lo + x_step * x
                point = lat_lon_to_xyz(current_lat, current_lon)
                result.set_value(x, y, self.source_module(point))

        return result