# noisemaps

Tools for turning noise functions into images. The package has five modules:

- `noisemaps.noise_map`: `NoiseMap`, a width-by-height grid of floats.
- `noisemaps.noise_image`: `NoiseImage`, a width-by-height grid of RGBA colors.
- `noisemaps.noise_map_builder`: builders that sample a noise function over a
  plane, a cylinder or a sphere into a `NoiseMap`.
- `noisemaps.color_gradient`: `ColorGradient`, which maps a value to a color.
- `noisemaps.image_renderer`: `ImageRenderer` and `LightSource`, which turn a
  `NoiseMap` into a `NoiseImage`. Hill shading is optional.

## Installation

```
pip install noisemaps
```

Pillow is the only dependency. It is used to write image files.

## Noise maps and images

```python
from noisemaps.noise_map import NoiseMap

noise_map = NoiseMap(4, 3, border_value=-1.0)
noise_map.set_value(0, 0, 0.5)
noise_map.get_value(0, 0)    # 0.5
noise_map.get_value(10, 10)  # -1.0, the border value
noise_map.size               # (4, 3)
```

Sizes behave as follows:

- Width and height must each be from 0 up to, but not including, 32767. Other values raise `ValueError`.
- `resize(width, height)` changes the size. A zero width or height empties the map and resets the border value to 0.0.
- `set_value` outside the map raises `IndexError`.
- `get_value` outside the map returns `border_value`.

`NoiseImage` works the same way for RGBA tuples. It has a `border_color`, which defaults to `(0, 0, 0, 0)`.

Both classes have `write_to_file(filename)`. It saves the grid into an `example_images/` directory in the current working directory, creating that directory if needed, and returns the path it wrote:

- `NoiseMap` writes an 8-bit grayscale image. Each value `v` becomes a pixel of `clamp(v * 0.5 + 0.5, 0, 1) * 255`.
- `NoiseImage` writes an RGBA image.

Writing an empty map or image raises `ValueError`.

## Building a noise map

A builder samples any callable that takes a 3D point `(x, y, z)` and returns a
float:

```python
import math
from noisemaps.noise_map_builder import PlaneMapBuilder

def source(point):
    x, y, z = point
    return math.sin(x * 3.0) * math.cos(y * 3.0)

noise_map = PlaneMapBuilder(source, size=(256, 256)).build()
```

The builders share these settings:

- Every builder has `source_module` and `size`. The default size is `(100, 100)`.
- `build()` returns a new `NoiseMap`.
- Each builder takes its bounds as keyword arguments or as attributes.

The builders differ in the surface they sample:

- `PlaneMapBuilder` samples the `z = 0` plane over `x_bounds` and `y_bounds`, which default to `(-1.0, 1.0)` each. With `is_seamless=True` it blends four samples per point so that the result tiles.
- `CylinderMapBuilder` samples a unit-radius cylinder. `angle_bounds` is in degrees and defaults to `(-90.0, 90.0)`. `height_bounds` defaults to `(-1.0, 1.0)`.
  - `set_angle_bounds` and `set_height_bounds` swap reversed or equal bounds and issue a `UserWarning`.
  - Each sampled value is logged at debug level.
- `SphereMapBuilder` samples the unit sphere. `latitude_bounds` and `longitude_bounds` are in degrees and default to `(-1.0, 1.0)`. `set_bounds(min_lat, max_lat, min_lon, max_lon)` sets both ranges at once.
  - `lat_lon_to_xyz(lat, lon)` converts degrees to a point on the sphere.

The setter methods return the builder, so calls can be chained.

## Color gradients

```python
from noisemaps.color_gradient import ColorGradient

gradient = ColorGradient().build_terrain_gradient()
gradient.get_color(0.1)
```

A gradient works as follows:

- A new `ColorGradient` is grayscale, running from black at -1 to white at 1.
- `get_color(pos)` interpolates linearly between the gradient's points.
- Positions outside the gradient's range get the color of the nearest end point.
- An empty gradient gives `(0, 0, 0, 0)`.

The gradient methods are:

- `clear_gradient()` removes all points.
- `add_gradient_point(pos, color)` adds a point, keeping the points in order. A point at an existing position is ignored.
- `build_grayscale_gradient()`, `build_terrain_gradient()` and `build_rainbow_gradient()` replace the points with a ready-made palette.

All of these methods change the gradient in place and return it. `interpolate_color(color0, color1, alpha)` blends two colors.

## Rendering

```python
from noisemaps.image_renderer import ImageRenderer, LightSource

renderer = ImageRenderer(
    gradient=gradient,
    light_source=LightSource(azimuth=45.0, elevation=30.0, contrast=2.0),
    light_enabled=True,
    wrap_enabled=False,
)
image = renderer.render(noise_map)
image.write_to_file("terrain.png")
```

`render(noise_map)` colors every value through the gradient.

When `light_enabled` is true, each pixel is shaded by the light source:

- The shading is computed from the pixel's four neighbours and scaled by the light's `brightness` and `color`.
- With `wrap_enabled`, neighbours at the edges wrap around to the opposite side.
- Without it, edge pixels use their own value in place of the missing neighbour.

`render_with_background(noise_map, background)` first blends the gradient color with the background image by the gradient color's alpha, then applies the light. The resulting alpha is the larger of the two.

`LightSource` has these attributes:

| Attribute    | Default              | Notes                  |
|--------------|----------------------|------------------------|
| `azimuth`    | 45.0                 | degrees                |
| `elevation`  | 45.0                 | degrees                |
| `brightness` | 1.0                  |                        |
| `contrast`   | 1.0                  | must not be negative; a negative value raises `ValueError` |
| `intensity`  | 1.0                  |                        |
| `color`      | `(255, 255, 255, 255)` |                      |

`calc_light_intensity(center, left, right, down, up)` gives the unscaled intensity for one point. It never returns less than zero.

`color_to_floats(color)` scales a color's channels to `[0, 1]`.

## What this package does not do

It does not generate noise. It has no Perlin, simplex, Worley or other noise functions; you supply the noise function as a callable.

It has no command-line program.

## Tests

```
pip install "noisemaps[test]"
pytest
```