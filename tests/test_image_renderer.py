import math

import pytest

from noisemaps.color_gradient import ColorGradient
from noisemaps.image_renderer import ImageRenderer, LightSource, color_to_floats
from noisemaps.noise_image import NoiseImage
from noisemaps.noise_map import NoiseMap


def _filled_map(width, height, value):
    noise_map = NoiseMap(width, height)
    for y in range(height):
        for x in range(width):
            noise_map.set_value(x, y, value)
    return noise_map


def test_array_conversion():
    assert color_to_floats((0, 0, 0, 0)) == (0.0, 0.0, 0.0, 0.0)
    assert color_to_floats((255, 255, 255, 255)) == (1.0, 1.0, 1.0, 1.0)


def test_color_to_floats_rejects_wrong_length():
    with pytest.raises(ValueError):
        color_to_floats((1, 2, 3))


def test_flat_surface_intensity_is_ambient():
    light = LightSource()
    assert light.calc_light_intensity(0.0, 0.3, 0.3, 0.3, 0.3) == pytest.approx(0.5)


def test_intensity_never_negative():
    light = LightSource()
    assert light.calc_light_intensity(0.0, -10.0, 10.0, -10.0, 10.0) == 0.0


def test_azimuth_change_recomputes_angles():
    light = LightSource()
    light.calc_light_intensity(0.0, 0.0, 0.0, 0.0, 0.0)
    light.azimuth = 0.0
    light.elevation = 0.0
    assert light.calc_light_intensity(0.0, 1.0, 0.0, 5.0, 0.0) == pytest.approx(math.sqrt(2.0))


def test_negative_contrast_rejected():
    light = LightSource()
    with pytest.raises(ValueError):
        light.contrast = -0.5
    assert light.contrast == 1.0


def test_render_without_light_uses_gradient():
    renderer = ImageRenderer()
    image = renderer.render(_filled_map(3, 2, 2.0))
    assert image.size == (3, 2)
    assert image.get_value(0, 0) == (255, 255, 255, 255)
    assert image.get_value(2, 1) == (255, 255, 255, 255)


def test_render_low_end_is_black():
    image = ImageRenderer().render(_filled_map(2, 2, -1.0))
    assert image.get_value(1, 1) == (0, 0, 0, 255)


def test_render_with_light_on_flat_map_halves_brightness():
    renderer = ImageRenderer(light_enabled=True)
    image = renderer.render(_filled_map(3, 3, 2.0))
    assert image.get_value(1, 1) == (127, 127, 127, 255)


def test_render_light_brightness_clamps():
    renderer = ImageRenderer(light_source=LightSource(brightness=4.0), light_enabled=True)
    image = renderer.render(_filled_map(3, 3, 2.0))
    assert image.get_value(1, 1) == (255, 255, 255, 255)


def test_render_light_color_filters_channels():
    light = LightSource(brightness=4.0, color=(255, 0, 0, 255))
    renderer = ImageRenderer(light_source=light, light_enabled=True)
    image = renderer.render(_filled_map(3, 3, 2.0))
    assert image.get_value(1, 1) == (255, 0, 0, 255)


def test_render_empty_gradient_gives_transparent_black():
    gradient = ColorGradient().clear_gradient()
    image = ImageRenderer(gradient=gradient).render(_filled_map(2, 2, 0.0))
    assert image.get_value(0, 1) == (0, 0, 0, 0)


def test_render_with_background_same_colour():
    gradient = ColorGradient().clear_gradient()
    gradient.add_gradient_point(-1.0, (255, 255, 255, 100))
    gradient.add_gradient_point(1.0, (255, 255, 255, 100))
    background = NoiseImage(2, 2)
    for y in range(2):
        for x in range(2):
            background.set_value(x, y, (255, 255, 255, 200))
    renderer = ImageRenderer(gradient=gradient)
    image = renderer.render_with_background(_filled_map(2, 2, -5.0), background)
    assert image.get_value(1, 0) == (255, 255, 255, 200)


def test_render_with_background_alpha_is_max():
    renderer = ImageRenderer()
    background = NoiseImage(2, 2, border_color=(0, 0, 0, 0))
    image = renderer.render_with_background(_filled_map(2, 2, 2.0), background)
    assert image.get_value(0, 0)[3] == 255
    assert image.size == (2, 2)


def test_render_empty_map():
    image = ImageRenderer().render(NoiseMap())
    assert image.size == (0, 0)