import pytest

from noisemaps.color_gradient import ColorGradient, interpolate_color


def test_linerp_color_1():
    assert interpolate_color((0, 0, 255, 0), (0, 255, 255, 0), 0.5) == (0, 127, 255, 0)


def test_color_gradient_1():
    gradient = (
        ColorGradient()
        .clear_gradient()
        .add_gradient_point(0.0, (0, 0, 0, 0))
        .add_gradient_point(1.0, (255, 255, 255, 255))
    )
    assert gradient.get_color(0.5) == (127, 127, 127, 127)


def test_interpolate_endpoints():
    assert interpolate_color((10, 20, 30, 40), (200, 210, 220, 230), 0.0) == (10, 20, 30, 40)
    assert interpolate_color((0, 0, 0, 0), (255, 255, 255, 255), 1.0) == (255, 255, 255, 255)


def test_interpolate_rejects_wrong_channel_count():
    with pytest.raises(ValueError):
        interpolate_color((0, 0, 0), (0, 0, 0, 0), 0.5)


def test_default_is_grayscale():
    gradient = ColorGradient()
    assert gradient.get_color(-5.0) == (0, 0, 0, 255)
    assert gradient.get_color(5.0) == (255, 255, 255, 255)
    assert gradient.get_color(-1.0) == (0, 0, 0, 255)
    assert gradient.get_color(0.0) == (127, 127, 127, 255)


def test_empty_gradient_is_transparent_black():
    assert ColorGradient().clear_gradient().get_color(0.3) == (0, 0, 0, 0)


def test_points_added_out_of_order_are_sorted():
    gradient = (
        ColorGradient()
        .clear_gradient()
        .add_gradient_point(1.0, (255, 255, 255, 255))
        .add_gradient_point(0.5, (255, 0, 0, 255))
        .add_gradient_point(0.0, (0, 0, 0, 255))
    )
    assert gradient.get_color(0.5) == (255, 0, 0, 255)
    assert gradient.get_color(0.0) == (0, 0, 0, 255)


def test_duplicate_position_is_ignored():
    gradient = (
        ColorGradient()
        .clear_gradient()
        .add_gradient_point(0.0, (0, 0, 0, 255))
        .add_gradient_point(1.0, (255, 255, 255, 255))
        .add_gradient_point(0.0, (9, 9, 9, 9))
    )
    assert gradient.get_color(0.0) == (0, 0, 0, 255)


def test_domain_extends_below_and_above():
    gradient = ColorGradient().add_gradient_point(-3.0, (1, 2, 3, 4)).add_gradient_point(
        3.0, (5, 6, 7, 8)
    )
    assert gradient.get_color(-10.0) == (1, 2, 3, 4)
    assert gradient.get_color(10.0) == (5, 6, 7, 8)
    assert gradient.get_color(-3.0) == (1, 2, 3, 4)


def test_terrain_gradient_control_points():
    gradient = ColorGradient().build_terrain_gradient()
    assert gradient.get_color(-1.0) == (0, 0, 0, 255)
    assert gradient.get_color(0.0) == (70, 120, 60, 255)
    assert gradient.get_color(4096.0 / 16384.0) == (128, 128, 128, 255)


def test_rainbow_gradient_control_points():
    gradient = ColorGradient().build_rainbow_gradient()
    assert gradient.get_color(-1.0) == (255, 0, 0, 255)
    assert gradient.get_color(0.0) == (0, 255, 255, 255)
    assert gradient.get_color(0.3) == (0, 0, 255, 255)


def test_rebuilding_replaces_points():
    gradient = ColorGradient().build_rainbow_gradient().build_grayscale_gradient()
    assert gradient.get_color(-1.0) == (0, 0, 0, 255)