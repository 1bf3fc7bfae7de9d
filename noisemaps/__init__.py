"""Noise maps, map builders, color gradients and image rendering for procedural noise."""

__version__ = "0.1.0"
__all__ = ["color_gradient", "image_renderer", "noise_image", "noise_map", "noise_map_builder"]