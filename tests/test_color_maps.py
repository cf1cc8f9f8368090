"""
Tests for the color mapping boundary.
"""

import numpy as np
import pytest

from terrain_generator import color_maps
from terrain_generator.classifier import Classification, TerrainCategory


WATER = Classification(TerrainCategory.WATER)


class TestClassificationToColor:
    """Test single pixel colors."""

    def test_water_color(self):
        assert color_maps.classification_to_color(WATER) == (74, 185, 255)

    def test_land_color_adds_offsets(self):
        land = Classification(TerrainCategory.LAND, 127)
        assert color_maps.classification_to_color(land) == (177, 227, 177)

    @pytest.mark.parametrize("shade,expected", [
        (200, (250, 255, 250)),
        (254, (255, 255, 255)),
        (-80, (0, 20, 0)),
        (-200, (0, 0, 0)),
    ])
    def test_land_channels_are_clamped(self, shade, expected):
        land = Classification(TerrainCategory.LAND, shade)
        assert color_maps.classification_to_color(land) == expected

    def test_custom_palette(self):
        land = Classification(TerrainCategory.LAND, 10)
        assert color_maps.classification_to_color(WATER, water_color=(1, 2, 3)) == (1, 2, 3)
        assert color_maps.classification_to_color(land, land_offsets=(0, 5, 10)) == (10, 15, 20)


class TestTerrainColorArray:
    """Test array rendering."""

    def test_array_matches_single_pixel_colors(self):
        categories = np.array([[0, 1, 1], [1, 0, 1]], dtype=np.uint8)
        shades = np.array([[0, 127, 230], [-90, 0, 40]], dtype=np.int32)

        colors = color_maps.get_terrain_color_array(categories, shades)

        assert colors.shape == (2, 3, 3)
        assert colors.dtype == np.uint8
        for row in range(2):
            for col in range(3):
                category = TerrainCategory(int(categories[row, col]))
                shade = None if category == TerrainCategory.WATER else int(shades[row, col])
                expected = color_maps.classification_to_color(Classification(category, shade))
                assert tuple(colors[row, col]) == expected

    def test_all_channels_in_range(self):
        categories = np.ones((4, 4), dtype=np.uint8)
        shades = np.linspace(-500, 500, 16).astype(np.int32).reshape(4, 4)

        colors = color_maps.get_terrain_color_array(categories, shades)

        assert colors.min() >= 0
        assert colors.max() <= 255
        assert tuple(colors[0, 0]) == (0, 0, 0)
        assert tuple(colors[3, 3]) == (255, 255, 255)


class TestNoiseColorArray:
    """Test the grayscale noise view."""

    def test_noise_range_maps_to_grayscale(self):
        noise_values = np.array([[-1.0, 0.0, 1.0, 3.0]])

        colors = color_maps.get_noise_color_array(noise_values)

        assert colors.shape == (1, 4, 3)
        assert colors[0, :, 0].tolist() == [0, 127, 255, 255]
        assert np.all(colors[..., 0] == colors[..., 1])
        assert np.all(colors[..., 1] == colors[..., 2])
