# terrain_generator/color_maps.py

"""
================================================================================
SHARED COLOR MAPPING UTILITIES
================================================================================
This module contains the color mapping constants and functions for converting
terrain classifications (and raw noise) into RGB color arrays.

It is the boundary where shades become displayable colors, so every channel
is clamped to [0, 255] here. It has no dependencies on Pygame, allowing it to
be used by both the interactive viewer and the offline baker script.
================================================================================
"""
import numpy as np

from . import config as DEFAULTS
from .classifier import Classification, TerrainCategory

COLOR_MAP_TERRAIN = {
    "water": DEFAULTS.WATER_COLOR,
    "land_offsets": DEFAULTS.LAND_COLOR_OFFSETS,
}

def _clamp_channel(value: int) -> int:
    return max(DEFAULTS.CHANNEL_MIN, min(DEFAULTS.CHANNEL_MAX, value))

def classification_to_color(
    classification: Classification,
    water_color: tuple = COLOR_MAP_TERRAIN["water"],
    land_offsets: tuple = COLOR_MAP_TERRAIN["land_offsets"]
) -> tuple:
    """Returns the clamped (r, g, b) color for a single classified pixel."""
    if classification.category == TerrainCategory.WATER:
        return tuple(water_color)
    return tuple(_clamp_channel(classification.shade + offset) for offset in land_offsets)

def get_terrain_color_array(
    category_map: np.ndarray,
    shade_map: np.ndarray,
    water_color: tuple = COLOR_MAP_TERRAIN["water"],
    land_offsets: tuple = COLOR_MAP_TERRAIN["land_offsets"]
) -> np.ndarray:
    """
    Converts row-major category and shade maps into a (height, width, 3)
    uint8 RGB array. Land channels are shade + offset, clamped to [0, 255].
    """
    land_mask = (category_map == TerrainCategory.LAND)[..., np.newaxis]

    land_colors = shade_map.astype(np.int32)[..., np.newaxis] + np.array(land_offsets, dtype=np.int32)
    land_colors = np.clip(land_colors, DEFAULTS.CHANNEL_MIN, DEFAULTS.CHANNEL_MAX)

    colors = np.where(land_mask, land_colors, np.array(water_color, dtype=np.int32))
    return colors.astype(np.uint8)

def get_noise_color_array(noise_values: np.ndarray) -> np.ndarray:
    """Converts raw noise [-1, 1] into a grayscale (height, width, 3) RGB array."""
    normalized = np.clip((noise_values + 1) / 2, 0.0, 1.0)
    gray_values = (normalized * 255).astype(np.uint8)

    return np.stack([gray_values] * 3, axis=-1)
