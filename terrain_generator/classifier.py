# terrain_generator/classifier.py

"""
================================================================================
TERRAIN CLASSIFICATION
================================================================================
This module turns pixel coordinates into terrain decisions. A pixel is water
when its noise sample, taken at the pixel coordinate scaled by the per-axis
multipliers, falls below one of an ordered list of thresholds. Every other
pixel is land and carries a shade taken from a second noise sample at a fixed
low frequency.

Data Contract:
---------------
- Inputs:
    - x, y: Pixel coordinates.
    - mx, my: Frequency multipliers, passed explicitly on every call.
    - thresholds: Ordered sequence of floats. Order is significant and the
      list may be empty.
- Outputs:
    - A Classification (category plus shade), or row-major category and
      shade arrays for a rectangular region.
- Side Effects: None.
- Invariants: The shade is never clamped here; mapping it to a displayable
  color range is the renderer's job (see color_maps).
================================================================================
"""

from enum import IntEnum
from typing import NamedTuple, Optional, Sequence

import numpy as np
from numba import njit

from . import config as DEFAULTS
from .noise import sample_noise


class TerrainCategory(IntEnum):
    WATER = 0
    LAND = 1


class Classification(NamedTuple):
    """The terrain decision for one pixel. 'shade' is None for water."""
    category: TerrainCategory
    shade: Optional[int] = None

    @property
    def is_water(self) -> bool:
        return self.category == TerrainCategory.WATER


_WATER = int(TerrainCategory.WATER)
_LAND = int(TerrainCategory.LAND)
_SHADE_SCALE = DEFAULTS.SHADE_SCALE
_ROTATION_WIDTH = DEFAULTS.ROTATION_WIDTH

@njit
def _first_threshold_below(value, thresholds):
    """Index of the first threshold 'value' is strictly below, or -1."""
    for i in range(thresholds.shape[0]):
        if value < thresholds[i]:
            return i
    return -1

@njit
def _shade_kernel(x, y, shade_noise_scale, rotation_width):
    noise_val = sample_noise(x * shade_noise_scale, y * shade_noise_scale, rotation_width)
    return int(np.floor((noise_val + 1) * _SHADE_SCALE))

@njit
def _classify_kernel(x, y, mx, my, thresholds, shade_noise_scale, rotation_width):
    # The water sample is identical for every threshold, so take it once.
    value = sample_noise(x * mx, y * my, rotation_width)
    if _first_threshold_below(value, thresholds) >= 0:
        return _WATER, 0
    return _LAND, _shade_kernel(x, y, shade_noise_scale, rotation_width)

@njit
def _classify_grid_kernel(x_offset, y_offset, width, height, mx, my, thresholds, shade_noise_scale, rotation_width):
    categories = np.zeros((height, width), dtype=np.uint8)
    shades = np.zeros((height, width), dtype=np.int32)

    for row in range(height):
        y = y_offset + row
        for col in range(width):
            x = x_offset + col
            category, shade = _classify_kernel(x, y, mx, my, thresholds, shade_noise_scale, rotation_width)
            categories[row, col] = category
            shades[row, col] = shade

    return categories, shades

def _as_threshold_array(thresholds: Sequence[float]) -> np.ndarray:
    return np.asarray(thresholds, dtype=np.float64).reshape(-1)

def matched_threshold(value: float, thresholds: Sequence[float]) -> Optional[int]:
    """
    Tests an already sampled noise value against the thresholds in list
    order and returns the index of the first one it falls strictly below,
    or None when it is below none of them.
    """
    index = _first_threshold_below(float(value), _as_threshold_array(thresholds))
    return None if index < 0 else int(index)

def is_water(value: float, thresholds: Sequence[float]) -> bool:
    return matched_threshold(value, thresholds) is not None

def shade_value(
    x: float,
    y: float,
    shade_noise_scale: float = DEFAULTS.SHADE_NOISE_SCALE,
    rotation_width: int = _ROTATION_WIDTH
) -> int:
    """floor((noise(x * scale, y * scale) + 1) * 127), unclamped."""
    return int(_shade_kernel(float(x), float(y), float(shade_noise_scale), int(rotation_width)))

def classify(
    x: float,
    y: float,
    mx: float,
    my: float,
    thresholds: Sequence[float] = DEFAULTS.TERRAIN_THRESHOLDS,
    shade_noise_scale: float = DEFAULTS.SHADE_NOISE_SCALE,
    rotation_width: int = _ROTATION_WIDTH
) -> Classification:
    """
    Classifies the pixel at (x, y).

    The noise value at (x * mx, y * my) is checked against each threshold in
    order; the first threshold it is strictly below makes the pixel water.
    Otherwise the pixel is land and its shade is sampled at the fixed
    shade_noise_scale, ignoring the multipliers.
    """
    category, shade = _classify_kernel(
        float(x), float(y), float(mx), float(my),
        _as_threshold_array(thresholds),
        float(shade_noise_scale), int(rotation_width)
    )
    if category == _WATER:
        return Classification(TerrainCategory.WATER)
    return Classification(TerrainCategory.LAND, int(shade))

def classify_grid(
    width: int,
    height: int,
    mx: float,
    my: float,
    thresholds: Sequence[float] = DEFAULTS.TERRAIN_THRESHOLDS,
    x_offset: int = 0,
    y_offset: int = 0,
    shade_noise_scale: float = DEFAULTS.SHADE_NOISE_SCALE,
    rotation_width: int = _ROTATION_WIDTH
) -> tuple[np.ndarray, np.ndarray]:
    """
    Classifies a width x height block of pixels starting at
    (x_offset, y_offset).

    Returns row-major (height, width) arrays: the TerrainCategory of every
    pixel as uint8, and the land shade as int32 (0 for water pixels).
    """
    return _classify_grid_kernel(
        int(x_offset), int(y_offset), int(width), int(height),
        float(mx), float(my),
        _as_threshold_array(thresholds),
        float(shade_noise_scale), int(rotation_width)
    )
