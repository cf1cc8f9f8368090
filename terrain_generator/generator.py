# terrain_generator/generator.py

"""
================================================================================
CORE TERRAIN GENERATOR
================================================================================
This module contains the main TerrainGenerator class, responsible for
classifying a whole raster into water and land and turning the result into
colors.

Data Contract:
---------------
- Inputs (on initialization):
    - config (dict): A dictionary of parameters which can override the
      internal defaults. Expected keys include 'width', 'height',
      'noise_multiplier_x', 'thresholds', etc.
    - logger: A configured Python logging object for runtime messages.
- Outputs (from methods):
    - Row-major NumPy arrays of terrain categories, shades, noise or colors.
- Side Effects: Logs messages using the provided logger.
- Invariants: Given the same configuration and multipliers, the output is
  deterministic. Multipliers may be passed fresh on every call; nothing is
  cached against them.
================================================================================
"""

import logging
import time
from typing import Iterator, Optional

import numpy as np

from . import config as DEFAULTS
from . import classifier
from . import color_maps
from . import noise

class TerrainGenerator:
    """
    Generates terrain rasters from the gradient noise field.
    This class is backend-only and does not handle any visualization.
    """
    def __init__(self, config: dict, logger: logging.Logger):
        """
        Initializes the terrain generator.

        Args:
            config (dict): User-defined parameters to override defaults.
            logger (logging.Logger): The logger instance for all output.
        """
        self.logger = logger
        self.user_config = config
        self.logger.info("TerrainGenerator initializing...")

        # --- Consolidate Configuration ---
        self.settings = {
            'width': self.user_config.get('width', DEFAULTS.DEFAULT_WIDTH),
            'height': self.user_config.get('height', DEFAULTS.DEFAULT_HEIGHT),
            'noise_multiplier_x': self.user_config.get('noise_multiplier_x', DEFAULTS.DEFAULT_NOISE_MULTIPLIER_X),
            'noise_multiplier_y': self.user_config.get('noise_multiplier_y', DEFAULTS.DEFAULT_NOISE_MULTIPLIER_Y),
            'thresholds': self.user_config.get('thresholds', DEFAULTS.TERRAIN_THRESHOLDS),
            'shade_noise_scale': self.user_config.get('shade_noise_scale', DEFAULTS.SHADE_NOISE_SCALE),
            'legacy_rotation': self.user_config.get('legacy_rotation', DEFAULTS.DEFAULT_LEGACY_ROTATION),
            'tile_size': self.user_config.get('tile_size', DEFAULTS.DEFAULT_TILE_SIZE),
            'water_color': tuple(self.user_config.get('water_color', DEFAULTS.WATER_COLOR)),
            'land_color_offsets': tuple(self.user_config.get('land_color_offsets', DEFAULTS.LAND_COLOR_OFFSETS)),
        }

        for key in ('width', 'height', 'tile_size'):
            value = self.settings[key]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"'{key}' must be a positive integer, got {value!r}")

        # --- Public Properties for easy access ---
        self.width = self.settings['width']
        self.height = self.settings['height']
        self.thresholds = np.asarray(self.settings['thresholds'], dtype=np.float64).reshape(-1)
        if self.settings['legacy_rotation']:
            self.rotation_width = DEFAULTS.ROTATION_WIDTH
        else:
            self.rotation_width = DEFAULTS.MATCHED_ROTATION_WIDTH

        self.logger.info(f"TerrainGenerator initialized: {self.width}x{self.height} pixels")
        self.logger.debug(
            f"Thresholds: {self.thresholds.tolist()}, rotation width: {self.rotation_width}, "
            f"default multipliers: ({self.settings['noise_multiplier_x']}, {self.settings['noise_multiplier_y']})"
        )

    def _resolve_multipliers(self, mx: Optional[float], my: Optional[float]) -> tuple[float, float]:
        """Falls back to the configured multipliers for any that are not given."""
        if mx is None:
            mx = self.settings['noise_multiplier_x']
        if my is None:
            my = self.settings['noise_multiplier_y']
        return float(mx), float(my)

    def classify_pixel(self, x: float, y: float, mx: Optional[float] = None, my: Optional[float] = None) -> classifier.Classification:
        """Classifies a single pixel with this generator's thresholds."""
        mx, my = self._resolve_multipliers(mx, my)
        return classifier.classify(
            x, y, mx, my, self.thresholds,
            shade_noise_scale=self.settings['shade_noise_scale'],
            rotation_width=self.rotation_width
        )

    def classify_region(self, x_offset: int, y_offset: int, width: int, height: int,
                        mx: Optional[float] = None, my: Optional[float] = None) -> tuple[np.ndarray, np.ndarray]:
        """
        Classifies an arbitrary rectangle of pixels. This is the single
        authoritative path used by full renders, row iteration and tiles.
        """
        mx, my = self._resolve_multipliers(mx, my)
        return classifier.classify_grid(
            width, height, mx, my, self.thresholds,
            x_offset=x_offset, y_offset=y_offset,
            shade_noise_scale=self.settings['shade_noise_scale'],
            rotation_width=self.rotation_width
        )

    def generate(self, mx: Optional[float] = None, my: Optional[float] = None) -> tuple[np.ndarray, np.ndarray]:
        """
        Classifies the whole raster and returns the (height, width) category
        and shade maps.
        """
        mx, my = self._resolve_multipliers(mx, my)
        self.logger.info(f"Generating {self.width}x{self.height} terrain with multipliers ({mx}, {my})...")

        start_time = time.perf_counter()
        category_map, shade_map = self.classify_region(0, 0, self.width, self.height, mx, my)
        elapsed = time.perf_counter() - start_time

        self.logger.info(
            f"Terrain generated in {elapsed:.3f} seconds "
            f"({self.water_fraction(category_map):.1%} water)"
        )
        return category_map, shade_map

    def iter_rows(self, mx: Optional[float] = None, my: Optional[float] = None) -> Iterator[tuple[int, np.ndarray, np.ndarray]]:
        """
        Lazily yields (row, categories, shades) for each raster row, top to
        bottom. A caller cancels generation by simply stopping iteration.
        """
        mx, my = self._resolve_multipliers(mx, my)
        for row in range(self.height):
            category_row, shade_row = self.classify_region(0, row, self.width, 1, mx, my)
            yield row, category_row[0], shade_row[0]

    def get_noise_map(self, mx: Optional[float] = None, my: Optional[float] = None) -> np.ndarray:
        """Samples the raw noise field over the raster at the scaled pixel coordinates."""
        mx, my = self._resolve_multipliers(mx, my)
        x_coords, y_coords = self.get_coordinate_grid(0, 0, self.width, self.height)
        return noise.sample_noise_grid(x_coords * mx, y_coords * my, self.rotation_width)

    def render(self, category_map: np.ndarray, shade_map: np.ndarray) -> np.ndarray:
        """Converts classification maps into a (height, width, 3) RGB array."""
        return color_maps.get_terrain_color_array(
            category_map, shade_map,
            water_color=self.settings['water_color'],
            land_offsets=self.settings['land_color_offsets']
        )

    @staticmethod
    def water_fraction(category_map: np.ndarray) -> float:
        if category_map.size == 0:
            return 0.0
        return float(np.count_nonzero(category_map == classifier.TerrainCategory.WATER)) / category_map.size

    @staticmethod
    def get_coordinate_grid(x_offset, y_offset, width, height):
        """
        Generates the pixel coordinate grid for a rectangle, as float arrays
        of shape (height, width).
        """
        x_coords = np.arange(x_offset, x_offset + width, dtype=np.float64)
        y_coords = np.arange(y_offset, y_offset + height, dtype=np.float64)

        return np.meshgrid(x_coords, y_coords)
