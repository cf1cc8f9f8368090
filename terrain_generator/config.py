# terrain_generator/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the terrain
generator. These values are used if they are not explicitly provided by the
user's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC RASTER.
Instead, pass a configuration dictionary to the TerrainGenerator instance.
================================================================================
"""
import math

# --- Gradient Hash ---
# Odd multiplicative constants used to mix the two lattice coordinates.
HASH_MULTIPLIER_A = 3284157443
HASH_MULTIPLIER_B = 1911520717
HASH_MULTIPLIER_C = 2048419325

# All hash arithmetic wraps modulo 2^32.
WORD_BITS = 32
WORD_MASK = 0xFFFFFFFF

# Maps the unsigned 32-bit hash onto one full turn.
HASH_TO_ANGLE = math.pi / 2147483647.0

# The legacy hash declares a 256-bit rotation width but shifts 32-bit words,
# so both rotations collapse to the identity (128 mod 32 == 0).
ROTATION_WIDTH = 8 * 32
# Width used when 'legacy_rotation' is disabled: a real 32-bit rotate by 16.
MATCHED_ROTATION_WIDTH = WORD_BITS
DEFAULT_LEGACY_ROTATION = True

# --- Raster ---
DEFAULT_WIDTH = 512
DEFAULT_HEIGHT = 512

# --- Frequency Multipliers ---
# Pixel coordinates are scaled by these before the water test. The viewer
# sliders start from these values.
DEFAULT_NOISE_MULTIPLIER_X = 0.05
DEFAULT_NOISE_MULTIPLIER_Y = 0.05
MULTIPLIER_RANGE = (0.0, 0.2)

# --- Terrain Classification ---
# Tested in this order; a sample below the first matching threshold is water.
TERRAIN_THRESHOLDS = (-0.3, -0.4, -0.5)

# Land shading always samples at this fixed scale, independent of the
# multipliers.
SHADE_NOISE_SCALE = 0.01
# shade = floor((noise + 1) * SHADE_SCALE)
SHADE_SCALE = 127

# --- Colors ---
WATER_COLOR = (74, 185, 255)       # #4AB9FF
LAND_COLOR_OFFSETS = (50, 100, 50)  # Added to the shade per channel
CHANNEL_MIN = 0
CHANNEL_MAX = 255

# --- Rendering & Performance ---
# Side length of the square tiles handed to worker processes.
DEFAULT_TILE_SIZE = 128
