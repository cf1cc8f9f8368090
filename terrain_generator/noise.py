# terrain_generator/noise.py

"""
================================================================================
GRADIENT NOISE UTILITIES
================================================================================
This module provides functions for generating 2D gradient (Perlin-style)
noise. It is designed to be a pure, stateless utility: there is no permutation
table, the gradient for every lattice point is derived from its coordinates.

Data Contract:
---------------
- Inputs:
    - ix, iy: Integer lattice coordinates (any sign or magnitude).
    - x, y: Real sample coordinates, or NumPy arrays of them.
    - rotation_width: Bit width the gradient hash rotates over.
- Outputs:
    - Unit gradient vectors, or noise values (nominally in the range [-1, 1]).
- Side Effects: None.
- Invariants: Identical inputs always give bit-identical outputs. The shape
  of the output array matches the shape of input x and y.
================================================================================
"""

import math

import numpy as np
from numba import njit

from . import config as DEFAULTS

_MUL_A = DEFAULTS.HASH_MULTIPLIER_A
_MUL_B = DEFAULTS.HASH_MULTIPLIER_B
_MUL_C = DEFAULTS.HASH_MULTIPLIER_C
_WORD_BITS = DEFAULTS.WORD_BITS
_WORD_MASK = DEFAULTS.WORD_MASK
_HASH_TO_ANGLE = DEFAULTS.HASH_TO_ANGLE
_ROTATION_WIDTH = DEFAULTS.ROTATION_WIDTH
_WORD_MODULUS = float(DEFAULTS.WORD_MASK + 1)

@njit
def rotate_left(value, shift, width):
    """
    Rotates a 32-bit word left by 'shift' within a 'width'-bit rotation.
    Both shift amounts are reduced modulo the 32-bit word size, so a width
    that does not match the word collapses to plain shifts.
    """
    left = shift % _WORD_BITS
    right = (width - shift) % _WORD_BITS
    return ((value << left) | (value >> right)) & _WORD_MASK

@njit
def _gradient_kernel(a, b, rotation_width):
    """Gradient for lattice coordinates already reduced to 32-bit words."""
    shift = rotation_width // 2

    a = (a * _MUL_A) & _WORD_MASK
    b ^= rotate_left(a, shift, rotation_width)
    b = (b * _MUL_B) & _WORD_MASK
    a ^= rotate_left(b, shift, rotation_width)
    a = (a * _MUL_C) & _WORD_MASK

    angle = a * _HASH_TO_ANGLE
    return math.cos(angle), math.sin(angle)

@njit
def _lattice_word(v):
    # v is an integral float of any magnitude; the hash only sees it mod 2^32.
    return int(v % _WORD_MODULUS)

@njit
def _corner_dot(ix, iy, x, y, rotation_width):
    gx, gy = _gradient_kernel(_lattice_word(ix), _lattice_word(iy), rotation_width)
    return (x - ix) * gx + (y - iy) * gy

def gradient_at(ix: int, iy: int, rotation_width: int = _ROTATION_WIDTH) -> tuple[float, float]:
    """
    Returns the unit gradient vector (gx, gy) for a lattice point.

    The two coordinates are mixed with wrapping 32-bit multiply/xor/rotate
    steps and the resulting unsigned hash is mapped onto an angle in
    [0, 2*pi]. Any Python int is accepted; only its low 32 bits matter.
    """
    return _gradient_kernel(int(ix) & _WORD_MASK, int(iy) & _WORD_MASK, int(rotation_width))

def dot_grid_gradient(ix: int, iy: int, x: float, y: float, rotation_width: int = _ROTATION_WIDTH) -> float:
    """Dot product of the lattice gradient with the offset from (ix, iy) to (x, y)."""
    gx, gy = gradient_at(ix, iy, rotation_width)
    return (x - ix) * gx + (y - iy) * gy

@njit
def interpolate(a0, a1, w):
    "Linear interpolation. No fade curve is applied to w."
    return a0 + (a1 - a0) * w

@njit
def sample_noise(x, y, rotation_width=_ROTATION_WIDTH):
    """
    Evaluates the noise field at (x, y).

    The four corners of the containing lattice cell are combined by
    interpolating along x first, then along y. Cells are found with a true
    floor, so they tile continuously across zero. Corners stay floats so
    coordinates beyond the int64 range still land on the right cell.
    """
    x0 = np.floor(x)
    x1 = x0 + 1.0
    y0 = np.floor(y)
    y1 = y0 + 1.0

    sx = x - x0
    sy = y - y0

    n0 = _corner_dot(x0, y0, x, y, rotation_width)
    n1 = _corner_dot(x1, y0, x, y, rotation_width)
    ix0 = interpolate(n0, n1, sx)

    n0 = _corner_dot(x0, y1, x, y, rotation_width)
    n1 = _corner_dot(x1, y1, x, y, rotation_width)
    ix1 = interpolate(n0, n1, sx)

    return interpolate(ix0, ix1, sy)

@njit
def sample_noise_grid(x, y, rotation_width=_ROTATION_WIDTH):
    """
    Samples the noise field at every point of two equally shaped 2D arrays.
    """
    rows, cols = x.shape
    total_noise = np.zeros((rows, cols))

    for i in range(rows):
        for j in range(cols):
            total_noise[i, j] = sample_noise(x[i, j], y[i, j], rotation_width)

    return total_noise
