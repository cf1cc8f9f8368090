# terrain_generator/__init__.py

# The public API of the terrain generator package.

from .noise import gradient_at, dot_grid_gradient, interpolate, sample_noise, sample_noise_grid
from .classifier import Classification, TerrainCategory, classify, classify_grid, is_water
from .generator import TerrainGenerator

__all__ = [
    "gradient_at",
    "dot_grid_gradient",
    "interpolate",
    "sample_noise",
    "sample_noise_grid",
    "Classification",
    "TerrainCategory",
    "classify",
    "classify_grid",
    "is_water",
    "TerrainGenerator",
]
