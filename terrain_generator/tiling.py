# terrain_generator/tiling.py

"""
================================================================================
RASTER TILING
================================================================================
Splits a raster into disjoint rectangular tiles so that independent workers
can classify them in parallel. Because no two tiles share a pixel, finished
tiles are written straight into the output arrays without any locking.

Data Contract:
---------------
- Inputs: Raster width/height and a tile size (positive integers).
- Outputs: Tiles in row-major order; assembled (height, width) arrays.
- Side Effects: None.
- Invariants: The tiles cover every pixel of the raster exactly once.
================================================================================
"""
from typing import Iterable, Iterator, NamedTuple, Optional

import numpy as np


class Tile(NamedTuple):
    x: int
    y: int
    width: int
    height: int


def iter_tiles(width: int, height: int, tile_size: int) -> Iterator[Tile]:
    """Yields the tiles covering a width x height raster, row by row. Edge tiles are clipped."""
    if tile_size <= 0:
        raise ValueError(f"tile_size must be positive, got {tile_size}")
    for y in range(0, height, tile_size):
        for x in range(0, width, tile_size):
            yield Tile(x, y, min(tile_size, width - x), min(tile_size, height - y))


def render_tile(generator, tile: Tile, mx: Optional[float] = None, my: Optional[float] = None) -> tuple:
    """Classifies one tile. Returns (tile, category_map, shade_map)."""
    category_map, shade_map = generator.classify_region(tile.x, tile.y, tile.width, tile.height, mx, my)
    return tile, category_map, shade_map


def assemble_tiles(width: int, height: int, results: Iterable[tuple]) -> tuple[np.ndarray, np.ndarray]:
    """
    Writes (tile, category_map, shade_map) results, in any order, into
    full-size raster arrays.
    """
    category_map = np.zeros((height, width), dtype=np.uint8)
    shade_map = np.zeros((height, width), dtype=np.int32)

    for tile, tile_categories, tile_shades in results:
        rows = slice(tile.y, tile.y + tile.height)
        cols = slice(tile.x, tile.x + tile.width)
        category_map[rows, cols] = tile_categories
        shade_map[rows, cols] = tile_shades

    return category_map, shade_map
