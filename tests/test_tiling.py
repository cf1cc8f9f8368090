"""
Tests for raster tiling and tile assembly.
"""

import logging
import random

import numpy as np
import pytest

from terrain_generator import tiling
from terrain_generator.generator import TerrainGenerator


@pytest.fixture
def generator():
    return TerrainGenerator({'width': 37, 'height': 21}, logging.getLogger("test_tiling"))


class TestIterTiles:
    """Test tile partitioning."""

    def test_tiles_cover_raster_exactly_once(self):
        coverage = np.zeros((21, 37), dtype=int)
        for tile in tiling.iter_tiles(37, 21, 8):
            coverage[tile.y:tile.y + tile.height, tile.x:tile.x + tile.width] += 1

        assert np.all(coverage == 1)

    def test_edge_tiles_are_clipped(self):
        tiles = list(tiling.iter_tiles(10, 5, 4))

        assert len(tiles) == 6
        assert tiles[0] == tiling.Tile(0, 0, 4, 4)
        assert tiles[2] == tiling.Tile(8, 0, 2, 4)
        assert tiles[-1] == tiling.Tile(8, 4, 2, 1)

    def test_row_major_order(self):
        tiles = list(tiling.iter_tiles(8, 8, 4))
        assert [(t.x, t.y) for t in tiles] == [(0, 0), (4, 0), (0, 4), (4, 4)]

    def test_tile_larger_than_raster(self):
        assert list(tiling.iter_tiles(3, 2, 100)) == [tiling.Tile(0, 0, 3, 2)]

    def test_invalid_tile_size(self):
        with pytest.raises(ValueError):
            list(tiling.iter_tiles(10, 10, 0))


class TestAssembly:
    """Test that tiled rendering reproduces a full render."""

    def test_render_tile(self, generator):
        tile = tiling.Tile(5, 3, 6, 4)
        result_tile, categories, shades = tiling.render_tile(generator, tile, 0.05, 0.05)

        assert result_tile == tile
        assert categories.shape == (4, 6)
        assert shades.shape == (4, 6)

    @pytest.mark.parametrize("tile_size", [1, 5, 8, 64])
    def test_assembled_tiles_equal_full_render(self, generator, tile_size):
        category_map, shade_map = generator.generate(0.08, 0.06)

        tiles = list(tiling.iter_tiles(generator.width, generator.height, tile_size))
        random.Random(tile_size).shuffle(tiles)
        results = (tiling.render_tile(generator, tile, 0.08, 0.06) for tile in tiles)
        assembled_categories, assembled_shades = tiling.assemble_tiles(generator.width, generator.height, results)

        np.testing.assert_array_equal(assembled_categories, category_map)
        np.testing.assert_array_equal(assembled_shades, shade_map)
