"""
Tests for the offline terrain baker.
"""

import json
import logging

import numpy as np
import pytest
from PIL import Image

from bake_terrain import bake_terrain
from terrain_generator.generator import TerrainGenerator


PARAMS = {
    'width': 40,
    'height': 24,
    'tile_size': 16,
    'noise_multiplier_x': 0.06,
    'noise_multiplier_y': 0.04,
}


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({'terrain_generation_parameters': PARAMS}))
    return path


def _expected_colors():
    generator = TerrainGenerator(PARAMS, logging.getLogger("test_bake_terrain"))
    return generator.render(*generator.generate())


class TestBakeTerrain:
    """Test baking a raster to disk."""

    def test_in_process_bake_writes_png(self, config_path, tmp_path):
        output = tmp_path / "out" / "terrain.png"

        result = bake_terrain(str(config_path), str(output), num_workers=1)

        assert result == str(output)
        with Image.open(output) as img:
            assert img.size == (40, 24)
            pixels = np.array(img.convert('RGB'))
        np.testing.assert_array_equal(pixels, _expected_colors())

    def test_parallel_bake_matches_in_process_bake(self, config_path, tmp_path):
        serial = tmp_path / "serial.png"
        parallel = tmp_path / "parallel.png"

        bake_terrain(str(config_path), str(serial), num_workers=1)
        bake_terrain(str(config_path), str(parallel), num_workers=2)

        with Image.open(serial) as a, Image.open(parallel) as b:
            np.testing.assert_array_equal(np.array(a), np.array(b))

    def test_missing_config_returns_none(self, tmp_path, caplog):
        result = bake_terrain(str(tmp_path / "missing.json"), str(tmp_path / "terrain.png"))

        assert result is None
        assert "Failed to load or parse config file" in caplog.text
        assert not (tmp_path / "terrain.png").exists()

    def test_invalid_json_returns_none(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")

        assert bake_terrain(str(bad), str(tmp_path / "terrain.png")) is None
