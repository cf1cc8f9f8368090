# bake_terrain.py

"""
================================================================================
OFFLINE TERRAIN BAKER SCRIPT
================================================================================
This script is a command-line tool for rendering a terrain raster to a PNG
image ("baking"). The raster is split into disjoint tiles which are classified
in parallel worker processes; the main process writes each finished tile into
its own slice of the output, so no synchronization is needed.

Usage:
    python bake_terrain.py --config path/to/your/config.json --output terrain.png
================================================================================
"""
import os
import sys
import json
import logging
import argparse
import time
import multiprocessing
from typing import Optional
import numpy as np
from PIL import Image
from tqdm import tqdm

# Add project root to Python path to allow importing from terrain_generator
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from terrain_generator.generator import TerrainGenerator
from terrain_generator import tiling

# --- Global variables for worker processes ---
worker_generator = None
worker_multipliers = (None, None)

def init_worker(config, multipliers):
    """Initializes the global state for each worker process."""
    global worker_generator, worker_multipliers

    worker_logger = logging.getLogger(f"Worker-{os.getpid()}")
    worker_generator = TerrainGenerator(config=config, logger=worker_logger)
    worker_multipliers = multipliers

def process_tile(tile):
    """Classifies a single tile inside a worker process."""
    mx, my = worker_multipliers
    return tiling.render_tile(worker_generator, tile, mx, my)

def save_terrain_image(color_array: np.ndarray, output_path: str) -> str:
    """Saves a (height, width, 3) RGB array as a PNG with Pillow."""
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    Image.fromarray(color_array, 'RGB').save(output_path, 'PNG')
    return output_path

# --- Main Baking Function ---
def bake_terrain(config_path: str, output_path: str = "terrain.png", num_workers: Optional[int] = None) -> Optional[str]:
    """
    Loads a configuration, classifies the whole raster tile by tile and saves
    the colored result. Returns the output path, or None if the configuration
    could not be loaded.
    """
    logger = logging.getLogger("Baker")

    # 1. --- Load Configuration ---
    logger.info(f"Loading configuration from: {config_path}")
    try:
        with open(config_path, 'r') as f:
            config = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.critical(f"Failed to load or parse config file: {e}")
        return None

    terrain_params = config.get('terrain_generation_parameters', {})

    # 2. --- Initialize a TerrainGenerator for main thread info ---
    main_generator = TerrainGenerator(config=terrain_params, logger=logger)
    width, height = main_generator.width, main_generator.height
    multipliers = (
        main_generator.settings['noise_multiplier_x'],
        main_generator.settings['noise_multiplier_y']
    )

    tasks = list(tiling.iter_tiles(width, height, main_generator.settings['tile_size']))
    if num_workers is None:
        num_workers = max(1, multiprocessing.cpu_count() - 1)

    logger.info(f"Starting bake for a {width}x{height} raster ({len(tasks)} tiles)...")
    start_time = time.perf_counter()

    # 3. --- Main Baking Loop ---
    if num_workers <= 1:
        logger.info("Baking in-process.")
        results = (tiling.render_tile(main_generator, tile, *multipliers) for tile in tqdm(tasks, desc="Baking Tiles"))
        category_map, shade_map = tiling.assemble_tiles(width, height, results)
    else:
        logger.info(f"Using {num_workers} worker processes.")
        with multiprocessing.Pool(processes=num_workers, initializer=init_worker, initargs=(terrain_params, multipliers)) as pool:
            results_iterator = pool.imap_unordered(process_tile, tasks)
            category_map, shade_map = tiling.assemble_tiles(
                width, height,
                tqdm(results_iterator, total=len(tasks), desc="Baking Tiles")
            )

    # --- Finalization ---
    color_array = main_generator.render(category_map, shade_map)
    save_terrain_image(color_array, output_path)

    end_time = time.perf_counter()
    logger.info(f"Baking complete! Total time: {end_time - start_time:.2f} seconds.")
    logger.info(f"Water coverage: {main_generator.water_fraction(category_map):.1%}")
    logger.info(f"Terrain image saved to: {output_path}")
    return output_path


# --- Command-Line Interface ---
if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Offline Terrain Baker for the Perlin Terrain Generator.")
    parser.add_argument(
        "--config",
        type=str,
        required=True,
        help="Path to the JSON configuration file for the terrain to be baked."
    )
    parser.add_argument(
        "--output",
        type=str,
        default="terrain.png",
        help="Path of the PNG file to write."
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of worker processes (default: CPU count - 1)."
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    if bake_terrain(args.config, args.output, args.workers) is None:
        sys.exit(1)
