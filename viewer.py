# viewer.py

"""
================================================================================
INTERACTIVE TERRAIN VIEWER
================================================================================
A Pygame host for the terrain generator. Two sliders set the X and Y noise
multipliers and the Generate button re-renders the raster with the current
values. Slider movement alone never triggers a render.

Controls:
    TAB     Toggle between the terrain and raw noise views.
    ESC     Quit.

Usage:
    python viewer.py [--config path/to/config.json]
================================================================================
"""
import sys
import json
import logging
import argparse
import numpy as np
import pygame
import pygame_gui

from terrain_generator.generator import TerrainGenerator
from terrain_generator import color_maps
from terrain_generator import config as DEFAULTS

# --- UI Constants ---
UI_PANEL_WIDTH = 320
UI_ELEMENT_HEIGHT = 25
UI_SLIDER_HEIGHT = 25
UI_PADDING = 10
UI_BUTTON_HEIGHT = 40

BACKGROUND_COLOR = (10, 10, 20)
VIEW_MODES = ["terrain", "noise"]

class ViewerApp:
    """The main application class for the terrain viewer."""
    def __init__(self, config_path: str = None):
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        self.logger = logging.getLogger(__name__)

        terrain_params = self._load_config(config_path)
        self.generator = TerrainGenerator(config=terrain_params, logger=self.logger)

        # Multipliers are owned by the host and handed to the generator on each render.
        self.multiplier_x = self.generator.settings['noise_multiplier_x']
        self.multiplier_y = self.generator.settings['noise_multiplier_y']
        self.view_mode_index = 0

        self.logger.info("Initializing Pygame...")
        pygame.init()

        self.screen_width = self.generator.width + UI_PANEL_WIDTH
        self.screen_height = max(self.generator.height, 6 * UI_ELEMENT_HEIGHT + UI_BUTTON_HEIGHT)
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height))
        pygame.display.set_caption("Perlin Terrain Viewer")

        self.clock = pygame.time.Clock()
        self.ui_manager = pygame_gui.UIManager((self.screen_width, self.screen_height))
        self._setup_ui()

        self.terrain_surface = None
        self.is_running = True
        self.generate()

    def _load_config(self, config_path: str) -> dict:
        """Loads generation parameters from a JSON file, or defaults if none is given."""
        if config_path is None:
            self.logger.info("No configuration file given. Using default settings.")
            return {}

        self.logger.info(f"Loading configuration from {config_path}")
        try:
            with open(config_path, 'r') as f:
                return json.load(f).get('terrain_generation_parameters', {})
        except FileNotFoundError:
            self.logger.critical(f"Configuration file not found at {config_path}. Exiting.")
            sys.exit(1)
        except json.JSONDecodeError:
            self.logger.critical(f"Error decoding JSON from {config_path}. Exiting.")
            sys.exit(1)

    def _setup_ui(self):
        """Creates the side panel with the two multiplier sliders and the Generate button."""
        panel_rect = pygame.Rect(self.generator.width, 0, UI_PANEL_WIDTH, self.screen_height)
        self.ui_panel = pygame_gui.elements.UIPanel(
            relative_rect=panel_rect,
            manager=self.ui_manager,
            starting_height=1
        )

        current_y = UI_PADDING
        element_width = UI_PANEL_WIDTH - (3 * UI_PADDING)

        self.multiplier_x_label = pygame_gui.elements.UILabel(
            relative_rect=pygame.Rect(UI_PADDING, current_y, element_width, UI_ELEMENT_HEIGHT),
            text=self._slider_label("X", self.multiplier_x),
            manager=self.ui_manager,
            container=self.ui_panel
        )
        current_y += UI_ELEMENT_HEIGHT

        self.multiplier_x_slider = pygame_gui.elements.UIHorizontalSlider(
            relative_rect=pygame.Rect(UI_PADDING, current_y, element_width, UI_SLIDER_HEIGHT),
            start_value=self.multiplier_x,
            value_range=DEFAULTS.MULTIPLIER_RANGE,
            manager=self.ui_manager,
            container=self.ui_panel
        )
        current_y += UI_SLIDER_HEIGHT + UI_PADDING

        self.multiplier_y_label = pygame_gui.elements.UILabel(
            relative_rect=pygame.Rect(UI_PADDING, current_y, element_width, UI_ELEMENT_HEIGHT),
            text=self._slider_label("Y", self.multiplier_y),
            manager=self.ui_manager,
            container=self.ui_panel
        )
        current_y += UI_ELEMENT_HEIGHT

        self.multiplier_y_slider = pygame_gui.elements.UIHorizontalSlider(
            relative_rect=pygame.Rect(UI_PADDING, current_y, element_width, UI_SLIDER_HEIGHT),
            start_value=self.multiplier_y,
            value_range=DEFAULTS.MULTIPLIER_RANGE,
            manager=self.ui_manager,
            container=self.ui_panel
        )
        current_y += UI_SLIDER_HEIGHT + UI_PADDING

        self.generate_button = pygame_gui.elements.UIButton(
            relative_rect=pygame.Rect(UI_PADDING, current_y, element_width, UI_BUTTON_HEIGHT),
            text="Generate",
            manager=self.ui_manager,
            container=self.ui_panel
        )

    @staticmethod
    def _slider_label(axis: str, value: float) -> str:
        return f"Noise Multiplier {axis}: {value:.3f}"

    def generate(self):
        """Re-renders the raster for the current view mode and multipliers."""
        view_mode = VIEW_MODES[self.view_mode_index]
        if view_mode == "terrain":
            category_map, shade_map = self.generator.generate(self.multiplier_x, self.multiplier_y)
            colors = self.generator.render(category_map, shade_map)
        else:
            noise_map = self.generator.get_noise_map(self.multiplier_x, self.multiplier_y)
            colors = color_maps.get_noise_color_array(noise_map)

        # surfarray expects (width, height, 3).
        self.terrain_surface = pygame.surfarray.make_surface(np.transpose(colors, (1, 0, 2)))

    def run(self):
        """The main application loop."""
        while self.is_running:
            time_delta = self.clock.tick(60) / 1000.0
            self.handle_events()
            self.ui_manager.update(time_delta)
            self.draw()

        self.logger.info("Exiting viewer.")
        pygame.quit()

    def handle_events(self):
        """Processes user input and UI events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.is_running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_TAB:
                self.view_mode_index = (self.view_mode_index + 1) % len(VIEW_MODES)
                self.logger.info(f"View mode: {VIEW_MODES[self.view_mode_index]}")
                self.generate()
            elif event.type == pygame_gui.UI_HORIZONTAL_SLIDER_MOVED:
                if event.ui_element == self.multiplier_x_slider:
                    self.multiplier_x = float(event.value)
                    self.multiplier_x_label.set_text(self._slider_label("X", self.multiplier_x))
                elif event.ui_element == self.multiplier_y_slider:
                    self.multiplier_y = float(event.value)
                    self.multiplier_y_label.set_text(self._slider_label("Y", self.multiplier_y))
            elif event.type == pygame_gui.UI_BUTTON_PRESSED:
                if event.ui_element == self.generate_button:
                    self.logger.info("Event: 'Generate' button pressed.")
                    self.generate()

            self.ui_manager.process_events(event)

    def draw(self):
        """Handles all rendering for the application."""
        self.screen.fill(BACKGROUND_COLOR)
        if self.terrain_surface is not None:
            self.screen.blit(self.terrain_surface, (0, 0))

        pygame.display.set_caption(
            f"Perlin Terrain Viewer | View: {VIEW_MODES[self.view_mode_index].title()} | "
            f"Multipliers: ({self.multiplier_x:.3f}, {self.multiplier_y:.3f})"
        )
        self.ui_manager.draw_ui(self.screen)
        pygame.display.flip()

if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Interactive viewer for the Perlin Terrain Generator.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON configuration file.")
    args = parser.parse_args()

    app = ViewerApp(config_path=args.config)
    app.run()
