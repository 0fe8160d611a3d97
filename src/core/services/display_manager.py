"""
display_manager.py
------------------
Window creation and presentation of the fixed-size game surface.

Responsibilities:
- Create the window (windowed or fullscreen)
- Keep the 16:9 game surface centered with letterboxing
- Scale and flip once per frame
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Colors, Display


class DisplayManager:
    """Renders a logical game surface into the window, preserving aspect."""

    def __init__(self, game_width=Display.WIDTH, game_height=Display.HEIGHT):
        DebugLogger.init_entry("DisplayManager")

        self.game_width = game_width
        self.game_height = game_height
        self.game_surface = pygame.Surface((game_width, game_height))

        self.window = None
        self.is_fullscreen = False
        self.scale = 1.0
        self.offset = (0, 0)
        self.scaled_size = (game_width, game_height)

        self._create_window(fullscreen=False)
        DebugLogger.init_sub(f"Display Mode: Windowed ({game_width}x{game_height})")

    # ===========================================================
    # Window Management
    # ===========================================================

    def toggle_fullscreen(self):
        self._create_window(fullscreen=not self.is_fullscreen)
        state = "ON" if self.is_fullscreen else "OFF"
        DebugLogger.state(f"Toggled fullscreen → {state}", category="display")

    def _create_window(self, fullscreen: bool):
        if fullscreen:
            self.window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.window = pygame.display.set_mode((self.game_width, self.game_height))
        self.is_fullscreen = fullscreen
        self._calculate_scale()

    def _calculate_scale(self):
        """Fit the game surface inside the window and center it."""
        window_w, window_h = self.window.get_size()
        self.scale = min(window_w / self.game_width, window_h / self.game_height)
        self.scaled_size = (int(self.game_width * self.scale), int(self.game_height * self.scale))
        self.offset = (
            (window_w - self.scaled_size[0]) // 2,
            (window_h - self.scaled_size[1]) // 2,
        )
        DebugLogger.trace(f"Scale={self.scale:.3f}, Offset={self.offset}", category="display")

    # ===========================================================
    # Rendering Pipeline
    # ===========================================================

    def get_game_surface(self) -> pygame.Surface:
        """Logical game surface (always Display.WIDTH x Display.HEIGHT)."""
        return self.game_surface

    def render(self):
        """Scale the game surface into the window and flip."""
        self.window.fill(Colors.BACKGROUND)
        if self.scale == 1.0:
            self.window.blit(self.game_surface, self.offset)
        else:
            scaled = pygame.transform.scale(self.game_surface, self.scaled_size)
            self.window.blit(scaled, self.offset)
        pygame.display.flip()
