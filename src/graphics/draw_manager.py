"""
draw_manager.py
---------------
Layered draw queue for the frame.

Responsibilities:
- Collect surfaces per layer during the draw phase
- Blit them in layer order onto the game surface
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Colors


class DrawManager:
    """Batches surface draws by layer and renders them in order."""

    def __init__(self, background=Colors.BACKGROUND):
        self.background = background
        self.surface_layers = {}  # {layer: [(surface, rect), ...]}
        self._layer_keys_cache = []
        self._layers_dirty = False

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for a new frame."""
        for layer_items in self.surface_layers.values():
            layer_items.clear()

    def queue_draw(self, surface, rect, layer=0):
        """
        Queue a surface for drawing.

        Args:
            surface: pygame.Surface to draw
            rect: Position rectangle
            layer: Render layer (lower = first)
        """
        if surface is None or rect is None:
            DebugLogger.warn(f"Skipped invalid draw call at layer {layer}", category="render")
            return

        if layer not in self.surface_layers:
            self.surface_layers[layer] = []
            self._layers_dirty = True

        self.surface_layers[layer].append((surface, rect))

    @property
    def queued_count(self) -> int:
        return sum(len(items) for items in self.surface_layers.values())

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface: pygame.Surface):
        """Fill the background and blit every queued layer in order."""
        target_surface.fill(self.background)

        if self._layers_dirty:
            self._layer_keys_cache = sorted(self.surface_layers)
            self._layers_dirty = False

        for layer in self._layer_keys_cache:
            items = self.surface_layers[layer]
            if items:
                target_surface.blits(items)

        DebugLogger.trace(f"Rendered {self.queued_count} surfaces", category="render")
