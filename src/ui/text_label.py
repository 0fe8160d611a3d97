"""
text_label.py
-------------
Single-line text element positioned by its top edge and horizontal center.
"""

import os
from typing import Dict, Tuple

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Colors, Display, Fonts, Layers


class TextLabel:
    """Rendered text with a cached surface, visibility flag and draw layer."""

    _font_cache: Dict[Tuple[str, int], pygame.font.Font] = {}

    def __init__(self, text: str, size: int, font_name: str = Fonts.BODY,
                 color=Colors.TEXT, top: float = 0.0, centerx: float = Display.WIDTH / 2,
                 visible: bool = True, layer: int = Layers.TEXT):
        self.text = text
        self.size = int(size)
        self.font_name = font_name
        self.color = color
        self.visible = visible
        self.layer = layer
        self.alive = True

        self.surface = self._get_font(font_name, self.size).render(text, True, color)
        self.rect = self.surface.get_rect()
        self.rect.centerx = int(centerx)
        self.top = top

    # ===========================================================
    # Fonts
    # ===========================================================

    @classmethod
    def _get_font(cls, font_name: str, size: int) -> pygame.font.Font:
        key = (font_name, size)
        if key in cls._font_cache:
            return cls._font_cache[key]

        path = os.path.join(Fonts.DIR, font_name)
        try:
            font = pygame.font.Font(path, size)
        except FileNotFoundError:
            DebugLogger.warn(f"Missing font file at {path}. Using default font.", category="render")
            font = pygame.font.Font(None, size)

        cls._font_cache[key] = font
        return font

    @classmethod
    def clear_font_cache(cls):
        cls._font_cache.clear()

    # ===========================================================
    # Position
    # ===========================================================

    @property
    def top(self) -> float:
        return self._top

    @top.setter
    def top(self, value: float):
        self._top = value
        self.rect.top = round(value)

    # ===========================================================
    # Lifecycle / Rendering
    # ===========================================================

    def draw(self, draw_manager):
        if self.alive and self.visible:
            draw_manager.queue_draw(self.surface, self.rect, layer=self.layer)

    def kill(self):
        """Release the surface; the label draws nothing afterwards."""
        self.alive = False
        self.visible = False
        self.surface = None
