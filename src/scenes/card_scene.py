"""
card_scene.py
-------------
Full-screen text card that moves to the next global state on confirm.

Card text and timing come from src/config/screens.yaml, keyed by the
scene's STATE value.
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.app_state import AppState
from src.core.runtime.game_settings import Colors, Display, Flow, Fonts
from src.core.services.config_manager import load_config
from src.scenes.base_scene import BaseScene
from src.ui.text_label import TextLabel

CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_SPACE)

HEADING_SIZE = 72
LINE_SIZE = 32
LINE_SPACING = 16

DEFAULT_CARD = {"heading": "", "lines": [], "auto_advance": Flow.DEFAULT_AUTO_ADVANCE}


class CardScene(BaseScene):
    """Text card for one AppState; subclasses only set STATE."""

    STATE: AppState = None

    def __init__(self, services):
        super().__init__(services)
        self.card = dict(DEFAULT_CARD)
        self.timer = 0.0
        self._advanced = False

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def on_load(self, **scene_data):
        screens = load_config(Flow.SCREENS_FILE)
        self.card = {**DEFAULT_CARD, **(screens.get(self.STATE.value) or {})}
        self.card.update({k: v for k, v in scene_data.items() if k in DEFAULT_CARD})

    def on_enter(self):
        y = Display.HEIGHT / 3
        heading = self.resources.add(TextLabel(
            self.card["heading"], HEADING_SIZE, font_name=Fonts.TITLE, top=y
        ))
        y += heading.rect.height + LINE_SPACING * 2

        for line in self.card["lines"]:
            label = self.resources.add(TextLabel(
                str(line), LINE_SIZE, font_name=Fonts.BODY, color=Colors.HINT, top=y
            ))
            y += label.rect.height + LINE_SPACING

    # ===========================================================
    # Update / Input
    # ===========================================================

    def update(self, dt: float):
        """Count towards auto_advance; None waits for input, 0 leaves on the first update."""
        delay = self.card.get("auto_advance")
        if delay is None or self._advanced:
            return
        if dt > 0:
            self.timer += dt
        if self.timer >= float(delay):
            self.advance()

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN and event.key in CONFIRM_KEYS:
            self.advance()
            return True
        return False

    def advance(self):
        """Move to the next state in the global order, or quit after the last."""
        if self._advanced:
            return
        self._advanced = True

        next_state = self.STATE.next
        if next_state is None:
            DebugLogger.action("Final screen confirmed, quitting", category="scene")
            pygame.event.post(pygame.event.Event(pygame.QUIT))
            return
        self.scene_manager.request_scene(next_state)
