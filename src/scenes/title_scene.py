"""
title_scene.py
--------------
Title screen: plays the intro reveal, then hands over to the main menu.

Responsibilities
----------------
- Build the title/subtitle labels and an IntroSequencer on entry.
- Copy the sequencer's outputs onto the labels every update.
- Request the main menu when the intro completes or is skipped.
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.app_state import AppState
from src.core.runtime.game_settings import Fonts, Intro
from src.scenes.base_scene import BaseScene
from src.scenes.intro.intro_sequencer import IntroSequencer
from src.scenes.intro.sequence_config import load_preset
from src.ui.text_label import TextLabel

SKIP_KEYS = (pygame.K_ESCAPE, pygame.K_RETURN, pygame.K_SPACE)


class TitleScene(BaseScene):
    """Scene that owns exactly one IntroSequencer for its lifetime."""

    def __init__(self, services):
        super().__init__(services)
        self.config = None
        self.sequencer = None
        self.title = None
        self.subtitle = None

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def on_load(self, preset: str = None, config=None, **scene_data):
        """
        Args:
            preset: Name of an intro preset in intro_presets.yaml
            config: Ready-made SequenceConfig (takes precedence over preset)
        """
        if config is None:
            preset = preset or self.services.get_global("intro_preset", Intro.DEFAULT_PRESET)
            config = load_preset(preset)
        self.config = config

    def on_enter(self):
        if self.config is None:
            self.on_load()

        self.title = self.resources.add(TextLabel(
            Intro.TITLE_TEXT,
            self.config.title_size,
            font_name=Fonts.TITLE,
            top=self.config.start_y,
        ))
        self.subtitle = self.resources.add(TextLabel(
            Intro.SUBTITLE_TEXT,
            self.config.subtitle_size,
            font_name=Fonts.BODY,
            top=self.config.subtitle_y,
            visible=False,
        ))

        self.sequencer = IntroSequencer(self.config, on_complete=self._on_intro_complete)

    def on_exit(self):
        self.sequencer = None

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, dt: float):
        if self.sequencer is None:
            return

        self.sequencer.update(dt)
        self._apply_outputs()

    def _apply_outputs(self):
        self.title.top = self.sequencer.title_y
        if self.sequencer.subtitle_visible:
            self.subtitle.visible = True

    def _on_intro_complete(self):
        self.scene_manager.request_scene(AppState.MAIN_MENU)

    # ===========================================================
    # Input
    # ===========================================================

    def handle_event(self, event):
        if not Intro.SKIPPABLE or self.sequencer is None:
            return False
        if event.type == pygame.KEYDOWN and event.key in SKIP_KEYS:
            DebugLogger.action(f"Intro skipped during {self.sequencer.phase.name}", category="intro")
            self.sequencer = None
            self.scene_manager.request_scene(AppState.MAIN_MENU)
            return True
        return False
