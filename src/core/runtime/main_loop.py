"""
main_loop.py
------------
Core game loop orchestrating timing, events, updates, and rendering.

Responsibilities:
- Initialize pygame and core systems
- Maintain fixed timestep update loop
- Route events to the active scene
"""

import argparse

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Display, Intro, Physics
from src.core.services.display_manager import DisplayManager
from src.core.services.scene_manager import SceneManager
from src.graphics.draw_manager import DrawManager


class MainLoop:
    """
    Core runtime controller managing the game's main loop.

    Implements a fixed timestep for logic with one render per frame.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, intro_preset: str = Intro.DEFAULT_PRESET):
        """Initialize pygame and all core systems."""
        DebugLogger.section("Initializing MainLoop")

        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window caption: {Display.CAPTION}")

        self.display = DisplayManager(Display.WIDTH, Display.HEIGHT)
        self.draw_manager = DrawManager()
        self.scenes = SceneManager(self.display, self.draw_manager, intro_preset=intro_preset)

        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("Main Loop Runtime")
        DebugLogger.init_sub("Game Clock Initialized")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """
        Execute main loop until quit.

        Uses a fixed timestep for updates with an accumulator; rendering
        happens once per frame after all updates.
        """
        DebugLogger.section("Game Loop")

        fixed_dt = Physics.FIXED_DT
        accumulator = 0.0

        while self.running:
            # Frame timing with safety clamp
            frame_time = self.clock.tick(Display.FPS) / 1000.0
            frame_time = min(frame_time, Physics.MAX_FRAME_TIME)
            accumulator += frame_time

            self._handle_events()
            if not self.running:
                break

            while accumulator >= fixed_dt:
                self.scenes.update(fixed_dt)
                accumulator -= fixed_dt

            self._draw()

        self.scenes.shutdown()
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """Quit, global hotkeys, then the active scene."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                self.display.toggle_fullscreen()
                continue

            self.scenes.handle_event(event)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        self.draw_manager.clear()
        self.scenes.draw(self.draw_manager)
        self.draw_manager.render(self.display.get_game_surface())
        self.display.render()


def main(argv=None):
    """Console entry point."""
    parser = argparse.ArgumentParser(description=Display.CAPTION)
    parser.add_argument("--intro", default=Intro.DEFAULT_PRESET,
                        help="Intro preset from intro_presets.yaml")
    args = parser.parse_args(argv)

    MainLoop(intro_preset=args.intro).run()
    return 0
