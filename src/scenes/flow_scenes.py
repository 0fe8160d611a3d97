"""
flow_scenes.py
--------------
Text-card screens that follow the title: main menu, game, pause, end.
"""

from src.core.runtime.app_state import AppState
from src.scenes.card_scene import CardScene


class MainMenuScene(CardScene):
    STATE = AppState.MAIN_MENU


class GameScene(CardScene):
    STATE = AppState.GAME


class PauseScene(CardScene):
    STATE = AppState.PAUSE


class EndScene(CardScene):
    """Last card; confirming it posts pygame.QUIT."""
    STATE = AppState.END
