"""
app_state.py
------------
Global screen states and their fixed order.
"""

from enum import Enum


class AppState(Enum):
    """Full-screen states the application moves through."""
    TITLE = "title"
    MAIN_MENU = "main_menu"
    GAME = "game"
    PAUSE = "pause"
    END = "end"

    @property
    def next(self):
        """The state that follows this one, or None for END."""
        members = list(AppState)
        index = members.index(self)
        if index + 1 < len(members):
            return members[index + 1]
        return None


DEFAULT_STATE = AppState.TITLE
