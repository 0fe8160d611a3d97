"""
screen_resources.py
-------------------
Scene-owned display elements released together when the scene exits.
"""

from src.core.debug.debug_logger import DebugLogger


class ScreenResources:
    """
    Collection of display elements created by one scene.

    Elements are opaque; on release() each one gets kill() or release()
    called if it has one. Usable as a context manager.
    """

    def __init__(self, owner: str = "scene"):
        self.owner = owner
        self._elements = []
        self._released = False

    def add(self, element):
        """Track an element and hand it back for inline use."""
        if self._released:
            DebugLogger.warn(f"{self.owner}: adding element after release", category="scene")
            self._released = False
        self._elements.append(element)
        return element

    def __len__(self):
        return len(self._elements)

    def __iter__(self):
        return iter(list(self._elements))

    def __contains__(self, element):
        return element in self._elements

    @property
    def released(self) -> bool:
        return self._released

    def draw(self, draw_manager):
        """Queue every element that knows how to draw itself."""
        for element in self._elements:
            draw = getattr(element, "draw", None)
            if callable(draw):
                draw(draw_manager)

    def release(self):
        """Tear down every tracked element. Safe to call more than once."""
        if self._released:
            return

        count = len(self._elements)
        for element in reversed(self._elements):
            teardown = getattr(element, "kill", None) or getattr(element, "release", None)
            if callable(teardown):
                teardown()

        self._elements.clear()
        self._released = True
        DebugLogger.action(f"Released {count} elements for {self.owner}", category="scene")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False
