"""
scene_manager.py
----------------
Owns the global screen state and the active scene.

Scenes are registered per AppState. Switching scenes runs the old scene's
on_exit() and releases its ScreenResources before the new scene enters.
Requests made from inside update() or handle_event() are deferred until
that call returns so a scene is never torn down mid-tick.
"""

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.app_state import AppState, DEFAULT_STATE
from src.core.services.service_locator import ServiceLocator
from src.scenes.scene_state import SceneState

# Scene classes
from src.scenes.title_scene import TitleScene
from src.scenes.flow_scenes import MainMenuScene, GameScene, PauseScene, EndScene


class SceneManager:
    """Coordinates scene transitions and delegates update/draw/events."""

    def __init__(self, display_manager, draw_manager, intro_preset=None,
                 start_state=DEFAULT_STATE):
        """
        Args:
            display_manager: DisplayManager (may be None in headless use)
            draw_manager: DrawManager used by scenes
            intro_preset: Preset name for the Title scene (None = default)
            start_state: First scene to activate
        """
        self.display = display_manager
        self.draw_manager = draw_manager
        DebugLogger.init_entry("SceneManager")

        self.services = ServiceLocator(self)
        self.services.register_managers(display=display_manager, draw=draw_manager)
        if intro_preset:
            self.services.register_global("intro_preset", intro_preset)

        self.scene_classes = {
            AppState.TITLE: TitleScene,
            AppState.MAIN_MENU: MainMenuScene,
            AppState.GAME: GameScene,
            AppState.PAUSE: PauseScene,
            AppState.END: EndScene,
        }
        DebugLogger.init_sub(f"Registered scenes: {[s.name for s in self.scene_classes]}")

        self._active_scene = None
        self._active_state = None
        self._pending = None
        self.history = []

        if start_state is not None:
            self.set_scene(start_state)

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def active_scene(self):
        return self._active_scene

    @property
    def state(self):
        """Current AppState (None before the first scene)."""
        return self._active_state

    # ===========================================================
    # Scene Control
    # ===========================================================

    def request_scene(self, state, **scene_data):
        """Queue a switch to run once the current update/event returns."""
        if self._pending is not None:
            DebugLogger.warn(
                f"Replacing pending switch to {self._pending[0]} with {state}", category="scene"
            )
        self._pending = (state, scene_data)

    def set_scene(self, state, **scene_data):
        """
        Switch to another scene immediately.

        Args:
            state: Target AppState
            **scene_data: Passed to the new scene's on_load()
        """
        if state not in self.scene_classes:
            DebugLogger.warn(f"Unknown scene: '{state}'", category="scene")
            return

        prev = self._active_state.name if self._active_state else "None"
        DebugLogger.system(f"Transitioning [{prev}] → [{state.name}]", category="scene")

        # 1. Create and load new scene
        new_scene = self.scene_classes[state](self.services)
        new_scene.state = SceneState.LOADING
        new_scene.on_load(**scene_data)

        # 2. Exit old scene and release everything it created
        self._exit_active()

        # 3. Activate new scene
        self._active_scene = new_scene
        self._active_state = state
        self.history.append(state)
        new_scene.state = SceneState.ACTIVE
        DebugLogger.section(f"Active Scene: {state.name}")
        new_scene.on_enter()

    def _exit_active(self):
        if not self._active_scene:
            return
        DebugLogger.state(f"Exiting {self._active_state.name}", category="scene")
        self._active_scene.state = SceneState.EXITING
        self._active_scene.on_exit()
        self._active_scene.release_resources()
        self._active_scene.state = SceneState.INACTIVE

    def _apply_pending(self):
        if self._pending is None:
            return
        state, scene_data = self._pending
        self._pending = None
        self.set_scene(state, **scene_data)

    def shutdown(self):
        """Exit the active scene; used when the main loop stops."""
        self._pending = None
        self._exit_active()
        self._active_scene = None
        self._active_state = None

    # ===========================================================
    # Event, Update, Draw Delegation
    # ===========================================================

    def handle_event(self, event):
        """Forward event to active scene. Returns True if it was consumed."""
        consumed = False
        if self._active_scene and self._active_scene.state == SceneState.ACTIVE:
            consumed = bool(self._active_scene.handle_event(event))
        self._apply_pending()
        return consumed

    def update(self, dt: float):
        if self._active_scene and self._active_scene.state == SceneState.ACTIVE:
            self._active_scene.update(dt)
        self._apply_pending()

    def draw(self, draw_manager):
        if self._active_scene:
            self._active_scene.draw(draw_manager)
