"""
test_scene_manager.py
---------------------
Scene switching, deferred requests and resource teardown.
"""

from unittest.mock import MagicMock, patch

import pytest

from src.core.runtime.app_state import AppState
from src.core.services.scene_manager import SceneManager
from src.scenes.base_scene import BaseScene
from src.scenes.scene_state import SceneState


class RecordingScene(BaseScene):
    """Scene that logs lifecycle calls into a shared list."""

    log = None

    def on_load(self, **scene_data):
        self.scene_data = scene_data
        self.log.append(("load", type(self).__name__))

    def on_enter(self):
        self.element = self.resources.add(MagicMock())
        self.log.append(("enter", type(self).__name__))

    def on_exit(self):
        self.log.append(("exit", type(self).__name__))

    def update(self, dt):
        self.log.append(("update", type(self).__name__))

    def handle_event(self, event):
        self.scene_manager.request_scene(AppState.GAME)
        return True


@pytest.fixture
def manager():
    log = []
    classes = {}
    for state in AppState:
        classes[state] = type(f"{state.name.title()}Scene", (RecordingScene,), {"log": log})

    mgr = SceneManager(display_manager=None, draw_manager=MagicMock(), start_state=None)
    mgr.scene_classes = classes
    mgr.log = log
    return mgr


class TestSetScene:

    def test_no_scene_before_start(self, manager):
        assert manager.active_scene is None
        assert manager.state is None

    def test_set_scene_runs_load_then_enter(self, manager):
        manager.set_scene(AppState.TITLE, preset="quick")

        assert manager.state is AppState.TITLE
        assert manager.active_scene.state is SceneState.ACTIVE
        assert manager.active_scene.scene_data == {"preset": "quick"}
        assert manager.log == [("load", "TitleScene"), ("enter", "TitleScene")]

    def test_switch_exits_and_releases_old_scene(self, manager):
        manager.set_scene(AppState.TITLE)
        old = manager.active_scene
        element = old.element

        manager.set_scene(AppState.MAIN_MENU)

        assert old.state is SceneState.INACTIVE
        assert len(old.resources) == 0
        assert old.resources.released
        element.kill.assert_called_once()
        assert ("exit", "TitleScene") in manager.log
        assert manager.history == [AppState.TITLE, AppState.MAIN_MENU]

    def test_unknown_state_ignored(self, manager):
        manager.set_scene(AppState.TITLE)
        manager.set_scene("nowhere")
        assert manager.state is AppState.TITLE


class TestDeferredRequests:

    def test_request_applies_after_update(self, manager):
        manager.set_scene(AppState.TITLE)
        manager.request_scene(AppState.MAIN_MENU)
        assert manager.state is AppState.TITLE

        manager.update(0.1)

        assert manager.state is AppState.MAIN_MENU
        assert manager.log.index(("update", "TitleScene")) < manager.log.index(("exit", "TitleScene"))

    def test_request_from_event_applies_after_event(self, manager):
        manager.set_scene(AppState.TITLE)
        assert manager.handle_event(MagicMock()) is True
        assert manager.state is AppState.GAME

    def test_shutdown_releases_active_scene(self, manager):
        manager.set_scene(AppState.TITLE)
        scene = manager.active_scene
        manager.shutdown()

        assert manager.active_scene is None
        scene.element.kill.assert_called_once()


@pytest.mark.integration
class TestFullFlow:
    """Real scenes with text rendering replaced."""

    def test_instant_intro_reaches_main_menu_in_one_update(self, label_factory):
        with patch("src.scenes.title_scene.TextLabel", side_effect=label_factory), \
             patch("src.scenes.card_scene.TextLabel", side_effect=label_factory):
            mgr = SceneManager(display_manager=None, draw_manager=MagicMock(),
                               intro_preset="instant")
            title = mgr.active_scene
            assert mgr.state is AppState.TITLE

            mgr.update(0.016)

            assert mgr.state is AppState.MAIN_MENU
            assert title.sequencer is None
            assert len(title.resources) == 0

    def test_default_flow_through_every_screen(self, label_factory):
        import pygame

        confirm = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN)
        with patch("src.scenes.title_scene.TextLabel", side_effect=label_factory), \
             patch("src.scenes.card_scene.TextLabel", side_effect=label_factory), \
             patch("src.scenes.card_scene.pygame.event.post") as mock_post:
            mgr = SceneManager(display_manager=None, draw_manager=MagicMock(),
                               intro_preset="quick")

            for _ in range(int(3.0 / 0.016) + 10):
                mgr.update(0.016)
            assert mgr.state is AppState.MAIN_MENU

            for expected in (AppState.GAME, AppState.PAUSE, AppState.END):
                mgr.handle_event(confirm)
                assert mgr.state is expected

            mgr.handle_event(confirm)
            mock_post.assert_called_once()

        assert mgr.history == list(AppState)

    def test_zero_auto_advance_chains_one_screen_per_update(self, label_factory):
        screens = {state.value: {"auto_advance": 0} for state in AppState}
        with patch("src.scenes.title_scene.TextLabel", side_effect=label_factory), \
             patch("src.scenes.card_scene.TextLabel", side_effect=label_factory), \
             patch("src.scenes.card_scene.load_config", return_value=screens), \
             patch("src.scenes.card_scene.pygame.event.post") as mock_post:
            mgr = SceneManager(display_manager=None, draw_manager=MagicMock(),
                               intro_preset="instant")

            for expected in (AppState.MAIN_MENU, AppState.GAME, AppState.PAUSE, AppState.END):
                mgr.update(0.016)
                assert mgr.state is expected

            mock_post.assert_not_called()
            mgr.update(0.016)
            mock_post.assert_called_once()
