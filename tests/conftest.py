"""
conftest.py
-----------
Shared pytest configuration and fixtures for Tennis for Two tests.

Contains:
- Logger silencing for every test
- Common mock managers and a fake ServiceLocator
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Project root on the path so `src.` imports resolve without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.core.debug.debug_logger import LoggerConfig  # noqa: E402


# ===========================================================
# Autouse
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep console output out of test runs."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


# ===========================================================
# Common Mock Fixtures
# ===========================================================

@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with common methods."""
    draw_manager = MagicMock()
    draw_manager.queue_draw = MagicMock()
    draw_manager.render = MagicMock()
    return draw_manager


@pytest.fixture
def mock_services(mock_draw_manager):
    """ServiceLocator stand-in with a recording scene manager."""
    services = MagicMock()
    services.scene_manager = MagicMock()
    services.draw_manager = mock_draw_manager
    services.display_manager = MagicMock()
    services.get_global.side_effect = lambda name, default=None: default
    return services


@pytest.fixture
def label_factory():
    """Replacement for TextLabel that records constructed labels."""
    created = []

    def make_label(text, size, font_name=None, color=None, top=0.0,
                   centerx=640, visible=True, layer=100):
        label = MagicMock()
        label.text = text
        label.size = size
        label.top = top
        label.visible = visible
        label.rect.height = int(size)
        created.append(label)
        return label

    make_label.created = created
    return make_label


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "regression: marks tests as regression tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything outside integration tests as unit tests."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
