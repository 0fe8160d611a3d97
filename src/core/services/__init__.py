"""
Core services exports.

Provides configuration loading and the service container. The scene
manager is imported from its own module to keep scenes free of cycles.
"""

from src.core.services.config_manager import load_config
from src.core.services.service_locator import ServiceLocator

__all__ = [
    # Config
    'load_config',
    # Services
    'ServiceLocator',
]
