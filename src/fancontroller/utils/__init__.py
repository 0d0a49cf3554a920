"""
Utilities submodule for FanController.

Provides configuration management, the dial renderer and helper functions.
"""

from .config import ConfigManager, ConfigError
from .helpers import get_app_data_path

__all__ = ["ConfigManager", "ConfigError", "get_app_data_path"]
