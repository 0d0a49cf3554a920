"""
Helper utilities for FanController.

This module provides foundational functions for locating the per-user
application data directory.
"""

import os
import logging
from typing import Optional
from pathlib import Path

from fancontroller import constants


def get_app_data_path() -> Path:
    """
    Retrieve the per-user application data directory path.

    Uses %APPDATA% on Windows, $XDG_CONFIG_HOME elsewhere, and ~/.config
    when neither is set. The directory is created and checked for writability.
    """
    logger: logging.Logger = logging.getLogger(__name__)
    base: Optional[str] = os.getenv("APPDATA") or os.getenv("XDG_CONFIG_HOME")
    if not base:
        base = os.path.join(os.path.expanduser("~"), ".config")
        logger.debug("APPDATA/XDG_CONFIG_HOME not set, using %s", base)
    path: Path = Path(base) / constants.app.APP_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
        test_file = path / f".fc_write_test_{os.getpid()}"
        with open(test_file, 'w') as f:
            f.write("test")
        test_file.unlink()
        logger.debug("App data path ensured and writable: %s", path)
        return path
    except PermissionError as e:
        logger.error("Permission denied creating/writing to app data directory %s: %s", path, e)
        raise PermissionError(f"Cannot access app data directory: {path}. Please check permissions.") from e
    except OSError as e:
        logger.error("Failed to create or verify app data directory %s: %s", path, e)
        raise OSError(f"Error with app data directory: {path}. Check disk space or path validity.") from e
