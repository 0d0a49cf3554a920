"""
Configuration management for FanController.

This module provides a ConfigManager for loading, validating, and saving application
settings to a JSON file. It ensures data integrity through atomic writes, default value
merging, and strict validation, so a hand-edited or corrupted file never reaches the
dial. It also owns the application's logging setup.
"""

import os
import json
import logging
import logging.handlers
import re
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .helpers import get_app_data_path
from fancontroller import constants


class ObfuscatingFormatter(logging.Formatter):
    """
    A logging formatter that redacts user-specific paths (home directory,
    application data directory) from all log records, including tracebacks.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._path_regexes: List[re.Pattern] = []
        self._setup_paths()

    def _setup_paths(self) -> None:
        """Normalizes and pre-compiles regex patterns for the paths to redact."""
        potential_paths = [str(Path.home())]
        for env_var in ("APPDATA", "XDG_CONFIG_HOME"):
            value = os.getenv(env_var)
            if value:
                potential_paths.append(value)

        paths_to_obfuscate = set()
        for path_str in potential_paths:
            if not path_str or len(path_str) <= 3:  # Ignore trivial paths such as "/" or "C:\"
                continue
            paths_to_obfuscate.add(os.path.normcase(os.path.normpath(path_str)))

        # Longest first, so a nested path is redacted before its parent.
        sorted_paths = sorted(paths_to_obfuscate, key=len, reverse=True)
        self._path_regexes = [re.compile(re.escape(p), re.IGNORECASE) for p in sorted_paths]

    def format(self, record: logging.LogRecord) -> str:
        """Formats the log record and then redacts user paths from the final string."""
        sanitized_message = super().format(record)
        for pattern in self._path_regexes:
            sanitized_message = pattern.sub("<REDACTED_PATH>", sanitized_message)
        return sanitized_message


class ConfigError(Exception):
    """Custom exception for configuration-related errors, such as I/O or permission issues."""


class ConfigManager:
    """
    Manages loading, saving, and validation of FanController's configuration.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        """
        Initializes the ConfigManager.
        """
        self.config_path = Path(config_path or self.get_base_dir() / constants.config.defaults.CONFIG_FILENAME)
        self.logger = logging.getLogger("FanController.Config")
        self._last_config: Optional[Dict[str, Any]] = None

    @classmethod
    def get_base_dir(cls) -> Path:
        """Returns the per-user directory holding the config and log files."""
        return Path(get_app_data_path())

    @classmethod
    def get_log_file_path(cls) -> Path:
        """Returns the absolute path to the log file."""
        return cls.get_base_dir() / constants.logs.LOG_FILENAME

    @classmethod
    def setup_logging(cls, console_level: int = constants.logs.CONSOLE_LOG_LEVEL) -> None:
        """
        Initializes logging with handlers for both a file and the console.
        """
        try:
            logger = logging.getLogger(constants.app.APP_NAME)
            # The logger passes everything; each handler filters for itself.
            logger.setLevel(logging.DEBUG)
            logger.handlers.clear()

            file_handler = logging.handlers.RotatingFileHandler(
                cls.get_log_file_path(),
                maxBytes=constants.logs.MAX_LOG_SIZE,
                backupCount=constants.logs.LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setLevel(constants.logs.FILE_LOG_LEVEL)
            file_handler.setFormatter(ObfuscatingFormatter(
                constants.logs.LOG_FORMAT,
                datefmt=constants.logs.LOG_DATE_FORMAT
            ))
            logger.addHandler(file_handler)

            console_handler = logging.StreamHandler()
            console_handler.setLevel(console_level)
            console_handler.setFormatter(logging.Formatter(constants.logs.CONSOLE_FORMAT))
            logger.addHandler(console_handler)

            logger.info("Logging initialized successfully.")
        except OSError as e:
            logging.basicConfig(level=logging.ERROR)
            logging.error("Failed to initialize file logging, falling back to basic console: %s", e)

    def _validate_numeric(self, key: str, value: Any, default: Any, min_v: float, max_v: float) -> Union[int, float]:
        """Validates a numeric value is within a given range."""
        try:
            if isinstance(value, bool):
                raise ValueError("Booleans are not numbers here")
            num_value = float(value)
            if not (min_v <= num_value <= max_v):
                raise ValueError("Value out of range")
            return int(num_value) if isinstance(default, int) else num_value
        except (TypeError, ValueError):
            self.logger.warning(constants.config.messages.INVALID_NUMERIC.format(key=key, value=value, default=default))
            return default

    def _validate_font_weight(self, key: str, value: Any, default: int) -> int:
        """Validates a font weight, accepting "normal" and "bold" as well as 1-1000."""
        if isinstance(value, str):
            named = {"normal": constants.fonts.WEIGHT_NORMAL, "bold": constants.fonts.WEIGHT_BOLD}
            value = named.get(value.strip().lower(), value)
        return int(self._validate_numeric(key, value, default, 1, 1000))

    def _validate_color_hex(self, key: str, value: Any, default: str) -> str:
        """Validates a value is a valid 6-digit hex color string."""
        if value is None:
            return default
        if isinstance(value, str) and re.fullmatch(r"#[0-9a-fA-F]{6}", value):
            return value
        self.logger.warning(constants.config.messages.INVALID_COLOR.format(key=key, value=value, default=default))
        return default

    def _validate_string(self, key: str, value: Any, default: str) -> str:
        """Validates a value is a string."""
        if isinstance(value, str):
            return value
        self.logger.warning(constants.config.messages.INVALID_STRING.format(key=key, value=value, default=default))
        return default

    def _validate_config(self, loaded_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validates the configuration, merges it with defaults for missing keys,
        and sanitizes all values.
        """
        defaults = constants.config.defaults
        default_ref = defaults.DEFAULT_CONFIG
        validated = default_ref.copy()
        validated.update(loaded_config)

        unknown_keys = set(loaded_config.keys()) - set(default_ref.keys())
        if unknown_keys:
            self.logger.warning("Ignoring unknown config fields: %s", ", ".join(sorted(unknown_keys)))

        for key in defaults.COLOR_KEYS:
            validated[key] = self._validate_color_hex(key, validated.get(key), default_ref[key])

        validated["label_font_family"] = self._validate_string("label_font_family", validated.get("label_font_family"), default_ref["label_font_family"])
        validated["label_font_size"] = self._validate_numeric("label_font_size", validated.get("label_font_size"), default_ref["label_font_size"], constants.fonts.LABEL_FONT_SIZE_MIN, constants.fonts.LABEL_FONT_SIZE_MAX)
        validated["label_font_weight"] = self._validate_font_weight("label_font_weight", validated.get("label_font_weight"), default_ref["label_font_weight"])
        for key in ("window_width", "window_height"):
            validated[key] = self._validate_numeric(key, validated.get(key), default_ref[key], defaults.MIN_WINDOW_SIZE, defaults.MAX_WINDOW_SIZE)

        supported_languages = list(constants.i18n.SUPPORTED_LANGUAGES)
        if validated.get("language") not in [None] + supported_languages:
            self.logger.warning(constants.config.messages.INVALID_LANGUAGE.format(value=validated.get("language")))
            validated["language"] = None

        return {key: validated[key] for key in default_ref if key in validated}

    def load(self) -> Dict[str, Any]:
        """Loads and validates the configuration from the file."""
        if not self.config_path.exists():
            self.logger.info("Configuration file not found. Creating with default settings.")
            return self.reset_to_defaults()
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError:
            self.logger.error("Configuration file is corrupt. Backing it up and using defaults.")
            try:
                corrupt_path = self.config_path.with_name(f"{self.config_path.name}.corrupt")
                shutil.move(self.config_path, corrupt_path)
            except OSError:
                self.logger.exception("Failed to back up corrupt config file.")
            return self.reset_to_defaults()
        except OSError as e:
            msg = f"OS error reading config file {self.config_path}: {e}"
            self.logger.critical(msg)
            raise ConfigError(msg) from e

        if not isinstance(config, dict):
            self.logger.error("Configuration file does not hold an object. Using defaults.")
            return self.reset_to_defaults()

        validated_config = self._validate_config(config)
        self._last_config = validated_config.copy()
        return validated_config

    def save(self, config: Dict[str, Any]) -> None:
        """Atomically saves the provided configuration to the file."""
        validated_config = self._validate_config(config)

        config_to_save = {key: value for key, value in validated_config.items() if value is not None}
        last_config_to_compare = {k: v for k, v in self._last_config.items() if v is not None} if self._last_config else None

        if last_config_to_compare == config_to_save:
            self.logger.debug("Skipping save, configuration is unchanged.")
            return

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", delete=False, dir=self.config_path.parent, encoding="utf-8"
            ) as temp_f:
                json.dump(config_to_save, temp_f, indent=4)
                temp_path = temp_f.name
            shutil.move(temp_path, self.config_path)
            self._last_config = validated_config.copy()
            self.logger.debug("Configuration saved successfully to %s", self.config_path)
        except OSError as e:
            msg = f"Failed to save configuration to {self.config_path}: {e}"
            self.logger.error(msg)
            raise ConfigError(msg) from e

    def reset_to_defaults(self) -> Dict[str, Any]:
        """Resets the configuration to factory defaults and saves it."""
        self.logger.info("Resetting configuration to default values.")
        defaults = constants.config.defaults.DEFAULT_CONFIG.copy()
        self.save(defaults)
        return defaults
