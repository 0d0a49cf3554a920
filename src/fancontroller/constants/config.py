"""
Constants for application configuration defaults and constraints.
"""
from typing import Final, Dict, Any

from .color import color
from .fonts import fonts

class ConfigMessages:
    """Log message templates for configuration validation."""
    INVALID_NUMERIC: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'"
    INVALID_COLOR: Final[str] = "Invalid color '{value}' for {key}, resetting to default '{default}'"
    INVALID_LANGUAGE: Final[str] = "Unsupported language '{value}', falling back to system locale"
    INVALID_STRING: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not isinstance(value, str) or not value:
                    raise ValueError(f"ConfigMessages.{attr_name} must be a non-empty string.")


class ConfigConstants:
    """Defines default values and constraints for all application settings."""
    # --- Dial colors; each speed falls back to a neutral gray when unset ---
    DEFAULT_FAN_SPEED_COLOR: Final[str] = color.DIAL_UNSET_COLOR

    # --- Label font ---
    DEFAULT_LABEL_FONT_FAMILY: Final[str] = fonts.DEFAULT_FONT
    DEFAULT_LABEL_FONT_SIZE: Final[int] = 55
    DEFAULT_LABEL_FONT_WEIGHT: Final[int] = fonts.WEIGHT_BOLD

    # --- Main window ---
    DEFAULT_WINDOW_WIDTH: Final[int] = 600
    DEFAULT_WINDOW_HEIGHT: Final[int] = 600
    MIN_WINDOW_SIZE: Final[int] = 200
    MAX_WINDOW_SIZE: Final[int] = 4000

    CONFIG_FILENAME: Final[str] = "FanController_Config.json"

    COLOR_KEYS: Final[tuple] = ("fan_speed_low_color", "fan_speed_medium_color", "fan_speed_high_color")

    DEFAULT_CONFIG: Final[Dict[str, Any]] = {
        "language": None,
        "fan_speed_low_color": DEFAULT_FAN_SPEED_COLOR,
        "fan_speed_medium_color": DEFAULT_FAN_SPEED_COLOR,
        "fan_speed_high_color": DEFAULT_FAN_SPEED_COLOR,
        "label_font_family": DEFAULT_LABEL_FONT_FAMILY,
        "label_font_size": DEFAULT_LABEL_FONT_SIZE,
        "label_font_weight": DEFAULT_LABEL_FONT_WEIGHT,
        "window_width": DEFAULT_WINDOW_WIDTH,
        "window_height": DEFAULT_WINDOW_HEIGHT,
    }

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not (fonts.LABEL_FONT_SIZE_MIN <= self.DEFAULT_LABEL_FONT_SIZE <= fonts.LABEL_FONT_SIZE_MAX):
            raise ValueError("DEFAULT_LABEL_FONT_SIZE is out of the allowed font size range")
        if not (self.MIN_WINDOW_SIZE <= self.DEFAULT_WINDOW_WIDTH <= self.MAX_WINDOW_SIZE):
            raise ValueError("DEFAULT_WINDOW_WIDTH is out of range")
        if not (self.MIN_WINDOW_SIZE <= self.DEFAULT_WINDOW_HEIGHT <= self.MAX_WINDOW_SIZE):
            raise ValueError("DEFAULT_WINDOW_HEIGHT is out of range")
        if not self.CONFIG_FILENAME:
            raise ValueError("CONFIG_FILENAME must not be empty")

        actual_keys = set(self.DEFAULT_CONFIG.keys())
        expected_keys = {
            "language", "fan_speed_low_color", "fan_speed_medium_color", "fan_speed_high_color",
            "label_font_family", "label_font_size", "label_font_weight",
            "window_width", "window_height",
        }
        if actual_keys != expected_keys:
            missing = expected_keys - actual_keys
            extra = actual_keys - expected_keys
            raise ValueError(f"DEFAULT_CONFIG key mismatch. Missing: {missing or 'None'}. Extra: {extra or 'None'}.")
        if not set(self.COLOR_KEYS) <= actual_keys:
            raise ValueError("COLOR_KEYS must all be present in DEFAULT_CONFIG")


class ConfigurationConstants:
    """Container for configuration-related constant groups."""
    def __init__(self) -> None:
        self.defaults = ConfigConstants()
        self.messages = ConfigMessages()

# Singleton instance for easy access
config = ConfigurationConstants()
