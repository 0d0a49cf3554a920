"""
Defines a common named color palette used throughout the application.
"""
from typing import Final

class ColorConstants:
    """Defines a static palette of named colors."""
    WHITE: Final[str] = "#FFFFFF"
    BLACK: Final[str] = "#000000"
    GRAY: Final[str] = "#888888"
    LIGHT_GRAY: Final[str] = "#CCCCCC"
    GREEN: Final[str] = "#00FF00"
    ORANGE: Final[str] = "#FFA500"
    RED: Final[str] = "#FF0000"

    # Dial roles
    DIAL_OFF_COLOR: Final[str] = GRAY          # disc fill while the fan is off
    DIAL_UNSET_COLOR: Final[str] = LIGHT_GRAY  # fallback for an unset speed color
    INDICATOR_COLOR: Final[str] = BLACK        # indicator dot and label text

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not (isinstance(value, str) and value.startswith("#") and len(value) == 7):
                    raise ValueError(f"Color '{attr_name}' must be a 7-character hex string.")

# Singleton instance for easy access
color = ColorConstants()
