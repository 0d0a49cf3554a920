"""
Constants related to the label font used on the dial.
"""
from typing import Final

class FontConstants:
    """Defines label font sizes and weights."""
    LABEL_FONT_SIZE_MIN: Final[int] = 8
    LABEL_FONT_SIZE_MAX: Final[int] = 200

    WEIGHT_NORMAL: Final[int] = 400
    WEIGHT_BOLD: Final[int] = 700

    # Empty family selects the platform default font.
    DEFAULT_FONT: Final[str] = ''

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.LABEL_FONT_SIZE_MAX < self.LABEL_FONT_SIZE_MIN:
            raise ValueError("LABEL_FONT_SIZE_MAX must be >= LABEL_FONT_SIZE_MIN")

# Singleton instance for easy access
fonts = FontConstants()
