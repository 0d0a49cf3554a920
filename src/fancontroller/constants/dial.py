"""
Constants influencing the geometry and rendering of the fan speed dial.
"""
import math
from typing import Final

class DialConstants:
    """Defines the fixed layout of the dial, its indicator and its label ring."""
    # --- Angles (radians) ---
    # Ordinal 0 sits at 9/8 of a half turn; each following speed is one eighth turn further.
    START_ANGLE: Final[float] = math.pi * (9 / 8.0)
    ANGLE_STEP: Final[float] = math.pi / 4

    # --- Radius offsets (pixels) ---
    # Positive moves away from the center, negative moves towards it.
    RADIUS_OFFSET_LABEL: Final[int] = 40
    RADIUS_OFFSET_INDICATOR: Final[int] = -55

    # --- Sizing ---
    # The dial radius is this fraction of half the smaller widget dimension.
    RADIUS_FRACTION: Final[float] = 0.8
    # Indicator dot radius is the dial radius divided by this.
    INDICATOR_RADIUS_DIVISOR: Final[float] = 12.0

    MIN_WIDGET_SIZE: Final[int] = 200
    # Space reserved around the disc for the label ring when computing the size hint.
    LABEL_RING_MARGIN: Final[int] = 120

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not (0.0 < self.RADIUS_FRACTION <= 1.0):
            raise ValueError("RADIUS_FRACTION must be between 0 and 1")
        if self.RADIUS_OFFSET_LABEL <= 0:
            raise ValueError("RADIUS_OFFSET_LABEL must be positive (labels sit outside the disc)")
        if self.RADIUS_OFFSET_INDICATOR >= 0:
            raise ValueError("RADIUS_OFFSET_INDICATOR must be negative (indicator sits inside the disc)")
        if self.INDICATOR_RADIUS_DIVISOR <= 0:
            raise ValueError("INDICATOR_RADIUS_DIVISOR must be positive")
        if self.MIN_WIDGET_SIZE <= 0:
            raise ValueError("MIN_WIDGET_SIZE must be positive")

# Singleton instance for easy access
dial = DialConstants()
