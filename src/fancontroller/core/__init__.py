"""
Core submodule for FanController.

Contains the fan speed state machine, the dial geometry, the color policy
and the input handler. Exports the main names for use by other parts of the
application.
"""

from fancontroller.core.speed import FanSpeed, advance, DEFAULT_FAN_SPEED
from fancontroller.core.geometry import compute_xy_for_speed, angle_for_ordinal
from fancontroller.core.color_policy import Palette, fill_color_for, INDICATOR_COLOR, OFF_COLOR

__all__ = [
    "FanSpeed",
    "advance",
    "DEFAULT_FAN_SPEED",
    "compute_xy_for_speed",
    "angle_for_ordinal",
    "Palette",
    "fill_color_for",
    "INDICATOR_COLOR",
    "OFF_COLOR",
]
