"""
Maps the current fan speed to the dial's fill color.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Final

from fancontroller import constants
from .speed import FanSpeed

logger = logging.getLogger("FanController.ColorPolicy")

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")

OFF_COLOR: Final[str] = constants.color.DIAL_OFF_COLOR
INDICATOR_COLOR: Final[str] = constants.color.INDICATOR_COLOR
DEFAULT_SPEED_COLOR: Final[str] = constants.config.defaults.DEFAULT_FAN_SPEED_COLOR


def _resolve_color(key: str, value: Any) -> str:
    """Returns ``value`` if it is a #RRGGBB string, otherwise the neutral default."""
    if value is None:
        return DEFAULT_SPEED_COLOR
    if isinstance(value, str) and _HEX_COLOR.fullmatch(value):
        return value.upper()
    logger.debug("Unusable color %r for %s, using %s.", value, key, DEFAULT_SPEED_COLOR)
    return DEFAULT_SPEED_COLOR


@dataclass(frozen=True)
class Palette:
    """The dial colors for the three running speeds, fixed for the widget's lifetime."""
    low: str = DEFAULT_SPEED_COLOR
    medium: str = DEFAULT_SPEED_COLOR
    high: str = DEFAULT_SPEED_COLOR

    def __post_init__(self) -> None:
        # Frozen, so normalize through object.__setattr__.
        object.__setattr__(self, "low", _resolve_color("low", self.low))
        object.__setattr__(self, "medium", _resolve_color("medium", self.medium))
        object.__setattr__(self, "high", _resolve_color("high", self.high))

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "Palette":
        """Creates a Palette from an application config dictionary."""
        return cls(
            low=config.get("fan_speed_low_color"),
            medium=config.get("fan_speed_medium_color"),
            high=config.get("fan_speed_high_color"),
        )

    def colors(self) -> tuple:
        """All distinct colors the dial can be filled with, OFF included."""
        return tuple(dict.fromkeys((OFF_COLOR, self.low, self.medium, self.high)))


def fill_color_for(speed: FanSpeed, palette: Palette) -> str:
    """Returns the disc fill color for ``speed``."""
    if speed is FanSpeed.OFF:
        return OFF_COLOR
    if speed is FanSpeed.LOW:
        return palette.low
    if speed is FanSpeed.MEDIUM:
        return palette.medium
    return palette.high
