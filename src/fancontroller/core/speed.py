"""
The fan speed positions of the dial and the cyclic transition between them.
"""

from enum import Enum
from typing import Dict


class FanSpeed(Enum):
    """
    The four positions of the dial, in dial order.

    Each value is the i18n key of the position's label, never a display
    string; the text is resolved by :class:`~fancontroller.constants.i18n.I18nStrings`.
    """
    OFF = "FAN_OFF"
    LOW = "FAN_LOW"
    MEDIUM = "FAN_MEDIUM"
    HIGH = "FAN_HIGH"

    @property
    def label(self) -> str:
        """The i18n key of this speed's label."""
        return self.value

    @property
    def ordinal(self) -> int:
        """Zero-based position of this speed in declaration order."""
        return _ORDINALS[self]

    def next(self) -> "FanSpeed":
        """Returns the speed the dial moves to on the next click."""
        return _TRANSITIONS[self]


_ORDINALS: Dict[FanSpeed, int] = {speed: index for index, speed in enumerate(FanSpeed)}

_TRANSITIONS: Dict[FanSpeed, FanSpeed] = {
    FanSpeed.OFF: FanSpeed.LOW,
    FanSpeed.LOW: FanSpeed.MEDIUM,
    FanSpeed.MEDIUM: FanSpeed.HIGH,
    FanSpeed.HIGH: FanSpeed.OFF,
}

DEFAULT_FAN_SPEED: FanSpeed = FanSpeed.OFF


def advance(current: FanSpeed) -> FanSpeed:
    """Pure, total transition OFF -> LOW -> MEDIUM -> HIGH -> OFF."""
    return _TRANSITIONS[current]
