"""
Polar placement of the dial indicator and labels.

The same ordinal-to-angle mapping is used for every placement; only the
radius differs between the indicator (inside the disc) and the labels
(outside it).
"""

import math
from typing import Protocol

from fancontroller import constants


class MutablePoint(Protocol):
    """Anything with QPointF-style setters, typically a caller-owned ``QPointF``."""
    def setX(self, x: float) -> None: ...
    def setY(self, y: float) -> None: ...


def angle_for_ordinal(ordinal: int) -> float:
    """Returns the angle, in radians, of the dial position with the given ordinal."""
    return constants.dial.START_ANGLE + ordinal * constants.dial.ANGLE_STEP


def compute_xy_for_speed(point: MutablePoint, ordinal: int, radius: float,
                         center_x: float, center_y: float) -> None:
    """
    Writes the screen position of a dial position into ``point``.

    ``point`` is a scratch buffer owned by the caller: it is overwritten on
    every call and holds no meaning between calls. Nothing is allocated here,
    which keeps this safe to call from a paint event.
    """
    angle = angle_for_ordinal(ordinal)
    point.setX(radius * math.cos(angle) + center_x)
    point.setY(radius * math.sin(angle) + center_y)
