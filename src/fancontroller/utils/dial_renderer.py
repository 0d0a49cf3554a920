"""
Dial rendering for FanController.

Draws the fan speed dial for DialView: a filled disc colored by the current
speed, a small indicator dot just inside the disc edge, and a ring of four
labels just outside it. Every Qt object the paint path needs (brushes, pen,
font, the scratch point, the resolved label strings and their widths) is
created up front so that `render` only issues draw calls; it runs on every
paint event.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

from PyQt6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainter, QPen
from PyQt6.QtCore import Qt, QPointF

from fancontroller import constants

from ..core.color_policy import INDICATOR_COLOR, Palette, fill_color_for
from ..core.geometry import compute_xy_for_speed
from ..core.speed import FanSpeed

logger = logging.getLogger("FanController.DialRenderer")

LabelResolver = Callable[[str], str]


def _nearest_font_weight(weight: int) -> QFont.Weight:
    """Snaps a numeric CSS-style weight (1-1000) to the closest QFont.Weight."""
    return min(QFont.Weight, key=lambda w: abs(w.value - weight))


@dataclass
class RenderConfig:
    """A data class holding a snapshot of all configuration relevant to rendering."""
    font_family: str
    font_size: int
    font_weight: int

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'RenderConfig':
        """Creates a RenderConfig instance from a standard application config dictionary."""
        defaults = constants.config.defaults
        try:
            weight = int(config.get('label_font_weight', defaults.DEFAULT_LABEL_FONT_WEIGHT))
            if not 1 <= weight <= 1000:
                logger.warning("Invalid label_font_weight %s, using default.", weight)
                weight = defaults.DEFAULT_LABEL_FONT_WEIGHT

            size = int(config.get('label_font_size', defaults.DEFAULT_LABEL_FONT_SIZE))
            if not constants.fonts.LABEL_FONT_SIZE_MIN <= size <= constants.fonts.LABEL_FONT_SIZE_MAX:
                logger.warning("Invalid label_font_size %s, using default.", size)
                size = defaults.DEFAULT_LABEL_FONT_SIZE

            return cls(
                font_family=config.get('label_font_family') or defaults.DEFAULT_LABEL_FONT_FAMILY,
                font_size=size,
                font_weight=weight,
            )
        except (TypeError, ValueError) as e:
            logger.error("Failed to create RenderConfig: %s", e)
            raise ValueError("Invalid rendering configuration") from e


class DialRenderer:
    """
    Renders the fan speed dial for DialView.
    """
    def __init__(self, config: Dict[str, Any], palette: Palette, label_resolver: LabelResolver) -> None:
        """
        Initializes renderer with config, palette and label resolver, handling setup errors.
        """
        self.logger = logger
        try:
            self.config = RenderConfig.from_dict(config)
            self.palette = palette
            self.font = self._build_font(self.config)
            self.metrics = QFontMetricsF(self.font)

            self._fill_brushes: Dict[str, QBrush] = {c: QBrush(QColor(c)) for c in palette.colors()}
            self._indicator_brush = QBrush(QColor(INDICATOR_COLOR))
            self._text_pen = QPen(QColor(INDICATOR_COLOR))

            # Scratch point for every placement; overwritten before each read.
            self._point = QPointF()

            self._labels: Tuple[Tuple[int, str, float], ...] = ()
            self.set_label_resolver(label_resolver)
            self.logger.info("DialRenderer initialized.")
        except Exception as e:
            self.logger.error("Failed to initialize DialRenderer: %s", e)
            raise RuntimeError("Renderer initialization failed") from e

    @staticmethod
    def _build_font(config: RenderConfig) -> QFont:
        font = QFont()
        if config.font_family:
            font.setFamily(config.font_family)
        font.setPixelSize(config.font_size)
        font.setWeight(_nearest_font_weight(config.font_weight))
        return font

    def set_label_resolver(self, label_resolver: LabelResolver) -> None:
        """Resolves and measures the four labels once, outside the paint path."""
        labels = []
        for speed in FanSpeed:
            text = label_resolver(speed.label)
            labels.append((speed.ordinal, text, self.metrics.horizontalAdvance(text) / 2.0))
        self._labels = tuple(labels)
        self.logger.debug("Cached dial labels: %s", [text for _, text, _ in self._labels])

    def label_texts(self) -> Tuple[str, ...]:
        """The resolved label strings in dial order."""
        return tuple(text for _, text, _ in self._labels)

    def render(self, painter: QPainter, fan_speed: FanSpeed, radius: float, center: QPointF) -> None:
        """Draws the disc, the indicator for ``fan_speed`` and the full label ring."""
        try:
            center_x = center.x()
            center_y = center.y()

            # Disc
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(self._fill_brushes[fill_color_for(fan_speed, self.palette)])
            painter.drawEllipse(center, radius, radius)

            # Indicator dot
            marker_radius = radius + constants.dial.RADIUS_OFFSET_INDICATOR
            compute_xy_for_speed(self._point, fan_speed.ordinal, marker_radius, center_x, center_y)
            dot_radius = radius / constants.dial.INDICATOR_RADIUS_DIVISOR
            painter.setBrush(self._indicator_brush)
            painter.drawEllipse(self._point, dot_radius, dot_radius)

            # Labels, centered horizontally on their point with the baseline on it
            label_radius = radius + constants.dial.RADIUS_OFFSET_LABEL
            painter.setPen(self._text_pen)
            painter.setFont(self.font)
            for ordinal, text, half_width in self._labels:
                compute_xy_for_speed(self._point, ordinal, label_radius, center_x, center_y)
                self._point.setX(self._point.x() - half_width)
                painter.drawText(self._point, text)
        except Exception as e:
            self.logger.error("Failed to render dial: %s", e, exc_info=True)
