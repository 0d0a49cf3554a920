from __future__ import annotations

# --- Standard Library Imports ---
import logging
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

# --- Third-Party Imports ---
from PyQt6.QtCore import QPointF, QSize, Qt, pyqtSignal
from PyQt6.QtGui import QKeyEvent, QMouseEvent, QPaintEvent, QPainter, QResizeEvent
from PyQt6.QtWidgets import QSizePolicy, QWidget

# --- First-Party (Local) Imports ---
from fancontroller import constants
from fancontroller.core.color_policy import Palette
from fancontroller.core.input_handler import InputHandler
from fancontroller.core.speed import DEFAULT_FAN_SPEED, FanSpeed
from fancontroller.utils.dial_renderer import DialRenderer

# --- Type Checking ---
if TYPE_CHECKING:
    from fancontroller.constants.i18n import I18nStrings

ClickListener = Callable[["DialView"], Any]


class DialView(QWidget):
    """A clickable fan speed dial cycling through off, low, medium and high."""

    speed_changed = pyqtSignal(object)

    def __init__(self, config: Optional[Dict[str, Any]] = None, i18n: Optional[I18nStrings] = None, parent: Optional[QWidget] = None) -> None:
        """Initialize the dial with its palette, renderer and input handling."""
        super().__init__(parent)
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.{self.__class__.__name__}")
        self.logger.debug("Initializing DialView...")

        if i18n is None:
            i18n = constants.i18n.I18nStrings((config or {}).get("language"))
        self.i18n = i18n
        self.config: Dict[str, Any] = config if config is not None else constants.config.defaults.DEFAULT_CONFIG.copy()

        # --- Dial state ---
        self.fan_speed: FanSpeed = DEFAULT_FAN_SPEED
        self.radius: float = 0.0
        self.center: QPointF = QPointF()
        self.fan_palette: Palette = Palette.from_config(self.config)
        self._click_listener: Optional[ClickListener] = None

        try:
            self.renderer = DialRenderer(self.config, self.fan_palette, self.i18n.resolve)
            self.input_handler = InputHandler(self)
        except Exception as e:
            self.logger.critical("Initialization failed: %s", e, exc_info=True)
            raise RuntimeError(f"Failed to initialize DialView: {e}") from e

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self._update_accessible_text()

        self.logger.debug("DialView initialized with palette %s.", self.fan_palette)

    # --- Click dispatch ---

    def set_on_click_listener(self, listener: Optional[ClickListener]) -> None:
        """
        Attaches a click listener. A listener returning a truthy value consumes
        the click and the dial does not advance. Pass None to detach.
        """
        self._click_listener = listener

    def dispatch_click_listener(self) -> bool:
        """Base click step: runs the attached listener, returns True if it consumed the click."""
        if self._click_listener is None:
            return False
        return bool(self._click_listener(self))

    def perform_click(self) -> bool:
        """Handles a click on the dial. Always returns True (the click is handled)."""
        return self.input_handler.handle_click()

    # --- Labels and accessibility ---

    def label_for(self, speed: FanSpeed) -> str:
        """Returns the translated label of ``speed``."""
        return self.i18n.resolve(speed.label)

    def retranslate(self, i18n: I18nStrings) -> None:
        """Switches to another set of strings and repaints."""
        self.i18n = i18n
        self.renderer.set_label_resolver(self.i18n.resolve)
        self._update_accessible_text()
        self.update()

    def _update_accessible_text(self) -> None:
        self.setAccessibleName(self.i18n.resolve("DIAL_ACCESSIBLE_NAME"))
        self.setAccessibleDescription(self.label_for(self.fan_speed))

    # --- Geometry ---

    def handle_size_changed(self, width: int, height: int) -> None:
        """Recomputes the cached dial radius and center for a new widget size."""
        self.radius = constants.dial.RADIUS_FRACTION * (min(width, height) / 2.0)
        self.center.setX(width // 2)
        self.center.setY(height // 2)
        self.logger.debug("Size changed to %dx%d, dial radius %.1f.", width, height, self.radius)

    def sizeHint(self) -> QSize:
        side = constants.dial.MIN_WIDGET_SIZE + 2 * constants.dial.LABEL_RING_MARGIN
        return QSize(side, side)

    def minimumSizeHint(self) -> QSize:
        return QSize(constants.dial.MIN_WIDGET_SIZE, constants.dial.MIN_WIDGET_SIZE)

    # --- Qt event overrides ---

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self.handle_size_changed(size.width(), size.height())
        super().resizeEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            self.renderer.render(painter, self.fan_speed, self.radius, self.center)
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        self.input_handler.handle_mouse_press(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        self.input_handler.handle_mouse_release(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if not self.input_handler.handle_key_press(event):
            super().keyPressEvent(event)
