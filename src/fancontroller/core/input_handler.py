"""
Input Handler for FanController.

This module encapsulates all mouse and keyboard interaction logic, separating it
from the dial widget's painting. It handles:
1. Mouse clicks (press inside the dial, release inside the dial).
2. Keyboard activation (Space, Return, Enter, Select) while focused.
3. The click itself: advancing the fan speed and requesting a repaint.
"""

import logging
from typing import TYPE_CHECKING
from PyQt6.QtCore import QObject, Qt
from PyQt6.QtGui import QKeyEvent, QMouseEvent

from fancontroller.core.speed import advance

if TYPE_CHECKING:
    from fancontroller.views.dial import DialView

_ACTIVATION_KEYS = frozenset({
    Qt.Key.Key_Space,
    Qt.Key.Key_Return,
    Qt.Key.Key_Enter,
    Qt.Key.Key_Select,
})


class InputHandler(QObject):
    """
    Handles mouse and keyboard input for the DialView.
    """
    def __init__(self, widget: 'DialView') -> None:
        super().__init__(widget)
        self.widget = widget
        self.logger = logging.getLogger("FanController.Core.InputHandler")

        # State
        self._press_inside: bool = False

    def handle_mouse_press(self, event: QMouseEvent) -> None:
        """Arms a click when the left button goes down over the widget."""
        if event.button() == Qt.MouseButton.LeftButton:
            self._press_inside = True
            event.accept()

    def handle_mouse_release(self, event: QMouseEvent) -> None:
        """Completes a click if the button is released over the widget it was pressed on."""
        if event.button() != Qt.MouseButton.LeftButton:
            return

        was_armed = self._press_inside
        self._press_inside = False
        if was_armed and self.widget.rect().contains(event.position().toPoint()):
            self.widget.perform_click()
        event.accept()

    def handle_key_press(self, event: QKeyEvent) -> bool:
        """Treats the activation keys as a click. Returns False for keys it does not handle."""
        if event.key() not in _ACTIVATION_KEYS or event.isAutoRepeat():
            return False
        self.widget.perform_click()
        event.accept()
        return True

    def handle_click(self) -> bool:
        """
        Advances the dial by one position.

        The widget's base click step runs first; if an attached click listener
        consumed the click, nothing else happens.
        """
        if self.widget.dispatch_click_listener():
            self.logger.debug("Click consumed by the attached click listener.")
            return True

        self.widget.fan_speed = advance(self.widget.fan_speed)
        self.widget.setAccessibleDescription(self.widget.label_for(self.widget.fan_speed))
        self.logger.info("Dial clicked, fan speed is now %s.", self.widget.fan_speed.name)
        self.widget.speed_changed.emit(self.widget.fan_speed)
        self.widget.update()
        return True
