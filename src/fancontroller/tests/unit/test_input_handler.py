"""
Unit tests for InputHandler.
"""
import unittest
from unittest.mock import MagicMock

from PyQt6.QtCore import QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QKeyEvent, QMouseEvent
from PyQt6.QtWidgets import QApplication, QWidget

from fancontroller.core.input_handler import InputHandler
from fancontroller.core.speed import FanSpeed


class MockDialWidget(QWidget):
    """Just enough of DialView for the InputHandler to drive."""
    speed_changed = pyqtSignal(object)

    def __init__(self):
        super().__init__()
        self.fan_speed = FanSpeed.OFF

    def label_for(self, speed):
        return speed.name.lower()

    def dispatch_click_listener(self):
        return False

    def perform_click(self):
        return True


class TestInputHandler(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self):
        self.widget = MockDialWidget()
        self.widget.setGeometry(0, 0, 200, 200)
        self.widget.update = MagicMock()
        self.widget.perform_click = MagicMock(return_value=True)
        self.widget.dispatch_click_listener = MagicMock(return_value=False)
        self.emitted = []
        self.widget.speed_changed.connect(self.emitted.append)

        self.handler = InputHandler(self.widget)

    def _create_mouse_event(self, button=Qt.MouseButton.LeftButton, x=100, y=100):
        event = MagicMock(spec=QMouseEvent)
        event.button.return_value = button
        event.position.return_value = QPointF(float(x), float(y))
        return event

    def _create_key_event(self, key, auto_repeat=False):
        event = MagicMock(spec=QKeyEvent)
        event.key.return_value = key
        event.isAutoRepeat.return_value = auto_repeat
        return event

    def test_click_advances_and_repaints(self):
        """An unconsumed click moves OFF -> LOW, updates the description and requests a repaint."""
        self.assertTrue(self.handler.handle_click())

        self.assertIs(self.widget.fan_speed, FanSpeed.LOW)
        self.assertEqual(self.widget.accessibleDescription(), "low")
        self.assertEqual(self.emitted, [FanSpeed.LOW])
        self.widget.update.assert_called_once()

    def test_click_consumed_by_listener_has_no_side_effects(self):
        self.widget.dispatch_click_listener.return_value = True

        self.assertTrue(self.handler.handle_click())

        self.assertIs(self.widget.fan_speed, FanSpeed.OFF)
        self.assertEqual(self.emitted, [])
        self.widget.update.assert_not_called()

    def test_four_clicks_cycle_back_to_off(self):
        for _ in range(4):
            self.handler.handle_click()
        self.assertIs(self.widget.fan_speed, FanSpeed.OFF)
        self.assertEqual(self.emitted, [FanSpeed.LOW, FanSpeed.MEDIUM, FanSpeed.HIGH, FanSpeed.OFF])
        self.assertEqual(self.widget.update.call_count, 4)

    def test_press_then_release_inside_performs_click(self):
        press = self._create_mouse_event()
        release = self._create_mouse_event(x=150, y=20)

        self.handler.handle_mouse_press(press)
        self.handler.handle_mouse_release(release)

        self.widget.perform_click.assert_called_once()
        press.accept.assert_called_once()
        release.accept.assert_called_once()

    def test_release_outside_does_not_click(self):
        self.handler.handle_mouse_press(self._create_mouse_event())
        self.handler.handle_mouse_release(self._create_mouse_event(x=500, y=500))

        self.widget.perform_click.assert_not_called()

    def test_release_without_press_does_not_click(self):
        self.handler.handle_mouse_release(self._create_mouse_event())

        self.widget.perform_click.assert_not_called()

    def test_right_button_is_ignored(self):
        press = self._create_mouse_event(button=Qt.MouseButton.RightButton)
        release = self._create_mouse_event(button=Qt.MouseButton.RightButton)

        self.handler.handle_mouse_press(press)
        self.handler.handle_mouse_release(release)

        self.widget.perform_click.assert_not_called()
        press.accept.assert_not_called()
        release.accept.assert_not_called()

    def test_activation_keys_click(self):
        for key in (Qt.Key.Key_Space, Qt.Key.Key_Return, Qt.Key.Key_Enter, Qt.Key.Key_Select):
            event = self._create_key_event(key)
            self.assertTrue(self.handler.handle_key_press(event))
            event.accept.assert_called_once()
        self.assertEqual(self.widget.perform_click.call_count, 4)

    def test_other_keys_and_auto_repeat_are_not_handled(self):
        self.assertFalse(self.handler.handle_key_press(self._create_key_event(Qt.Key.Key_A)))
        self.assertFalse(self.handler.handle_key_press(self._create_key_event(Qt.Key.Key_Space, auto_repeat=True)))
        self.widget.perform_click.assert_not_called()


if __name__ == '__main__':
    unittest.main()
