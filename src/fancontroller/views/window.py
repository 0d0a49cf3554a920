"""
Top-level window hosting the fan speed dial.
"""

import logging
from typing import Any, Dict, Optional, TYPE_CHECKING

from PyQt6.QtWidgets import QMainWindow, QWidget

from fancontroller import constants
from fancontroller.views.dial import DialView

if TYPE_CHECKING:
    from fancontroller.constants.i18n import I18nStrings


class DialWindow(QMainWindow):
    """Main application window; its only content is a DialView."""

    def __init__(self, config: Dict[str, Any], i18n: 'I18nStrings', parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.{self.__class__.__name__}")
        self.config = config
        self.i18n = i18n

        self.dial = DialView(config=config, i18n=i18n, parent=self)
        self.dial.speed_changed.connect(self._on_speed_changed)
        self.setCentralWidget(self.dial)

        self.setWindowTitle(i18n.resolve("APP_WINDOW_TITLE"))
        self.resize(
            config.get("window_width", constants.config.defaults.DEFAULT_WINDOW_WIDTH),
            config.get("window_height", constants.config.defaults.DEFAULT_WINDOW_HEIGHT),
        )
        self.dial.setFocus()
        self.logger.debug("DialWindow created.")

    def _on_speed_changed(self, fan_speed) -> None:
        self.statusBar().showMessage(self.dial.label_for(fan_speed))
