"""
Application entry point and lifecycle management for FanController.
"""

import logging
import signal
import sys
from typing import List, Optional

from PyQt6.QtWidgets import QApplication, QMessageBox

from fancontroller import constants
from fancontroller.utils.config import ConfigManager
from fancontroller.views.window import DialWindow


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the FanController application.

    Orchestrates the application's startup sequence:
    1. Sets up logging (``--debug`` makes the console verbose).
    2. Loads configuration.
    3. Initializes internationalization with the user's chosen language.
    4. Creates the dial window and runs the application event loop.

    Returns:
        An integer exit code.
    """
    argv = list(sys.argv if argv is None else argv)

    # 1. Set up logging immediately so that any subsequent errors can be recorded.
    console_level = logging.DEBUG if "--debug" in argv else constants.logs.CONSOLE_LOG_LEVEL
    ConfigManager.setup_logging(console_level=console_level)
    logger = logging.getLogger("FanController.Main")

    # The QApplication must be created before any UI elements.
    app = QApplication.instance() or QApplication(argv)
    app.setApplicationName(constants.app.APP_NAME)
    app.setApplicationVersion(constants.app.VERSION)
    app.setOrganizationName(constants.app.ORGANIZATION_NAME)

    i18n_strings: Optional[constants.i18n.I18nStrings] = None

    try:
        # 2. Load the application configuration from the file.
        config = ConfigManager().load()

        # 3. Initialize the internationalization module with the user's saved language.
        i18n_strings = constants.i18n.I18nStrings(config.get("language"))

        # 4. Create the main window.
        window = DialWindow(config=config, i18n=i18n_strings)

        # 5. Quit cleanly on Ctrl+C / termination.
        signal.signal(signal.SIGINT, lambda s, f: QApplication.instance().quit())
        signal.signal(signal.SIGTERM, lambda s, f: QApplication.instance().quit())

        window.show()
        logger.info("%s %s started.", constants.app.APP_NAME, constants.app.VERSION)

        # 6. Start the application event loop.
        return app.exec()

    except Exception as e:
        # This is a global catch-all for any critical error during startup.
        logger.critical("A critical error occurred during startup: %s", e, exc_info=True)
        title = i18n_strings.resolve("ERROR_WINDOW_TITLE") if i18n_strings else "Application Error"
        message = (i18n_strings.resolve("STARTUP_ERROR_MESSAGE").format(error=e) if i18n_strings
                   else f"A critical error occurred and {constants.app.APP_NAME} must close:\n\n{e}")
        QMessageBox.critical(None, title, message)
        return 1


if __name__ == "__main__":
    sys.exit(main())
