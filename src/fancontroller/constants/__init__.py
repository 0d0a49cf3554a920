"""
Provides centralized, immutable constants for the FanController application.

This package exposes singleton instances of constant groups, ensuring they
are validated on import and easily accessible from a single namespace.

Usage:
    from fancontroller import constants

    # Access application metadata
    print(constants.app.VERSION)

    # Access a translated string
    print(constants.i18n.I18nStrings("de_DE").resolve("FAN_LOW"))

    # Access the fixed dial layout
    offset = constants.dial.RADIUS_OFFSET_LABEL
"""

from .app import app
from .color import color
from .config import config
from .dial import dial
from .fonts import fonts
from . import i18n
from .logs import logs

# No validation script is needed here; validation happens on instantiation
# of each singleton within its own module.

__all__ = [
    "app",
    "color",
    "config",
    "dial",
    "fonts",
    "i18n",
    "logs",
]
