"""
Views submodule for FanController.

Contains UI-related classes: the DialView widget and the DialWindow hosting it.
"""

from .dial import DialView
from .window import DialWindow

__all__ = ["DialView", "DialWindow"]
