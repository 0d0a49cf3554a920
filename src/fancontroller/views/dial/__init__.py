"""
The fan speed dial widget.
"""

from .main import DialView

__all__ = ["DialView"]
