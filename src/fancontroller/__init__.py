"""
FanController: a clickable four-position fan speed dial built on PyQt6.
"""
