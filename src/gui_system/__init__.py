"""
GUI System Package

PyQt6 widgets for the PWM LED panel.
"""

from .slider_control import LedSlider
from .control_window import ControlWindow

__all__ = [
    "LedSlider",
    "ControlWindow"
]
