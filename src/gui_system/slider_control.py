"""
Labeled brightness slider bound to one PWM pin
"""

from typing import Optional, TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QWidget, QLabel, QSlider, QHBoxLayout

from pwm_system.channels import MIN_DUTY_CYCLE, MAX_DUTY_CYCLE

if TYPE_CHECKING:
    from pwm_system.interfaces import PwmDriver


class LedSlider(QWidget):
    """
    Label + horizontal 0-255 slider.

    Every valueChanged signal is forwarded synchronously to
    driver.set_pwm(pin, value), one call per change. The slider starts at 0
    without emitting.
    """

    def __init__(self,
                 label_text: str,
                 pin: int,
                 driver: 'PwmDriver',
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.pin = pin
        self._driver = driver

        self.label = QLabel(label_text, self)
        self.label.setFont(QFont("Arial", 11))
        self.label.setStyleSheet("QLabel { color: white; }")

        self.slider = QSlider(Qt.Orientation.Horizontal, self)
        self.slider.setRange(MIN_DUTY_CYCLE, MAX_DUTY_CYCLE)
        self.slider.setValue(MIN_DUTY_CYCLE)
        self.slider.valueChanged.connect(self._on_value_changed)

        layout = QHBoxLayout(self)
        layout.addWidget(self.label)
        layout.addWidget(self.slider)

    def _on_value_changed(self, value: int) -> None:
        self._driver.set_pwm(self.pin, value)

    def value(self) -> int:
        return self.slider.value()
