"""
Main panel window - manual sliders, exit button and the fade timer
"""

from typing import Callable, Dict, Optional, TYPE_CHECKING

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QColor, QFont, QPalette
from PyQt6.QtWidgets import QApplication, QPushButton, QVBoxLayout, QWidget

from fade_system import FadeEngine, create_fade_tick
from pwm_system.channels import Channel
from .slider_control import LedSlider

if TYPE_CHECKING:
    from panel_system.config import PanelConfig
    from pwm_system.interfaces import PwmDriver
    from utils import ClassLogger


class ControlWindow(QWidget):
    """
    The panel window.

    Owns one LedSlider per manually controlled channel, the Exit button and,
    when fading is configured, a QTimer parented to this window. The timer
    callback holds the FadeEngine and the driver only, and stops with the
    window.
    """

    def __init__(self,
                 config: 'PanelConfig',
                 driver: 'PwmDriver',
                 logger: 'ClassLogger',
                 on_exit: Optional[Callable[[], None]] = None,
                 parent: Optional[QWidget] = None):
        """
        Args:
            config: Panel configuration (pins, fade settings, window size)
            driver: Initialized PWM driver with every channel set to output
            logger: ClassLogger instance for logging
            on_exit: Called when Exit is clicked, defaults to QApplication.quit
        """
        super().__init__(parent)
        self._logger = logger
        self._on_exit = on_exit if on_exit is not None else QApplication.quit

        self.setWindowTitle(config.window_title)
        self.setFixedSize(config.window_width, config.window_height)

        palette = self.palette()
        palette.setColor(QPalette.ColorRole.Window, QColor(Qt.GlobalColor.black))
        self.setAutoFillBackground(True)
        self.setPalette(palette)

        layout = QVBoxLayout(self)

        self.sliders: Dict[Channel, LedSlider] = {}
        for channel in config.manual_channels:
            led_slider = LedSlider(channel.label, config.pins.pin_for(channel), driver, self)
            layout.addWidget(led_slider)
            self.sliders[channel] = led_slider

        self.exit_button = self._create_exit_button()
        layout.addWidget(self.exit_button, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addStretch()

        self.fade_engine: Optional[FadeEngine] = None
        self.fade_timer: Optional[QTimer] = None
        self.fade_tick: Optional[Callable[[], None]] = None
        if config.fade is not None:
            self.fade_engine = FadeEngine(step=config.fade.step)
            self.fade_tick = create_fade_tick(
                self.fade_engine,
                driver,
                config.pins.pin_for(config.fade.channel_a),
                config.pins.pin_for(config.fade.channel_b)
            )
            self.fade_timer = QTimer(self)
            self.fade_timer.timeout.connect(self.fade_tick)
            self.fade_timer.start(config.fade.interval_ms)
            self._logger.info(
                f"Fade running: {config.fade.channel_a.label} / {config.fade.channel_b.label}, "
                f"step {config.fade.step} every {config.fade.interval_ms}ms"
            )

        manual = ", ".join(channel.label for channel in self.sliders) or "none"
        self._logger.info(f"Window built - manual sliders: {manual}")

    def _create_exit_button(self) -> QPushButton:
        button = QPushButton("Exit", self)
        button.setFont(QFont("Arial", 12))
        button.setStyleSheet("QPushButton { background-color: grey; color: white; padding: 5px; }")
        button.clicked.connect(self._on_exit_clicked)
        return button

    def _on_exit_clicked(self, checked: bool = False) -> None:
        self._logger.info("Exit requested")
        self._on_exit()

    def stop_fade(self) -> None:
        if self.fade_timer is not None and self.fade_timer.isActive():
            self.fade_timer.stop()
            self._logger.debug("Fade timer stopped")

    def closeEvent(self, event) -> None:
        self.stop_fade()
        super().closeEvent(event)
