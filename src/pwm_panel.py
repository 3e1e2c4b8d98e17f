#!/usr/bin/env python3
"""
PWM LED Panel

Desktop control panel for three PWM-driven LEDs (red, green, blue) on a
Raspberry Pi. The red LED follows its slider; green and blue fade in
opposite directions on a timer. Set `fade=None` in create_panel_config()
for three manual sliders instead.
"""

import sys
import signal
import logging
from pathlib import Path

# MOCK PWM - Set to True to run the panel without GPIO hardware
USE_MOCK_PWM = False

# Add src to path for imports when run as a script
sys.path.insert(0, str(Path(__file__).parent))

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication

from gui_system import ControlWindow
from panel_system import PanelConfig, FadeConfig, PanelShell
from pwm_system import ChannelPins, GpioPwmDriver, MockPwmDriver, PwmDriver
from utils import HybridLogger


def create_panel_config() -> PanelConfig:
    """Default configuration: red manual, green/blue complementary fade"""
    return PanelConfig(
        pins=ChannelPins(red=17, green=27, blue=22),
        pwm_frequency_hz=800,
        fade=FadeConfig(step=2, interval_ms=20),
    )


def create_pwm_driver(config: PanelConfig, logger) -> PwmDriver:
    """Pick the hardware driver, or the mock when USE_MOCK_PWM is set"""
    if USE_MOCK_PWM:
        logger.info("🔌 Using MockPwmDriver (GPIO hardware disabled)")
        return MockPwmDriver(logger=logger)
    return GpioPwmDriver(frequency_hz=config.pwm_frequency_hz, logger=logger)


def install_signal_handlers(app: QApplication, logger) -> QTimer:
    """
    Route SIGINT/SIGTERM into QApplication.quit so shutdown still runs.

    Returns the wake-up timer; Python only runs signal handlers between
    bytecodes, so the Qt loop has to hand control back periodically.
    """
    def on_signal(sig, frame):
        logger.info(f"⏹️  Signal {sig} received, quitting")
        app.quit()

    signal.signal(signal.SIGINT, on_signal)
    signal.signal(signal.SIGTERM, on_signal)

    wake_timer = QTimer()
    wake_timer.timeout.connect(lambda: None)
    wake_timer.start(200)
    return wake_timer


def main(argv=None) -> int:
    """
    Main function - sets up and runs the panel.

    Returns:
        Process exit code (0 normal exit, 1 startup failure)
    """
    main_logger = HybridLogger("PwmPanel")
    panel_logger = main_logger.get_class_logger("PwmPanel")
    driver_logger = main_logger.get_class_logger("PwmDriver", logging.INFO)
    window_logger = main_logger.get_class_logger("ControlWindow", logging.INFO)

    panel_logger.info("💡 PWM LED PANEL")

    try:
        config = create_panel_config()
        config.validate()

        mode = "fade" if config.fade_enabled else "manual"
        panel_logger.info(f"Mode: {mode} | manual: {[c.value for c in config.manual_channels]} | faded: {[c.value for c in config.faded_channels]}")
        panel_logger.info(f"PWM frequency: {config.pwm_frequency_hz}Hz")

        app = QApplication(argv if argv is not None else sys.argv)
        wake_timer = install_signal_handlers(app, panel_logger)

        driver = create_pwm_driver(config, driver_logger)
        shell = PanelShell(config, driver, panel_logger)

        exit_code = shell.run(
            app,
            lambda cfg, drv, _logger: ControlWindow(cfg, drv, window_logger)
        )
        wake_timer.stop()
        return exit_code

    finally:
        panel_logger.info("✅ PWM LED panel stopped")
        main_logger.cleanup()


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
