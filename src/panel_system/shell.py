"""
Application shell - driver startup, window lifetime and guaranteed shutdown
"""

from typing import Callable, Optional, TYPE_CHECKING

from pwm_system.channels import PinMode, MIN_DUTY_CYCLE
from utils.gpio_utils import describe_pins

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication, QWidget
    from pwm_system.interfaces import PwmDriver
    from utils import ClassLogger
    from .config import PanelConfig


EXIT_OK = 0
EXIT_STARTUP_FAILED = 1


class PanelShell:
    """
    Runs the panel from driver init to driver release.

    Shutdown zeroes every channel and terminates the driver. It runs once,
    whichever way the application ends: Exit button, window close (both
    through QApplication.aboutToQuit), or an exception while the window is
    being built.

    Example:
        shell = PanelShell(config, driver, logger)
        sys.exit(shell.run(QApplication(sys.argv), window_factory))
    """

    def __init__(self,
                 config: 'PanelConfig',
                 driver: 'PwmDriver',
                 logger: 'ClassLogger'):
        self._config = config
        self._driver = driver
        self._logger = logger
        self._started = False
        self._shut_down = False
        self.window: Optional['QWidget'] = None

    @property
    def started(self) -> bool:
        return self._started

    @property
    def shut_down(self) -> bool:
        return self._shut_down

    def startup(self) -> None:
        """
        Initialize the driver and configure all channels as outputs.

        Raises:
            RuntimeError: If the driver fails to initialize
        """
        if not self._driver.init():
            raise RuntimeError("GPIO initialization failed")

        for _, pin in self._config.pins.items():
            self._driver.set_mode(pin, PinMode.OUTPUT)

        self._started = True
        pin_map = describe_pins((channel.value, pin) for channel, pin in self._config.pins.items())
        self._logger.info(f"GPIO ready: {pin_map}")

    def shutdown(self) -> None:
        """Zero all channels then release the driver. Later calls do nothing."""
        if self._shut_down or not self._started:
            return
        self._shut_down = True

        for _, pin in self._config.pins.items():
            self._driver.set_pwm(pin, MIN_DUTY_CYCLE)
        self._driver.terminate()
        self._logger.info("All channels off, GPIO released")

    def run(self,
            app: 'QApplication',
            window_factory: Callable[['PanelConfig', 'PwmDriver', 'ClassLogger'], 'QWidget']) -> int:
        """
        Start the driver, show the window and run the event loop.

        Args:
            app: QApplication (or anything with aboutToQuit and exec())
            window_factory: Builds the window from (config, driver, logger)

        Returns:
            Process exit code: 0 on normal exit, 1 if startup failed
        """
        try:
            self.startup()
        except RuntimeError as e:
            self._logger.critical(f"Startup Error: {e}")
            self._driver.terminate()
            return EXIT_STARTUP_FAILED

        app.aboutToQuit.connect(self.shutdown)
        try:
            self.window = window_factory(self._config, self._driver, self._logger)
            self.window.show()
            self._logger.info("Entering event loop")
            exit_code = app.exec()
        except Exception as e:
            self._logger.error(f"Startup Error: {e}", exception=e)
            return EXIT_STARTUP_FAILED
        finally:
            self.shutdown()

        self._logger.info(f"Event loop finished (code {exit_code})")
        return exit_code
