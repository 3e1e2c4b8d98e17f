"""
RPi.GPIO software-PWM implementation of PwmDriver
"""

from typing import Dict

try:
    import RPi.GPIO as GPIO
except ImportError:
    # Not on a Raspberry Pi; init() reports failure
    GPIO = None

from .channels import PinMode, clamp_duty_cycle, MAX_DUTY_CYCLE
from .interfaces import PwmDriver


class GpioPwmDriver(PwmDriver):
    """
    PWM driver backed by RPi.GPIO.

    RPi.GPIO expresses duty cycle as a 0-100 percentage, so the 0-255 value
    is scaled on every write. Each output pin owns one GPIO.PWM instance,
    started at 0% when the pin is configured.
    """

    def __init__(self, frequency_hz: int, logger):
        """
        Args:
            frequency_hz: PWM carrier frequency for every output pin
            logger: ClassLogger instance for logging
        """
        self._frequency_hz = frequency_hz
        self._logger = logger
        self._pwms: Dict[int, object] = {}
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def init(self) -> bool:
        if GPIO is None:
            self._logger.error("RPi.GPIO not available - run on Raspberry Pi")
            return False
        try:
            GPIO.setwarnings(False)
            GPIO.setmode(GPIO.BCM)
        except RuntimeError as e:
            self._logger.error(f"GPIO setmode failed: {e}")
            return False

        self._initialized = True
        self._logger.info(f"RPi.GPIO initialized (BCM mode, {self._frequency_hz}Hz PWM)")
        return True

    def set_mode(self, pin: int, mode: PinMode) -> None:
        GPIO.setup(pin, GPIO.OUT)
        if pin not in self._pwms:
            pwm = GPIO.PWM(pin, self._frequency_hz)
            pwm.start(0)
            self._pwms[pin] = pwm
        self._logger.debug(f"GPIO{pin} configured as PWM output")

    def set_pwm(self, pin: int, duty_cycle: int) -> None:
        pwm = self._pwms.get(pin)
        if pwm is None:
            raise ValueError(f"GPIO{pin} is not configured as PWM output")

        duty_cycle = clamp_duty_cycle(duty_cycle)
        pwm.ChangeDutyCycle(duty_cycle * 100.0 / MAX_DUTY_CYCLE)
        self._logger.debug(f"GPIO{pin} duty cycle -> {duty_cycle}")

    def terminate(self) -> None:
        for pin in list(self._pwms):
            self._stop_pwm(pin)
        if self._initialized:
            GPIO.cleanup()
            self._initialized = False
            self._logger.info("RPi.GPIO released")

    def _stop_pwm(self, pin: int) -> None:
        pwm = self._pwms.pop(pin, None)
        if pwm is not None:
            pwm.stop()
