"""
Abstract interface for the hardware PWM driver
"""

from abc import ABC, abstractmethod

from .channels import PinMode


class PwmDriver(ABC):
    """
    Hardware boundary for PWM LED output.

    Implementations wrap a concrete GPIO library (or record calls, for the mock).
    Duty cycles are always expressed as 0-255 regardless of the backend's
    native range; implementations clamp and scale as needed.

    Lifecycle:
        driver.init()                       # False -> fatal, nothing else is called
        driver.set_mode(17, PinMode.OUTPUT)
        driver.set_pwm(17, 128)
        driver.terminate()
    """

    @abstractmethod
    def init(self) -> bool:
        """
        Initialize the underlying GPIO library.

        Returns:
            True on success, False if the hardware could not be initialized
        """
        pass

    @abstractmethod
    def set_mode(self, pin: int, mode: PinMode) -> None:
        """
        Configure a pin as PWM-capable output.

        Args:
            pin: BCM GPIO number
            mode: PinMode.OUTPUT
        """
        pass

    @abstractmethod
    def set_pwm(self, pin: int, duty_cycle: int) -> None:
        """
        Set the PWM duty cycle of an output pin.

        Args:
            pin: BCM GPIO number previously configured as output
            duty_cycle: 0 (off) to 255 (fully on), clamped into range

        Raises:
            ValueError: If the pin was never configured as output
        """
        pass

    @abstractmethod
    def terminate(self) -> None:
        """Release the GPIO library. Safe to call more than once."""
        pass
