"""
Mock PWM Driver - No-hardware implementation for development and testing
"""

from typing import Dict, List, Optional, Tuple, Any

from .channels import PinMode, clamp_duty_cycle
from .interfaces import PwmDriver


class MockPwmDriver(PwmDriver):
    """
    PwmDriver that touches no hardware.

    Every call is appended to `calls` as (operation, *args) so callers can
    assert on the exact sequence, and the last duty cycle per pin is kept
    in `duty_cycles`.
    """

    def __init__(self, logger, init_succeeds: bool = True):
        """
        Args:
            logger: ClassLogger instance for logging
            init_succeeds: Value init() returns, to simulate a missing GPIO library
        """
        self._logger = logger
        self._init_succeeds = init_succeeds
        self.calls: List[Tuple[Any, ...]] = []
        self.modes: Dict[int, PinMode] = {}
        self.duty_cycles: Dict[int, int] = {}
        self.initialized = False
        self.terminated = False

    def init(self) -> bool:
        self.calls.append(("init",))
        self.initialized = self._init_succeeds
        if self.initialized:
            self._logger.info("🔌 MockPwmDriver initialized (GPIO disabled)")
        return self._init_succeeds

    def set_mode(self, pin: int, mode: PinMode) -> None:
        self.calls.append(("set_mode", pin, mode))
        self.modes[pin] = mode

    def set_pwm(self, pin: int, duty_cycle: int) -> None:
        if self.modes.get(pin) is not PinMode.OUTPUT:
            raise ValueError(f"GPIO{pin} is not configured as PWM output")
        duty_cycle = clamp_duty_cycle(duty_cycle)
        self.calls.append(("set_pwm", pin, duty_cycle))
        self.duty_cycles[pin] = duty_cycle
        self._logger.debug(f"Mock: GPIO{pin} duty cycle -> {duty_cycle}")

    def terminate(self) -> None:
        self.calls.append(("terminate",))
        self.initialized = False
        self.terminated = True
        self._logger.info("Mock: driver terminated")

    def pwm_calls(self, pin: Optional[int] = None) -> List[int]:
        """Duty cycles written so far, optionally only for one pin"""
        return [call[2] for call in self.calls
                if call[0] == "set_pwm" and (pin is None or call[1] == pin)]
