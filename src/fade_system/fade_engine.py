"""
Complementary brightness fade between two PWM channels
"""

from enum import Enum
from typing import Callable, Tuple, TYPE_CHECKING

from pwm_system.channels import MIN_DUTY_CYCLE, MAX_DUTY_CYCLE

if TYPE_CHECKING:
    from pwm_system.interfaces import PwmDriver


class FadeDirection(Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"


class FadeEngine:
    """
    Triangle-wave brightness ramp.

    Each tick emits (level, 255 - level) and then moves level by `step`
    toward the current boundary. Reaching or passing 0 / 255 clamps the
    level onto the boundary and reverses direction, so with step=2 the
    sequence is 0, 2, ..., 254, 255, 253, ..., 1, 0, 2, ...
    """

    def __init__(self, step: int = 2):
        """
        Args:
            step: Level change per tick, must be a positive integer

        Raises:
            ValueError: If step is not positive
        """
        if step <= 0:
            raise ValueError(f"Fade step must be positive, got {step}")
        self.step = step
        self.level = MIN_DUTY_CYCLE
        self.direction = FadeDirection.INCREASING

    def tick(self) -> Tuple[int, int]:
        """
        Advance one step.

        Returns:
            (channel A duty cycle, channel B duty cycle) for this tick,
            computed before the level moves
        """
        emitted = (self.level, MAX_DUTY_CYCLE - self.level)

        if self.direction is FadeDirection.INCREASING:
            self.level += self.step
            if self.level >= MAX_DUTY_CYCLE:
                self.level = MAX_DUTY_CYCLE
                self.direction = FadeDirection.DECREASING
        else:
            self.level -= self.step
            if self.level <= MIN_DUTY_CYCLE:
                self.level = MIN_DUTY_CYCLE
                self.direction = FadeDirection.INCREASING

        return emitted


def create_fade_tick(engine: FadeEngine,
                     driver: 'PwmDriver',
                     pin_a: int,
                     pin_b: int) -> Callable[[], None]:
    """
    Build the timer callback that drives two pins from one engine.

    The callback captures only the engine and the driver, so it can be
    connected to a timer owned by any widget tree.
    """
    def on_tick() -> None:
        level_a, level_b = engine.tick()
        driver.set_pwm(pin_a, level_a)
        driver.set_pwm(pin_b, level_b)

    return on_tick
