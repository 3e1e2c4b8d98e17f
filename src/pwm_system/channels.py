"""
LED channels, pin assignment and duty cycle range
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

MIN_DUTY_CYCLE = 0
MAX_DUTY_CYCLE = 255


class Channel(Enum):
    """One physical LED output"""
    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    @property
    def label(self) -> str:
        """Text shown next to the channel's slider"""
        return f"{self.value.capitalize()} LED"


class PinMode(Enum):
    OUTPUT = "output"


@dataclass(frozen=True)
class ChannelPins:
    """BCM GPIO number for each channel, fixed for the lifetime of the program"""
    red: int = 17
    green: int = 27
    blue: int = 22

    def pin_for(self, channel: Channel) -> int:
        return getattr(self, channel.value)

    def items(self) -> Iterator[Tuple[Channel, int]]:
        """Yield (channel, pin) in red, green, blue order"""
        for channel in Channel:
            yield channel, self.pin_for(channel)

    def all_pins(self) -> Tuple[int, ...]:
        return tuple(pin for _, pin in self.items())


def clamp_duty_cycle(value: int) -> int:
    """Clamp a duty cycle into [0, 255]"""
    return max(MIN_DUTY_CYCLE, min(MAX_DUTY_CYCLE, int(value)))
