"""
PWM panel configuration
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from pwm_system.channels import Channel, ChannelPins
from utils.gpio_utils import is_usable_gpio


@dataclass
class FadeConfig:
    """Automatic fade between two channels"""
    step: int = 2
    interval_ms: int = 20
    channel_a: Channel = Channel.GREEN
    channel_b: Channel = Channel.BLUE


@dataclass
class PanelConfig:
    """Main panel configuration. fade=None gives every channel a manual slider."""

    # Hardware configuration
    pins: ChannelPins = field(default_factory=ChannelPins)
    pwm_frequency_hz: int = 800

    # Control mode
    fade: Optional[FadeConfig] = field(default_factory=FadeConfig)

    # Window
    window_title: str = "PWM LED Brightness Controller"
    window_width: int = 440
    window_height: int = 250

    @property
    def fade_enabled(self) -> bool:
        return self.fade is not None

    @property
    def faded_channels(self) -> Tuple[Channel, ...]:
        """Channels driven by the fade timer (empty in manual mode)"""
        if self.fade is None:
            return ()
        return (self.fade.channel_a, self.fade.channel_b)

    @property
    def manual_channels(self) -> Tuple[Channel, ...]:
        """Channels that get a slider, in red, green, blue order"""
        faded = self.faded_channels
        return tuple(channel for channel in Channel if channel not in faded)

    def validate(self) -> None:
        """Basic validation of configuration"""
        pins = self.pins.all_pins()
        if len(set(pins)) != len(pins):
            raise ValueError(f"Each channel needs its own GPIO pin, got {pins}")

        for channel, pin in self.pins.items():
            if not is_usable_gpio(pin):
                raise ValueError(f"{channel.label} GPIO pin {pin} out of valid range (2-27)")

        if self.pwm_frequency_hz <= 0:
            raise ValueError(f"PWM frequency must be positive, got {self.pwm_frequency_hz}")

        if self.fade is not None:
            if self.fade.step <= 0:
                raise ValueError(f"Fade step must be positive, got {self.fade.step}")
            if self.fade.interval_ms <= 0:
                raise ValueError(f"Fade interval must be positive, got {self.fade.interval_ms}")
            if self.fade.channel_a == self.fade.channel_b:
                raise ValueError("Fade needs two different channels")

        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError("Window size must be positive")
