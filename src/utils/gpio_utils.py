"""
GPIO pin utilities for the Raspberry Pi 40-pin header.
Mapping between BCM GPIO numbers and physical pin numbers.
"""

from typing import Optional, Iterable

# BCM GPIO number -> physical header pin
GPIO_TO_PHYSICAL = {
    0: 27,   1: 28,   2: 3,    3: 5,
    4: 7,    5: 29,   6: 31,   7: 26,
    8: 24,   9: 21,   10: 19,  11: 23,
    12: 32,  13: 33,  14: 8,   15: 10,
    16: 36,  17: 11,  18: 12,  19: 35,
    20: 38,  21: 40,  22: 15,  23: 16,
    24: 18,  25: 22,  26: 37,  27: 13
}

PHYSICAL_TO_GPIO = {v: k for k, v in GPIO_TO_PHYSICAL.items()}

# GPIO 0/1 are reserved for the HAT ID EEPROM
MIN_USABLE_GPIO = 2
MAX_USABLE_GPIO = 27


def gpio_to_physical(gpio_num: int) -> Optional[int]:
    """Convert GPIO number to physical pin number, None if not on the header"""
    return GPIO_TO_PHYSICAL.get(gpio_num)


def physical_to_gpio(physical_pin: int) -> Optional[int]:
    """Convert physical pin number to GPIO number, None for power/ground pins"""
    return PHYSICAL_TO_GPIO.get(physical_pin)


def is_usable_gpio(gpio_num: int) -> bool:
    return MIN_USABLE_GPIO <= gpio_num <= MAX_USABLE_GPIO


def describe_pins(pins: Iterable[tuple]) -> str:
    """
    Format (name, gpio) pairs for log output.

    Example:
        describe_pins([("Red", 17)])  ->  "Red=GPIO17(pin 11)"
    """
    parts = []
    for name, gpio in pins:
        physical = gpio_to_physical(gpio)
        parts.append(f"{name}=GPIO{gpio}(pin {physical if physical is not None else '?'})")
    return ", ".join(parts)
