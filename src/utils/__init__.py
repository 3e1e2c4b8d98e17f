"""
Utilities package - Common utilities for the PWM LED panel
"""

from .hybrid_logger import HybridLogger, ClassLogger, ColoredFormatter
from .gpio_utils import (
    gpio_to_physical, physical_to_gpio, is_usable_gpio, describe_pins,
    GPIO_TO_PHYSICAL, PHYSICAL_TO_GPIO
)

__all__ = [
    'HybridLogger',
    'ClassLogger',
    'ColoredFormatter',
    'gpio_to_physical',
    'physical_to_gpio',
    'is_usable_gpio',
    'describe_pins',
    'GPIO_TO_PHYSICAL',
    'PHYSICAL_TO_GPIO'
]
