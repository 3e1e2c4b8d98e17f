#!/usr/bin/env python3
"""
PWM System - Hardware boundary for PWM-driven LEDs

- Channel / ChannelPins: which GPIO drives which LED
- PwmDriver: abstract driver interface (init, set_mode, set_pwm, terminate)
- GpioPwmDriver: RPi.GPIO implementation
- MockPwmDriver: call-recording implementation for development off the Pi

Usage:
    from pwm_system import GpioPwmDriver, ChannelPins, PinMode

    pins = ChannelPins()
    driver = GpioPwmDriver(frequency_hz=800, logger=logger)
    if driver.init():
        driver.set_mode(pins.red, PinMode.OUTPUT)
        driver.set_pwm(pins.red, 128)
        driver.terminate()
"""

from .channels import Channel, ChannelPins, PinMode, clamp_duty_cycle, MIN_DUTY_CYCLE, MAX_DUTY_CYCLE
from .interfaces import PwmDriver
from .gpio_pwm_driver import GpioPwmDriver
from .mock_pwm_driver import MockPwmDriver

__all__ = [
    'Channel',
    'ChannelPins',
    'PinMode',
    'clamp_duty_cycle',
    'MIN_DUTY_CYCLE',
    'MAX_DUTY_CYCLE',
    'PwmDriver',
    'GpioPwmDriver',
    'MockPwmDriver'
]
