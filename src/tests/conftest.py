import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import logging

import pytest
from PyQt6.QtWidgets import QApplication

from pwm_system import ChannelPins, MockPwmDriver, PinMode
from utils import HybridLogger


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def hybrid_logger():
    main_logger = HybridLogger("PwmPanelTest", log_to_file=False)
    yield main_logger
    main_logger.cleanup()


@pytest.fixture
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", logging.DEBUG)


@pytest.fixture
def driver(logger):
    return MockPwmDriver(logger=logger)


@pytest.fixture
def ready_driver(driver):
    """Mock driver initialized with red/green/blue default pins set to output"""
    driver.init()
    for pin in ChannelPins().all_pins():
        driver.set_mode(pin, PinMode.OUTPUT)
    driver.calls.clear()
    return driver
