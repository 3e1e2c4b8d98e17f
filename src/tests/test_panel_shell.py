"""
Tests for PanelShell startup, run and shutdown paths
"""

import pytest
from PyQt6.QtCore import QTimer

from gui_system import ControlWindow
from panel_system import PanelConfig, PanelShell, EXIT_OK, EXIT_STARTUP_FAILED
from pwm_system import MockPwmDriver, PinMode

PINS = (17, 27, 22)


class FakeSignal:
    def __init__(self):
        self._slots = []

    def connect(self, slot):
        self._slots.append(slot)

    def emit(self):
        for slot in self._slots:
            slot()


class FakeApp:
    """Stands in for QApplication: exec() runs `during_loop` then quits"""

    def __init__(self, during_loop=None, exit_code=0):
        self.aboutToQuit = FakeSignal()
        self._during_loop = during_loop
        self._exit_code = exit_code
        self.exec_called = False

    def exec(self):
        self.exec_called = True
        if self._during_loop:
            self._during_loop()
        self.aboutToQuit.emit()
        return self._exit_code


class FakeWindow:
    def __init__(self):
        self.shown = False

    def show(self):
        self.shown = True


def zero_writes(driver):
    return [call for call in driver.calls if call[0] == "set_pwm" and call[2] == 0]


def test_startup_configures_every_channel_as_output(driver, logger):
    shell = PanelShell(PanelConfig(), driver, logger)
    shell.startup()
    assert shell.started
    assert driver.calls == [("init",)] + [("set_mode", pin, PinMode.OUTPUT) for pin in PINS]


def test_startup_raises_when_init_fails(logger):
    failing = MockPwmDriver(logger=logger, init_succeeds=False)
    shell = PanelShell(PanelConfig(), failing, logger)
    with pytest.raises(RuntimeError, match="GPIO initialization failed"):
        shell.startup()
    assert not shell.started


def test_init_failure_exits_1_without_window(logger):
    failing = MockPwmDriver(logger=logger, init_succeeds=False)
    app = FakeApp()
    windows = []

    exit_code = PanelShell(PanelConfig(), failing, logger).run(
        app, lambda *args: windows.append(FakeWindow()) or windows[-1]
    )

    assert exit_code == EXIT_STARTUP_FAILED
    assert windows == []
    assert not app.exec_called
    assert failing.calls == [("init",), ("terminate",)]


def test_normal_exit_shuts_down_exactly_once(driver, logger):
    window = FakeWindow()
    shell = PanelShell(PanelConfig(), driver, logger)

    exit_code = shell.run(FakeApp(), lambda *args: window)

    assert exit_code == EXIT_OK
    assert window.shown
    assert shell.shut_down
    assert zero_writes(driver) == [("set_pwm", pin, 0) for pin in PINS]
    assert driver.calls[-4:] == [("set_pwm", 17, 0), ("set_pwm", 27, 0), ("set_pwm", 22, 0), ("terminate",)]
    assert driver.calls.count(("terminate",)) == 1


def test_shutdown_zeroes_channels_left_on(driver, logger):
    shell = PanelShell(PanelConfig(), driver, logger)

    def user_moves_sliders():
        driver.set_pwm(17, 200)
        driver.set_pwm(27, 90)

    shell.run(FakeApp(during_loop=user_moves_sliders), lambda *args: FakeWindow())

    assert driver.duty_cycles == {17: 0, 27: 0, 22: 0}
    assert driver.terminated


def test_window_factory_failure_still_shuts_down(driver, logger):
    def broken_factory(*args):
        raise RuntimeError("no display")

    shell = PanelShell(PanelConfig(), driver, logger)
    exit_code = shell.run(FakeApp(), broken_factory)

    assert exit_code == EXIT_STARTUP_FAILED
    assert zero_writes(driver) == [("set_pwm", pin, 0) for pin in PINS]
    assert driver.calls.count(("terminate",)) == 1


def test_shutdown_is_idempotent(driver, logger):
    shell = PanelShell(PanelConfig(), driver, logger)
    shell.startup()
    shell.shutdown()
    shell.shutdown()
    assert len(zero_writes(driver)) == 3
    assert driver.calls.count(("terminate",)) == 1


def test_shutdown_before_startup_does_nothing(driver, logger):
    PanelShell(PanelConfig(), driver, logger).shutdown()
    assert driver.calls == []


def test_exit_code_from_event_loop_is_returned(driver, logger):
    exit_code = PanelShell(PanelConfig(), driver, logger).run(
        FakeApp(exit_code=3), lambda *args: FakeWindow()
    )
    assert exit_code == 3


# Real Qt event loop: Exit button / window close -> aboutToQuit -> shutdown

def run_in_event_loop(qapp, shell, action):
    """Run shell with a real ControlWindow, performing `action(window)` once the loop is up"""
    guard = QTimer()
    guard.setSingleShot(True)
    guard.timeout.connect(lambda: qapp.exit(99))
    guard.start(5000)

    QTimer.singleShot(0, lambda: action(shell.window))
    try:
        return shell.run(qapp, lambda cfg, drv, log: ControlWindow(cfg, drv, log))
    finally:
        guard.stop()
        if shell.window is not None:
            shell.window.hide()
            shell.window.deleteLater()


@pytest.mark.parametrize("action", [
    lambda window: window.exit_button.click(),
    lambda window: window.close(),
], ids=["exit_button", "window_close"])
def test_event_loop_exit_paths_shut_down_once(qapp, driver, logger, action):
    shell = PanelShell(PanelConfig(fade=None), driver, logger)

    exit_code = run_in_event_loop(qapp, shell, action)

    assert exit_code == EXIT_OK
    assert driver.calls[-4:] == [("set_pwm", 17, 0), ("set_pwm", 27, 0), ("set_pwm", 22, 0), ("terminate",)]
    assert driver.calls.count(("terminate",)) == 1
    assert len(zero_writes(driver)) == 3
