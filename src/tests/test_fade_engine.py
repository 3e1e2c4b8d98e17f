"""
Tests for the complementary fade engine and its timer callback
"""

import pytest

from fade_system import FadeEngine, FadeDirection, create_fade_tick
from pwm_system import PinMode


def expected_levels(count, step=2):
    """Reference triangle wave: bounce between 0 and 255, clamping at the ends"""
    level, rising = 0, True
    levels = []
    for _ in range(count):
        levels.append(level)
        if rising:
            level = min(255, level + step)
            rising = level < 255
        else:
            level = max(0, level - step)
            rising = level <= 0
    return levels


def test_starts_at_zero_increasing():
    engine = FadeEngine()
    assert engine.level == 0
    assert engine.direction is FadeDirection.INCREASING


def test_first_ticks_emit_before_advancing():
    engine = FadeEngine(step=2)
    assert engine.tick() == (0, 255)
    assert engine.tick() == (2, 253)
    assert engine.level == 4


def test_128_ticks_clamps_overshoot_at_255():
    engine = FadeEngine(step=2)
    for _ in range(127):
        engine.tick()
    assert engine.level == 254
    assert engine.direction is FadeDirection.INCREASING

    engine.tick()
    assert engine.level == 255
    assert engine.direction is FadeDirection.DECREASING


def test_sequence_turns_exactly_at_both_boundaries():
    engine = FadeEngine(step=2)
    emitted = [engine.tick()[0] for _ in range(400)]

    assert emitted[:4] == [0, 2, 4, 6]
    assert emitted[126:131] == [252, 254, 255, 253, 251]
    # 255 -> 1 takes 127 decrements, then 1 - 2 clamps to 0
    assert emitted[255] == 1
    assert emitted[256:259] == [0, 2, 4]
    assert emitted == expected_levels(400)


@pytest.mark.parametrize("step", [1, 2, 3, 7, 50, 254, 255, 300])
def test_level_stays_in_range_for_any_step(step):
    engine = FadeEngine(step=step)
    for _ in range(1000):
        a, b = engine.tick()
        assert 0 <= a <= 255
        assert a + b == 255
        assert 0 <= engine.level <= 255


@pytest.mark.parametrize("step", [3, 7])
def test_uneven_step_still_hits_both_boundaries(step):
    engine = FadeEngine(step=step)
    seen = {engine.tick()[0] for _ in range(2000)}
    assert 0 in seen
    assert 255 in seen


@pytest.mark.parametrize("step", [0, -2])
def test_rejects_non_positive_step(step):
    with pytest.raises(ValueError):
        FadeEngine(step=step)


def test_fade_tick_drives_both_pins_complementary(driver):
    driver.init()
    driver.set_mode(27, PinMode.OUTPUT)
    driver.set_mode(22, PinMode.OUTPUT)

    on_tick = create_fade_tick(FadeEngine(step=2), driver, pin_a=27, pin_b=22)
    for _ in range(300):
        on_tick()

    green = driver.pwm_calls(27)
    blue = driver.pwm_calls(22)
    assert len(green) == len(blue) == 300
    assert green == expected_levels(300)
    assert all(g + b == 255 for g, b in zip(green, blue))


def test_fade_tick_emits_a_before_b(driver):
    driver.init()
    driver.set_mode(27, PinMode.OUTPUT)
    driver.set_mode(22, PinMode.OUTPUT)
    driver.calls.clear()

    create_fade_tick(FadeEngine(), driver, 27, 22)()

    assert driver.calls == [("set_pwm", 27, 0), ("set_pwm", 22, 255)]
