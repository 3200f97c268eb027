import pytest

from ethrl.core.clock import Time


def fake_clock(values):
    it = iter(values)
    return lambda: next(it)


def test_initial_values_are_zero():
    timer = Time(fake_clock([5.0]))
    assert timer.time == 0.0
    assert timer.delta_time == 0.0


def test_tick_tracks_elapsed_and_delta():
    timer = Time(fake_clock([0.0, 1.0, 2.5]))
    timer.tick()
    assert timer.time == 1.0
    assert timer.delta_time == timer.time
    timer.tick()
    assert timer.time == 2.5
    assert timer.delta_time == pytest.approx(2.5 - 1.0)


def test_reset_restarts_elapsed_but_not_delta():
    timer = Time(fake_clock([0.0, 1.0, 3.0, 4.0]))
    timer.tick()
    timer.reset()
    timer.tick()
    assert timer.time == pytest.approx(4.0 - 3.0)
    assert timer.delta_time == pytest.approx(4.0 - 1.0)
    assert timer.time < timer.delta_time


def test_real_clock_invariants():
    timer = Time()
    timer.tick()
    timer.tick()
    assert timer.delta_time >= 0.0
    assert timer.time >= timer.delta_time