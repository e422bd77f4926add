import pytest

from neatgfx.fps_counter import FPSCounter


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_rate_stays_zero_within_interval():
    clock = FakeClock()
    counter = FPSCounter(1.0, clock)
    counter.start()
    clock.now = 0.5
    for _ in range(3):
        counter.add_frame()
    assert counter.fps == 0.0
    assert counter.frame_count == 3


def test_rate_updated_after_interval():
    clock = FakeClock()
    counter = FPSCounter(1.0, clock)
    counter.start()
    clock.now = 0.5
    for _ in range(3):
        counter.add_frame()
    clock.now = 1.5
    counter.add_frame()
    assert counter.fps == 4.0
    assert counter.frame_count == 0


def test_rate_divides_by_interval():
    clock = FakeClock()
    counter = FPSCounter(2.0, clock)
    counter.start()
    for _ in range(9):
        counter.add_frame()
    clock.now = 2.5
    counter.add_frame()
    assert counter.fps == 5.0


def test_start_restarts_interval():
    clock = FakeClock()
    counter = FPSCounter(1.0, clock)
    clock.now = 10.0
    counter.start()
    clock.now = 10.5
    counter.add_frame()
    assert counter.fps == 0.0
    assert counter.frame_count == 1


def test_interval_boundary_is_exclusive():
    clock = FakeClock()
    counter = FPSCounter(1.0, clock)
    counter.start()
    clock.now = 1.0
    counter.add_frame()
    assert counter.fps == 0.0


def test_non_positive_interval_rejected():
    with pytest.raises(ValueError):
        FPSCounter(0.0)