import pytest

from bouncing_waves.oscillator import Oscillator, advance


def test_advance_free_flight():
    position, speed = advance(0.01, 0.5, 1.0)
    assert position == pytest.approx(0.51)
    assert speed == 1.0


def test_advance_reflects_at_right_wall():
    position, speed = advance(0.1, 0.95, 1.0)
    assert speed == -1.0
    assert position == pytest.approx(0.9)


def test_advance_reflects_at_left_wall():
    position, speed = advance(0.1, 0.05, -1.0)
    assert speed == 1.0
    assert position == pytest.approx(0.1)


def test_advance_stays_in_unit_interval():
    for start in (0.0, 0.01, 0.25, 0.5, 0.99, 1.0):
        for velocity in (-2.0, -0.5, 0.5, 2.0):
            dt = 0.4
            projected = start + dt * velocity
            position, speed = advance(dt, start, velocity)
            assert 0.0 <= position <= 1.0
            bounced = projected > 1.0 or projected < 0.0
            assert (speed == -velocity) is bounced


def test_advance_single_reflection_only():
    # dt * |speed| > 1 is not corrected past one bounce
    position, speed = advance(1.0, 0.5, 3.0)
    assert speed == -3.0
    assert position == pytest.approx(-2.0)


def test_oscillator_update():
    wave = Oscillator(position=0.0, speed=1.0)
    for _ in range(150):
        wave.update(0.01)
        assert 0.0 <= wave.position <= 1.0
    assert wave.speed == -1.0
    # Bounced off the right wall, heading back through the middle
    assert wave.position == pytest.approx(0.5, abs=0.011)
