import pytest

from scrolltile.animation import DEFAULT_DURATION, Animation


def test_starts_at_from_value():
    anim = Animation(3.0, 7.0)
    anim.set_current_time(10.0)
    assert anim.value() == 3.0
    assert not anim.is_done()


def test_ends_at_to_value():
    anim = Animation(3.0, 7.0, duration=DEFAULT_DURATION)
    anim.set_current_time(10.0)
    anim.set_current_time(10.0 + DEFAULT_DURATION)
    assert anim.is_done()
    assert anim.value() == 7.0


def test_value_past_end_stays_at_target():
    anim = Animation(0.0, 5.0, duration=1.0, start_time=0.0)
    anim.set_current_time(100.0)
    assert anim.value() == 5.0
    assert anim.is_done()


def test_values_move_monotonically_towards_target():
    anim = Animation(0.0, 10.0, duration=1.0, start_time=0.0)
    values = []
    for step in range(11):
        anim.set_current_time(step / 10)
        values.append(anim.value())
    assert values == sorted(values)
    assert all(0.0 <= v <= 10.0 for v in values)


def test_decreasing_animation_stays_between_ends():
    anim = Animation(4.0, 1.0, duration=1.0, start_time=0.0)
    anim.set_current_time(0.5)
    assert 1.0 < anim.value() < 4.0
    assert not anim.is_done()


def test_time_before_start_clamps_to_start():
    anim = Animation(2.0, 6.0, duration=1.0, start_time=5.0)
    anim.set_current_time(1.0)
    assert anim.value() == 2.0


def test_zero_duration_is_done_immediately():
    anim = Animation(2.0, 6.0, duration=0.0)
    anim.set_current_time(0.0)
    assert anim.is_done()
    assert anim.value() == 6.0


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        Animation(0.0, 1.0, duration=-1.0)


def test_ends_are_kept_as_floats():
    anim = Animation(1, 2)
    assert anim.from_value == 1.0
    assert anim.to_value == 2.0
    assert isinstance(anim.to_value, float) and anim.to_value == 2