import pytest

from pokered.delta import MICRO_PER_SEC, Delta, create_delta


def test_create_delta_is_zeroed_with_multiplier():
    delta = create_delta(2.0)
    assert delta.multiplier == 2.0
    assert delta.original == 0.0
    assert delta.delta == 0.0
    assert delta.total_elapsed == 0.0


def test_one_second_of_microseconds():
    delta = create_delta(1.0)
    result = delta.update(MICRO_PER_SEC)
    assert delta.original == pytest.approx(1.0)
    assert delta.delta == pytest.approx(1.0)
    assert result == delta.delta


def test_multiplier_scales_delta():
    delta = create_delta(3.0)
    delta.update(250_000)
    assert delta.delta == pytest.approx(delta.original * 3.0)
    plain = create_delta(1.0)
    plain.update(250_000)
    assert delta.original == pytest.approx(plain.original)


def test_total_elapsed_accumulates_scaled_deltas():
    delta = create_delta(0.5)
    steps = [16_000, 17_000, 15_500, 0]
    seen = [delta.update(step) for step in steps]
    assert delta.total_elapsed == pytest.approx(sum(seen))
    assert delta.original == 0.0
    assert delta.delta == 0.0


def test_update_replaces_original_each_frame():
    delta = Delta()
    delta.update(MICRO_PER_SEC)
    delta.update(MICRO_PER_SEC // 2)
    assert delta.original == pytest.approx(0.5)
    assert delta.total_elapsed == pytest.approx(1.5)


def test_zero_multiplier_freezes_time():
    delta = create_delta(0.0)
    delta.update(MICRO_PER_SEC)
    assert delta.original == pytest.approx(1.0)
    assert delta.delta == 0.0
    assert delta.total_elapsed == 0.0