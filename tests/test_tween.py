"""Tests for tweens and tween groups."""

import pytest

from tween import Tween, TweenGroup, ease_in_out, linear
from world import Transform


class Box:
    def __init__(self, alpha=1.0):
        self.alpha = alpha


def test_easing_endpoints():
    assert ease_in_out(0.0) == pytest.approx(0.0)
    assert ease_in_out(0.5) == pytest.approx(0.5)
    assert ease_in_out(1.0) == pytest.approx(1.0)


def test_tween_lands_exactly_on_end_values():
    transform = Transform(10.0, 20.0, 1.0, 0.3)
    tween = Tween(transform, {"x": 400.0, "y": 250.0, "scale": 2.0}, duration=60)
    finished = False
    for _ in range(60):
        finished = tween.update(1.0)
    assert finished
    assert transform == Transform(400.0, 250.0, 2.0, 0.3)


def test_tween_is_monotone_with_linear_easing():
    box = Box(1.0)
    tween = Tween(box, {"alpha": 0.0}, duration=10, easing=linear)
    values = []
    while not tween.update(1.0):
        values.append(box.alpha)
    assert values == sorted(values, reverse=True)
    assert box.alpha == 0.0


def test_delay_reads_start_values_late():
    box = Box(0.0)
    tween = Tween(box, {"alpha": 1.0}, duration=10, delay=5, easing=linear)
    for _ in range(4):
        tween.update(1.0)
    assert box.alpha == 0.0
    assert tween.progress == 0.0

    box.alpha = 0.5  # changed before the delay elapses
    tween.update(1.0)
    tween.update(5.0)
    assert box.alpha == pytest.approx(0.75)


def test_on_complete_fires_once():
    calls = []
    tween = Tween(Box(), {"alpha": 0.0}, duration=2, on_complete=calls.append)
    for _ in range(5):
        tween.update(1.0)
    assert calls == [tween]


def test_cancel_skips_callback_and_freezes():
    calls = []
    box = Box(1.0)
    tween = Tween(box, {"alpha": 0.0}, duration=10, easing=linear, on_complete=calls.append)
    tween.update(5.0)
    tween.cancel()
    assert tween.update(5.0)
    assert box.alpha == pytest.approx(0.5)
    assert calls == []


def test_retarget_continues_from_current_value():
    box = Box(0.0)
    tween = Tween(box, {"alpha": 1.0}, duration=10, easing=linear)
    tween.update(5.0)
    assert box.alpha == pytest.approx(0.5)

    tween.retarget({"alpha": 0.0})
    # No jump at the moment of retargeting.
    tween.update(0.0)
    assert box.alpha == pytest.approx(0.5)
    for _ in range(5):
        tween.update(1.0)
    assert box.alpha == 0.0


def test_group_drops_finished_tweens():
    group = TweenGroup()
    short = group.add(Tween(Box(), {"alpha": 0.0}, duration=1))
    long = group.add(Tween(Box(), {"alpha": 0.0}, duration=3))
    group.update(1.0)
    assert short.done
    assert len(group) == 1
    assert group.active
    assert group.find(long.target) is long

    group.cancel_all()
    assert len(group) == 0
    assert not group.active
    assert long.cancelled
