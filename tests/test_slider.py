import pytest

from satoriui.layout import Rect
from satoriui.slider import ParameterSlider


def make_slider(initial=0.0, minimum=0.0, maximum=1.0):
    calls = []
    slider = ParameterSlider("Gain", minimum, maximum, initial, calls.append)
    slider.arrange(Rect(10, 0, 110, 100))
    return slider, calls


def test_initial_value_is_clamped():
    assert ParameterSlider("Gain", 0.0, 1.0, 2.0).value == 1.0
    assert ParameterSlider("Gain", 0.0, 1.0, -3.0).value == 0.0


def test_track_rect_follows_bounds():
    slider, _ = make_slider()
    assert slider.track_rect == Rect(10, 100 - 28, 110, 100 - 10)
    assert slider.bounds == Rect(10, 0, 110, 100)


def test_position_to_value_maps_track_range():
    slider, _ = make_slider(minimum=2.0, maximum=4.0)
    assert slider.position_to_value(10) == pytest.approx(2.0)
    assert slider.position_to_value(110) == pytest.approx(4.0)
    assert slider.position_to_value(60) == pytest.approx((2.0 + 4.0) / 2)
    assert slider.position_to_value(-500) == pytest.approx(2.0)
    assert slider.position_to_value(500) == pytest.approx(4.0)


def test_position_to_value_without_track_returns_minimum():
    slider = ParameterSlider("Gain", 0.3, 1.0, 0.5)
    assert slider.position_to_value(50) == 0.3


def test_pointer_down_outside_is_ignored():
    slider, calls = make_slider()
    assert not slider.on_pointer_down(200, 50)
    assert calls == []
    assert not slider.dragging


def test_pointer_down_inside_sets_value_and_notifies():
    slider, calls = make_slider()
    assert slider.on_pointer_down(110, 50)
    assert slider.dragging
    assert slider.hovered
    assert slider.value == pytest.approx(1.0)
    assert calls == [slider.value]


def test_drag_continues_outside_bounds():
    slider, calls = make_slider()
    slider.on_pointer_down(10, 50)
    assert slider.value == 0.0
    assert calls == []
    assert slider.on_pointer_move(400, 50)
    assert slider.value == pytest.approx(1.0)
    assert not slider.hovered
    assert calls == [slider.value]


def test_pointer_up_stops_drag():
    slider, calls = make_slider()
    slider.on_pointer_down(60, 50)
    slider.on_pointer_up()
    before = slider.value
    slider.on_pointer_move(100, 50)
    assert slider.value == before
    assert len(calls) == 1
    assert slider.hovered


def test_hover_change_reported():
    slider, _ = make_slider()
    assert slider.on_pointer_move(50, 50)
    assert slider.hovered
    assert not slider.on_pointer_move(60, 50)
    assert slider.on_pointer_move(500, 50)
    assert not slider.hovered


def test_sync_value_does_not_notify():
    slider, calls = make_slider()
    slider.sync_value(0.75)
    assert slider.value == 0.75
    assert calls == []
    slider.sync_value(5.0)
    assert slider.value == 1.0


def test_tiny_changes_are_ignored():
    slider, _ = make_slider(initial=0.5)
    slider.sync_value(0.5 + 1e-5)
    assert slider.value == 0.5


def test_fill_fraction_and_text():
    slider, _ = make_slider(initial=0.25)
    assert slider.fill_fraction() == pytest.approx(0.25)
    assert slider.value_text() == "0.250"
    slider.sync_value(0.0)
    assert slider.fill_fraction() == 0.0