import pytest

from satoriui.knob_layout import (
    compute_knob_layout,
    compute_tooltip_layout,
)
from satoriui.layout import Rect

TALL = Rect(0.0, 0.0, 100.0, 200.0)


def test_empty_bounds_give_no_layout():
    assert compute_knob_layout(Rect(0.0, 0.0, 0.0, 100.0)) is None
    assert compute_knob_layout(Rect(0.0, 0.0, 100.0, 0.0)) is None


def test_too_narrow_for_any_radius():
    # 24 wide leaves 8 of content; half of it minus the side margin is zero.
    assert compute_knob_layout(Rect(0.0, 0.0, 24.0, 200.0)) is None


def test_too_short_for_circle_and_label():
    # 40 tall leaves 14 of content, all taken by the fixed margins.
    assert compute_knob_layout(Rect(0.0, 0.0, 100.0, 40.0)) is None


def test_content_rect_uses_outer_padding():
    layout = compute_knob_layout(TALL)
    assert layout.content == Rect(8.0, 8.0, 92.0, 182.0)


def test_radii_proportions_and_centre():
    layout = compute_knob_layout(TALL)
    assert layout.radius == pytest.approx(layout.outer_radius * 5.0 / 8.0)
    assert layout.radius + layout.slot_gap + layout.slot_thickness_base == pytest.approx(
        layout.outer_radius
    )
    assert layout.center[0] == pytest.approx(50.0)
    assert layout.center[1] == pytest.approx(
        layout.content.top + 8.0 + layout.outer_radius
    )
    assert layout.outer_radius == pytest.approx(layout.content.width() / 2 - 4.0)


def test_label_height_has_minimum():
    layout = compute_knob_layout(TALL)
    assert layout.label_height == pytest.approx(18.0)


def test_short_bounds_scale_to_fit():
    bounds = Rect(0.0, 0.0, 100.0, 100.0)
    layout = compute_knob_layout(bounds)
    available = bounds.height() - 8.0 - 18.0 - 8.0 - 6.0
    assert 2.0 * layout.outer_radius + layout.label_height == pytest.approx(available)
    assert layout.outer_radius < layout.content.width() / 2 - 4.0
    assert layout.radius == pytest.approx(layout.outer_radius * 5.0 / 8.0)


@pytest.mark.parametrize(
    "line_height, expected_pad",
    [(10.0, 3.0), (100.0, 12.0)],
)
def test_label_pad_is_clamped(line_height, expected_pad):
    layout = compute_knob_layout(TALL, line_height)
    assert layout.label_pad_y == pytest.approx(expected_pad)


def test_label_outer_rect_below_slot():
    layout = compute_knob_layout(TALL, 20.0)
    outer = layout.label_outer_rect
    assert outer.top == pytest.approx(layout.center[1] + layout.outer_radius + 6.0)
    assert outer.height() == pytest.approx(layout.label_height + 2 * layout.label_pad_y)
    assert outer.left == layout.content.left
    assert outer.right == layout.content.right


def test_label_without_measurement_fills_width():
    layout = compute_knob_layout(TALL)
    assert layout.label_text_rect.width() == pytest.approx(
        layout.label_outer_rect.width()
    )
    assert layout.label_text_width == pytest.approx(layout.label_outer_rect.width())


def test_measured_label_is_centred():
    layout = compute_knob_layout(TALL, 20.0, 30.0)
    text = layout.label_text_rect
    assert text.width() == pytest.approx(30.0)
    assert (text.left + text.right) / 2 == pytest.approx(layout.center[0])
    assert text.top == pytest.approx(layout.label_outer_rect.top + layout.label_pad_y)


def test_wide_label_is_clamped_to_available():
    layout = compute_knob_layout(TALL, 20.0, 5000.0)
    assert layout.label_text_rect.left == pytest.approx(layout.label_outer_rect.left)
    assert layout.label_text_rect.right == pytest.approx(layout.label_outer_rect.right)


def test_tiny_label_gets_minimum_width():
    layout = compute_knob_layout(TALL, 20.0, 0.25)
    assert layout.label_text_rect.width() == pytest.approx(1.0)


def test_slot_rect_surrounds_centre():
    layout = compute_knob_layout(TALL)
    slot = layout.slot_rect
    assert slot.width() == pytest.approx(2 * layout.outer_radius)
    assert slot.contains(*layout.center)
    assert layout.slot_radius < layout.outer_radius


def test_tooltip_small_content_is_knob_width():
    layout = compute_knob_layout(TALL, 20.0, 10.0)
    tip = compute_tooltip_layout(layout, 20.0, 10.0, 10.0)
    knob_width = 2 * layout.outer_radius
    assert tip.rect.width() == pytest.approx(int(knob_width) + 1.0)
    assert (tip.rect.left + tip.rect.right) / 2 == pytest.approx(layout.center[0])


def test_tooltip_width_is_capped():
    layout = compute_knob_layout(TALL, 20.0, 10.0)
    tip = compute_tooltip_layout(layout, 20.0, 1000.0, 1000.0)
    assert tip.rect.width() <= 4 * layout.outer_radius + 2.0
    assert tip.rect.width() == float(int(tip.rect.width()))


def test_tooltip_vertical_placement_and_shadow():
    layout = compute_knob_layout(TALL, 20.0, 10.0)
    tip = compute_tooltip_layout(layout, 20.0, 10.0, 10.0)
    assert tip.rect.top == pytest.approx(layout.label_outer_rect.bottom + tip.inner_pad_y)
    assert tip.rect.height() == pytest.approx(layout.label_height + 2 * tip.inner_pad_y)
    assert tip.shadow_rect.top - tip.rect.top == pytest.approx(2.0)
    assert tip.shadow_rect.width() == pytest.approx(tip.rect.width())
    assert tip.corner_radius == 4.0


def test_tooltip_columns_hold_their_text():
    layout = compute_knob_layout(TALL, 20.0, 20.0)
    tip = compute_tooltip_layout(layout, 20.0, 20.0, 15.0)
    assert tip.label_rect.width() >= 20.0
    assert tip.value_rect.width() >= 15.0
    assert tip.value_rect.left == pytest.approx(tip.label_rect.right + tip.inner_pad_x)
    assert tip.value_rect.right == pytest.approx(tip.rect.right - tip.inner_pad_x)
    assert tip.label_rect.left == pytest.approx(tip.rect.left + tip.inner_pad_x)


def test_tooltip_pads_are_clamped():
    layout = compute_knob_layout(TALL, 10.0)
    tip = compute_tooltip_layout(layout, 10.0, 5.0, 5.0)
    assert tip.inner_pad_x == pytest.approx(4.0)
    assert tip.inner_pad_y == pytest.approx(3.0)