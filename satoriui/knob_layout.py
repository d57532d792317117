"""Geometry of a rotary parameter knob: its dial, value slot, label and tooltip."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from satoriui.layout import Rect

Point = tuple[float, float]

DEFAULT_LINE_HEIGHT = 18.0
TOOLTIP_CORNER_RADIUS = 4.0
TOOLTIP_SHADOW_OFFSET = 2.0

_OUTER_PADDING_X = 8.0
_OUTER_PADDING_TOP = 8.0
_OUTER_PADDING_BOTTOM = 18.0
_TOP_MARGIN = 8.0
_BOTTOM_GAP = 6.0
_SIDE_MARGIN = 4.0
_MIN_LABEL_HEIGHT = 18.0
_MAX_LABEL_HEIGHT = 200.0
_TOOLTIP_EPSILON = 1.0


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if high < value:
        return high
    return value


@dataclass(frozen=True)
class KnobLayout:
    """Where each part of a knob goes inside its bounds.

    The dial of ``radius`` is ringed by a value slot whose centre line lies
    ``slot_gap + slot_thickness_base / 2`` outside it; ``outer_radius`` is the
    slot's outer edge. The label sits below, inside ``label_outer_rect``.
    """

    content: Rect
    outer_radius: float
    radius: float
    slot_gap: float
    slot_thickness_base: float
    label_height: float
    label_pad_y: float
    label_text_width: float
    line_height: float
    center: Point
    label_outer_rect: Rect
    label_text_rect: Rect

    @property
    def slot_radius(self) -> float:
        """Radius of the centre line of the value slot."""
        return self.radius + self.slot_gap + self.slot_thickness_base * 0.5

    @property
    def slot_rect(self) -> Rect:
        """Square around the outer edge of the value slot."""
        cx, cy = self.center
        r = self.outer_radius
        return Rect(cx - r, cy - r, cx + r, cy + r)


@dataclass(frozen=True)
class TooltipLayout:
    """A two-column tooltip bubble: the label on the left, the value on the right."""

    rect: Rect
    shadow_rect: Rect
    label_rect: Rect
    value_rect: Rect
    inner_pad_x: float
    inner_pad_y: float
    corner_radius: float = TOOLTIP_CORNER_RADIUS


def compute_knob_layout(
    bounds: Rect,
    line_height: float = DEFAULT_LINE_HEIGHT,
    label_text_width: Optional[float] = None,
) -> Optional[KnobLayout]:
    """Lay a knob out inside ``bounds``.

    ``line_height`` is the measured height of one line of text and
    ``label_text_width`` the measured width of the label, if known; without
    it the label takes the full width available. Returns None when the
    bounds leave no room for the knob.
    """
    if bounds.width() <= 0.0 or bounds.height() <= 0.0:
        return None

    content = Rect(
        bounds.left + _OUTER_PADDING_X,
        bounds.top + _OUTER_PADDING_TOP,
        bounds.right - _OUTER_PADDING_X,
        bounds.bottom - _OUTER_PADDING_BOTTOM,
    )
    if content.width() <= 0.0 or content.height() <= 0.0:
        return None

    outer_radius = content.width() * 0.5 - _SIDE_MARGIN
    if outer_radius <= 0.0:
        return None

    radius = outer_radius * (5.0 / 8.0)
    slot_gap = outer_radius * (1.0 / 8.0)
    slot_thickness = outer_radius * (2.0 / 8.0)
    label_height = _clamp(2.0 * radius / 3.0, _MIN_LABEL_HEIGHT, _MAX_LABEL_HEIGHT)

    available = content.height() - _TOP_MARGIN - _BOTTOM_GAP
    if available <= 0.0:
        return None

    required = 2.0 * outer_radius + label_height
    if required > available:
        scale = available / required
        if scale <= 0.0:
            return None
        outer_radius *= scale
        radius *= scale
        slot_gap *= scale
        slot_thickness *= scale
        label_height *= scale

    center_x = (content.left + content.right) * 0.5
    center_y = content.top + _TOP_MARGIN + outer_radius

    if line_height <= 0.0:
        line_height = DEFAULT_LINE_HEIGHT
    label_pad_y = _clamp(line_height * 0.18, 3.0, 12.0)
    label_top = center_y + outer_radius + _BOTTOM_GAP
    label_outer = Rect(
        content.left,
        label_top,
        content.right,
        label_top + label_height + label_pad_y * 2.0,
    )
    available_label_width = label_outer.width()
    if available_label_width <= 0.0:
        return None

    if label_text_width is not None and label_text_width > 0.0:
        text_width = label_text_width
    else:
        text_width = available_label_width
    label_width = _clamp(text_width, 1.0, available_label_width)
    label_left = _clamp(
        center_x - label_width * 0.5,
        label_outer.left,
        label_outer.right - label_width,
    )
    label_text = Rect(
        label_left,
        label_outer.top + label_pad_y,
        label_left + label_width,
        label_outer.bottom - label_pad_y,
    )

    return KnobLayout(
        content=content,
        outer_radius=outer_radius,
        radius=radius,
        slot_gap=slot_gap,
        slot_thickness_base=slot_thickness,
        label_height=label_height,
        label_pad_y=label_pad_y,
        label_text_width=text_width,
        line_height=line_height,
        center=(center_x, center_y),
        label_outer_rect=label_outer,
        label_text_rect=label_text,
    )


def compute_tooltip_layout(
    layout: KnobLayout,
    line_height: float,
    label_width: float,
    value_width_max: float,
) -> Optional[TooltipLayout]:
    """Place the value tooltip shown below a knob while it is dragged.

    ``label_width`` is the measured label width and ``value_width_max`` the
    widest value text that can appear. The bubble is at least as wide as the
    knob and at most twice as wide; None is returned if it has no area.
    """
    knob_width = layout.outer_radius * 2.0
    max_width = knob_width * 2.0
    inner_pad_x = _clamp(line_height * 0.22, 4.0, 10.0)
    col_gap = inner_pad_x

    desired = label_width + value_width_max + inner_pad_x * 4.0 + col_gap
    width = min(max(knob_width, desired), max_width)
    width = math.ceil(width) + 1.0

    inner_pad_y = _clamp(line_height * 0.18, 3.0, 12.0)
    height = layout.label_height + inner_pad_y * 2.0

    left = layout.center[0] - width * 0.5
    top = layout.label_outer_rect.bottom + _clamp(line_height * 0.18, 3.0, 12.0)
    rect = Rect(left, top, left + width, top + height)
    if not rect.is_valid():
        return None

    shadow = Rect(
        rect.left,
        rect.top + TOOLTIP_SHADOW_OFFSET,
        rect.right,
        rect.bottom + TOOLTIP_SHADOW_OFFSET,
    )

    min_left = label_width + inner_pad_x * 2.0 + _TOOLTIP_EPSILON
    min_right = value_width_max + inner_pad_x * 2.0 + _TOOLTIP_EPSILON
    left_width = max(min_left, width - (col_gap + min_right))
    right_width = width - col_gap - left_width
    if right_width < min_right:
        right_width = min_right
        left_width = max(min_left, width - (col_gap + right_width))

    label_rect = Rect(
        rect.left + inner_pad_x,
        rect.top + inner_pad_y,
        rect.left + left_width - inner_pad_x,
        rect.bottom - inner_pad_y,
    )
    value_rect = Rect(
        label_rect.right + col_gap,
        rect.top + inner_pad_y,
        rect.right - inner_pad_x,
        rect.bottom - inner_pad_y,
    )
    return TooltipLayout(
        rect=rect,
        shadow_rect=shadow,
        label_rect=label_rect,
        value_rect=value_rect,
        inner_pad_x=inner_pad_x,
        inner_pad_y=inner_pad_y,
    )