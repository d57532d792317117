"""A rotary parameter knob: value handling, drag behaviour and drawable geometry."""

from __future__ import annotations

import math
from typing import Callable, NamedTuple, Optional

from satoriui.debug_overlay import DebugBoxLayer, DebugBoxModel, DebugBoxSegment
from satoriui.knob_layout import DEFAULT_LINE_HEIGHT, KnobLayout, compute_knob_layout
from satoriui.layout import Rect

Point = tuple[float, float]

START_ANGLE = -math.pi * 1.25
"""Angle of the pointer at the minimum value (-225 degrees)."""
SWEEP = math.pi * 1.5
"""Angle the pointer turns through across the whole range (270 degrees)."""

_VALUE_EPSILON = 1e-4
_DRAG_SENSITIVITY = 0.004
_MIN_ARC_FRACTION = 0.001
_MIN_ARC_ANGLE = 1e-3
_TOOLTIP_RANGE_EPSILON = 1e-6
_POINTER_LENGTH_RATIO = 0.8
_DEBUG_PADDING_INSET = 6.0
_DEBUG_CONTENT_INSET = 4.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class _SlotArc(NamedTuple):
    """The value slot arc, drawn clockwise from ``start`` to ``end``."""

    start: Point
    end: Point
    radius: float
    thickness: float
    large_arc: bool


class ParameterKnob:
    """A labelled knob over ``[minimum, maximum]`` that is dragged vertically.

    Dragging up raises the value and dragging down lowers it; ``on_change``
    is called with each new value the user sets.
    """

    def __init__(
        self,
        label: str,
        minimum: float,
        maximum: float,
        initial_value: float,
        on_change: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.label = label
        self.minimum = minimum
        self.maximum = maximum
        self._value = _clamp(initial_value, minimum, maximum)
        self._on_change = on_change
        self.bounds = Rect()
        self.hovered = False
        self.dragging = False
        self._drag_start_y = 0.0
        self._drag_start_value = 0.0
        self._debug_rects: Optional[tuple[Rect, Rect, Rect]] = None

    @property
    def value(self) -> float:
        return self._value

    @property
    def active(self) -> bool:
        """True while the knob is hovered or dragged."""
        return self.hovered or self.dragging

    @property
    def pointer_width(self) -> float:
        """Stroke width of the pointer line; thicker while dragging."""
        return 3.0 if self.dragging else 2.0

    def arrange(self, bounds: Rect) -> None:
        self.bounds = bounds
        self._debug_rects = None

    def layout(
        self,
        line_height: float = DEFAULT_LINE_HEIGHT,
        label_text_width: Optional[float] = None,
    ) -> Optional[KnobLayout]:
        """Lay the knob out in its bounds, or None when there is no room."""
        return compute_knob_layout(self.bounds, line_height, label_text_width)

    def normalized(self) -> float:
        """The value as a fraction of the range, clamped to [0, 1]."""
        span = self.maximum - self.minimum
        norm = (self._value - self.minimum) / span if span != 0.0 else 0.0
        return _clamp(norm, 0.0, 1.0)

    def pointer_angle(self) -> float:
        """Angle of the pointer in radians, in screen coordinates."""
        return START_ANGLE + SWEEP * self.normalized()

    def pointer_end(self, layout: KnobLayout) -> Point:
        """Tip of the pointer line drawn from the dial centre."""
        cx, cy = layout.center
        length = layout.radius * _POINTER_LENGTH_RATIO
        angle = self.pointer_angle()
        return cx + math.cos(angle) * length, cy + math.sin(angle) * length

    def slot_arc(self, layout: Optional[KnobLayout]) -> Optional[_SlotArc]:
        """The lit part of the value slot, or None when there is nothing to draw."""
        if layout is None:
            return None
        norm = self.normalized()
        if norm <= _MIN_ARC_FRACTION:
            return None
        end_angle = START_ANGLE + SWEEP * norm
        arc_angle = abs(end_angle - START_ANGLE)
        if arc_angle <= _MIN_ARC_ANGLE:
            return None
        cx, cy = layout.center
        r = layout.slot_radius
        start = (cx + math.cos(START_ANGLE) * r, cy + math.sin(START_ANGLE) * r)
        end = (cx + math.cos(end_angle) * r, cy + math.sin(end_angle) * r)
        return _SlotArc(
            start=start,
            end=end,
            radius=r,
            thickness=layout.slot_thickness_base,
            large_arc=arc_angle >= math.pi,
        )

    def tooltip_text(self) -> str:
        """The value shown in the drag tooltip, as a whole percentage."""
        span = self.maximum - self.minimum
        norm = (self._value - self.minimum) / span if span > _TOOLTIP_RANGE_EPSILON else 0.0
        norm = _clamp(norm, 0.0, 1.0)
        return f"{math.floor(norm * 100.0 + 0.5)}%"

    def _set_value(self, value: float, notify: bool) -> None:
        value = _clamp(value, self.minimum, self.maximum)
        if abs(value - self._value) < _VALUE_EPSILON:
            return
        self._value = value
        if notify and self._on_change is not None:
            self._on_change(self._value)

    def on_pointer_down(self, x: float, y: float) -> bool:
        if not self.contains(x, y):
            return False
        self.dragging = True
        self.hovered = True
        self._drag_start_y = y
        self._drag_start_value = self._value
        return True

    def on_pointer_move(self, x: float, y: float) -> bool:
        inside = self.contains(x, y)
        changed = False
        if self.dragging:
            delta = (self._drag_start_y - y) * _DRAG_SENSITIVITY
            span = self.maximum - self.minimum
            self._set_value(self._drag_start_value + delta * span, True)
            changed = True
        # Hover only follows the pointer when not dragging, so a drag that
        # leaves the knob keeps its highlighted look.
        if not self.dragging and self.hovered != inside:
            self.hovered = inside
            changed = True
        return changed

    def on_pointer_up(self) -> None:
        # Hover state is left for the next pointer move to update.
        self.dragging = False

    def sync_value(self, value: float) -> None:
        """Set the value from the model without calling ``on_change``."""
        self._set_value(value, False)

    def contains(self, x: float, y: float) -> bool:
        return self.bounds.contains(x, y)

    def update_debug_rects(self, layout: Optional[KnobLayout]) -> None:
        """Remember the drawn box model: bounds, value slot and label area."""
        if layout is None or not self.bounds.is_valid():
            self._debug_rects = None
            return
        self._debug_rects = (self.bounds, layout.slot_rect, layout.label_outer_rect)

    def debug_box_model(self) -> DebugBoxModel:
        """The box model of the last drawn layout, or one inset from the bounds."""
        model = DebugBoxModel()

        def push(layer: DebugBoxLayer, rect: Rect) -> None:
            if rect.is_valid():
                model.segments.append(DebugBoxSegment(layer, rect))

        if self._debug_rects is not None:
            border, padding, content = self._debug_rects
            push(DebugBoxLayer.BORDER, border)
            push(DebugBoxLayer.PADDING, padding)
            push(DebugBoxLayer.CONTENT, content)
            if model.segments:
                return model

        push(DebugBoxLayer.BORDER, self.bounds)
        padding = self.bounds.inset(_DEBUG_PADDING_INSET)
        push(DebugBoxLayer.PADDING, padding)
        push(DebugBoxLayer.CONTENT, padding.inset(_DEBUG_CONTENT_INSET))
        return model