"""Box-model debug overlay: the data it draws and the hover selection state."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Optional

from satoriui.layout import Color, Rect

_DEFAULT_STROKE_WIDTH = 1.0
_PADDING_INSET = 6.0
_CONTENT_INSET = 8.0
_RECT_TOLERANCE = 0.25


class DebugOverlayMode(enum.Enum):
    OFF = "off"
    BOX_MODEL = "box_model"


class DebugBoxLayer(enum.Enum):
    BORDER = "border"
    PADDING = "padding"
    CONTENT = "content"


@dataclass(frozen=True)
class DebugBoxSegment:
    """One outlined rectangle of a box model."""

    layer: DebugBoxLayer = DebugBoxLayer.BORDER
    rect: Rect = field(default_factory=Rect)


@dataclass
class DebugBoxModel:
    """The border, padding and content rectangles of one element."""

    segments: list[DebugBoxSegment] = field(default_factory=list)


@dataclass(frozen=True)
class DebugOverlayPalette:
    stroke: Color = Color(0.0, 0.0, 0.0, 0.0)
    stroke_width: float = 1.0


def make_unified_debug_overlay_palette() -> DebugOverlayPalette:
    """The single palette used for every debug box: a thin yellow outline."""
    return DebugOverlayPalette(
        stroke=Color(1.0, 1.0, 0.0, 1.0), stroke_width=_DEFAULT_STROKE_WIDTH
    )


def make_layout_box(rect: Rect) -> DebugBoxModel:
    """Build a box model for a layout node's bounds.

    Padding and content are nested insets; a layer is left out as soon as
    the inset leaves no area.
    """
    model = DebugBoxModel()
    if not rect.is_valid():
        return model
    model.segments.append(DebugBoxSegment(DebugBoxLayer.BORDER, rect))
    padding = rect.inset(_PADDING_INSET)
    if padding.is_valid():
        model.segments.append(DebugBoxSegment(DebugBoxLayer.PADDING, padding))
        content = padding.inset(_CONTENT_INSET)
        if content.is_valid():
            model.segments.append(DebugBoxSegment(DebugBoxLayer.CONTENT, content))
    return model


def rects_close(a: Rect, b: Rect) -> bool:
    """True when every edge of the two rectangles differs by under a quarter pixel."""
    return (
        abs(a.left - b.left) < _RECT_TOLERANCE
        and abs(a.top - b.top) < _RECT_TOLERANCE
        and abs(a.right - b.right) < _RECT_TOLERANCE
        and abs(a.bottom - b.bottom) < _RECT_TOLERANCE
    )


def models_equal(lhs: DebugBoxModel, rhs: DebugBoxModel) -> bool:
    """True when both models have the same layers with nearly equal rectangles."""
    if len(lhs.segments) != len(rhs.segments):
        return False
    return all(
        a.layer is b.layer and rects_close(a.rect, b.rect)
        for a, b in zip(lhs.segments, rhs.segments)
    )


Picker = Callable[[float, float], Optional[DebugBoxModel]]


class DebugHoverTracker:
    """Tracks which box model is highlighted under the pointer.

    ``picker`` maps a point to the box model of the element there, or None.
    Methods that can change the selection return True when it changed.
    """

    def __init__(self, picker: Picker) -> None:
        self._picker = picker
        self.mode = DebugOverlayMode.OFF
        self.selection: Optional[DebugBoxModel] = None
        self.pointer_captured = False
        self.pointer_inside = False
        self.last_pointer: Optional[tuple[float, float]] = None

    def set_mode(self, mode: DebugOverlayMode) -> None:
        if self.mode is mode:
            return
        self.mode = mode
        self._apply_state()

    def toggle(self) -> None:
        self.set_mode(
            DebugOverlayMode.BOX_MODEL
            if self.mode is DebugOverlayMode.OFF
            else DebugOverlayMode.OFF
        )

    def pointer_down(self, x: float, y: float, handled: bool) -> bool:
        """Record a press; ``handled`` says whether the layout captured it."""
        self._note_pointer(x, y)
        self.pointer_captured = handled
        changed = self._update(x, y)
        return handled or changed

    def pointer_move(self, x: float, y: float) -> bool:
        self._note_pointer(x, y)
        return self._update(x, y)

    def pointer_up(self) -> bool:
        self.pointer_captured = False
        if self.last_pointer is not None:
            return self._update(*self.last_pointer)
        return False

    def pointer_leave(self) -> bool:
        self.pointer_inside = False
        self.last_pointer = None
        if self.pointer_captured:
            return False
        return self.clear()

    def clear(self) -> bool:
        if self.selection is None:
            return False
        self.selection = None
        return True

    def _note_pointer(self, x: float, y: float) -> None:
        self.pointer_inside = True
        self.last_pointer = (x, y)

    def _apply_state(self) -> None:
        if self.mode is not DebugOverlayMode.BOX_MODEL:
            self.clear()
            return
        if self.last_pointer is not None:
            self._update(*self.last_pointer)

    def _update(self, x: float, y: float) -> bool:
        if self.mode is not DebugOverlayMode.BOX_MODEL:
            return self.clear()
        if not self.pointer_captured and not self.pointer_inside:
            return self.clear()
        selection = self._picker(x, y)
        if selection is None:
            return self.clear()
        if self.selection is not None and models_equal(self.selection, selection):
            return False
        self.selection = selection
        return True