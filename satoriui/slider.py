"""A horizontal parameter slider with drag-to-set behaviour."""

from __future__ import annotations

from typing import Callable, Optional

from satoriui.layout import Rect

_TRACK_TOP_OFFSET = 28.0
_TRACK_BOTTOM_OFFSET = 10.0
_VALUE_EPSILON = 1e-4


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class ParameterSlider:
    """A labelled slider over ``[minimum, maximum]``.

    ``on_change`` is called with the new value whenever the user changes it.
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
        self.dragging = False
        self.hovered = False
        self.bounds = Rect()
        self.track_rect = self.bounds

    @property
    def value(self) -> float:
        return self._value

    def arrange(self, bounds: Rect) -> None:
        """Place the slider; the track sits along the bottom of ``bounds``."""
        self.bounds = bounds
        self.track_rect = Rect(
            bounds.left,
            bounds.bottom - _TRACK_TOP_OFFSET,
            bounds.right,
            bounds.bottom - _TRACK_BOTTOM_OFFSET,
        )

    def position_to_value(self, x: float) -> float:
        """Map a horizontal pointer position onto the value range."""
        width = self.track_rect.width()
        if width <= 0.0:
            return self.minimum
        ratio = _clamp((x - self.track_rect.left) / width, 0.0, 1.0)
        return self.minimum + ratio * (self.maximum - self.minimum)

    def fill_fraction(self) -> float:
        """Fraction of the track that is filled for the current value."""
        span = self.maximum - self.minimum
        if span == 0:
            return 0.0
        return (self._value - self.minimum) / span

    def value_text(self) -> str:
        return f"{self._value:.3f}"

    def _set_value(self, value: float, notify: bool) -> None:
        value = _clamp(value, self.minimum, self.maximum)
        if abs(value - self._value) < _VALUE_EPSILON:
            return
        self._value = value
        if notify and self._on_change is not None:
            self._on_change(self._value)

    def on_pointer_down(self, x: float, y: float) -> bool:
        if not self.bounds.contains(x, y):
            return False
        self.dragging = True
        self.hovered = True
        self._set_value(self.position_to_value(x), True)
        return True

    def on_pointer_move(self, x: float, y: float) -> bool:
        inside = self.bounds.contains(x, y)
        changed = False
        if self.dragging:
            self._set_value(self.position_to_value(x), True)
            changed = True
        if self.hovered != inside:
            self.hovered = inside
            changed = True
        return changed

    def on_pointer_up(self) -> None:
        # Hover state is left for the next pointer move to update.
        self.dragging = False

    def sync_value(self, value: float) -> None:
        """Set the value from the model without calling ``on_change``."""
        self._set_value(value, False)