"""Geometry of a simple oscilloscope-style waveform view."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from satoriui.layout import Rect

Point = tuple[float, float]
Segment = tuple[Point, Point]

_AMPLITUDE_SCALE = 0.45


def _clamp_sample(value: float) -> float:
    return max(-1.0, min(1.0, value))


@dataclass
class WaveformView:
    """Samples in [-1, 1] drawn as a polyline across ``bounds``."""

    bounds: Rect = field(default_factory=Rect)
    samples: list[float] = field(default_factory=list)

    def midline(self) -> Optional[Segment]:
        """The horizontal zero line, or None when the bounds have no area."""
        if self.bounds.width() <= 0.0 or self.bounds.height() <= 0.0:
            return None
        mid_y = self.bounds.top + self.bounds.height() * 0.5
        return (self.bounds.left, mid_y), (self.bounds.right, mid_y)

    def segments(self) -> list[Segment]:
        """Line segments joining consecutive samples, spread over the width."""
        width = self.bounds.width()
        height = self.bounds.height()
        if width <= 0.0 or height <= 0.0 or len(self.samples) < 2:
            return []
        mid_y = self.bounds.top + height * 0.5
        scale_y = height * _AMPLITUDE_SCALE
        step = width / (len(self.samples) - 1)
        points = [
            (self.bounds.left + step * i, mid_y - _clamp_sample(s) * scale_y)
            for i, s in enumerate(self.samples)
        ]
        return list(zip(points, points[1:]))