"""Geometry primitives and the layout tree: stack panels and overlays."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its edges."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    def width(self) -> float:
        return self.right - self.left

    def height(self) -> float:
        return self.bottom - self.top

    def is_valid(self) -> bool:
        """True when the rectangle has positive width and height."""
        return self.right > self.left and self.bottom > self.top

    def inset(self, amount: float) -> Rect:
        """Return the rectangle shrunk by ``amount`` on every side."""
        return Rect(
            self.left + amount,
            self.top + amount,
            self.right - amount,
            self.bottom - amount,
        )

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies inside or on the edge."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom


class SizeMode(enum.Enum):
    AUTO = "auto"
    FIXED = "fixed"
    PERCENT = "percent"


@dataclass(frozen=True)
class SizeSpec:
    """How a stack item is sized: pixels for FIXED, a fraction for PERCENT."""

    mode: SizeMode = SizeMode.AUTO
    value: float = 0.0
    min_height: float = 0.0


class LayoutNode(abc.ABC):
    """A node of the layout tree that receives bounds and pointer events."""

    def __init__(self) -> None:
        self.bounds = Rect()

    @abc.abstractmethod
    def preferred_height(self, width: float) -> float:
        """Height the node would like when laid out at ``width``."""

    def minimum_height(self) -> float:
        return 0.0

    def arrange(self, bounds: Rect) -> None:
        self.bounds = bounds

    def on_pointer_down(self, x: float, y: float) -> bool:
        return False

    def on_pointer_move(self, x: float, y: float) -> bool:
        return False

    def on_pointer_up(self) -> None:
        pass


@dataclass
class StackItem:
    """A child of a stack panel together with its size rule."""

    node: Optional[LayoutNode]
    size: SizeSpec = field(default_factory=SizeSpec)


class StackPanel(LayoutNode):
    """Arranges its items top to bottom with fixed spacing between them."""

    def __init__(self, spacing: float = 12.0) -> None:
        super().__init__()
        self.spacing = spacing
        self._items: list[StackItem] = []
        self._cached_width = 0.0
        self._cached_preferred_height = 0.0

    @property
    def items(self) -> tuple[StackItem, ...]:
        return tuple(self._items)

    def set_items(self, items: Iterable[StackItem]) -> None:
        self._items = list(items)
        self._cached_width = 0.0
        self._cached_preferred_height = 0.0

    def _nodes(self) -> list[LayoutNode]:
        return [item.node for item in self._items if item.node is not None]

    def preferred_height(self, width: float) -> float:
        if (
            abs(width - self._cached_width) < 1e-3
            and self._cached_preferred_height > 0.0
        ):
            return self._cached_preferred_height
        self._cached_width = width
        total = 0.0
        for item in self._items:
            if item.size.mode is SizeMode.FIXED:
                total += item.size.value
            elif item.size.mode is SizeMode.PERCENT:
                # Without the container height only the minimum is known.
                total += item.size.min_height
            elif item.node is not None:
                total += max(item.node.preferred_height(width), item.size.min_height)
            total += self.spacing
        if self._items:
            total -= self.spacing
        self._cached_preferred_height = max(0.0, total)
        return self._cached_preferred_height

    def minimum_height(self) -> float:
        total = sum(item.size.min_height for item in self._items)
        if self._items:
            total += self.spacing * (len(self._items) - 1)
        return total

    def _total_fixed_height(self) -> float:
        total = sum(
            item.size.value for item in self._items if item.size.mode is SizeMode.FIXED
        )
        if self._items:
            total += self.spacing * (len(self._items) - 1)
        return total

    def _total_percent_height(self, container_height: float) -> float:
        return sum(
            container_height * item.size.value
            for item in self._items
            if item.size.mode is SizeMode.PERCENT
        )

    def arrange(self, bounds: Rect) -> None:
        super().arrange(bounds)
        width = bounds.width()
        height = bounds.height()

        fixed = self._total_fixed_height()
        percent = self._total_percent_height(height)
        remaining = max(0.0, height - fixed - percent)

        auto_heights = [
            max(item.node.preferred_height(width), item.size.min_height)
            if item.size.mode is SizeMode.AUTO and item.node is not None
            else 0.0
            for item in self._items
        ]
        auto_desired = sum(auto_heights)

        scale = 1.0
        if auto_desired > 0.0 and remaining > 0.0 and auto_desired > remaining:
            scale = remaining / auto_desired

        y = bounds.top
        for item, auto_height in zip(self._items, auto_heights):
            if item.size.mode is SizeMode.FIXED:
                child_height = item.size.value
            elif item.size.mode is SizeMode.PERCENT:
                child_height = height * item.size.value
            else:
                child_height = max(item.size.min_height, min(auto_height * scale, remaining))
            child_height = max(0.0, min(child_height, bounds.bottom - y))
            if item.node is not None:
                item.node.arrange(
                    Rect(bounds.left, y, bounds.left + width, y + child_height)
                )
            y += child_height + self.spacing
            if y >= bounds.bottom:
                break

    def on_pointer_down(self, x: float, y: float) -> bool:
        return any(node.on_pointer_down(x, y) for node in self._nodes())

    def on_pointer_move(self, x: float, y: float) -> bool:
        results = [node.on_pointer_move(x, y) for node in self._nodes()]
        return any(results)

    def on_pointer_up(self) -> None:
        for node in self._nodes():
            node.on_pointer_up()


class Overlay(LayoutNode):
    """Stacks its children on top of one another in the same bounds."""

    def __init__(self, children: Iterable[Optional[LayoutNode]] = ()) -> None:
        super().__init__()
        self.children: list[LayoutNode] = [c for c in children if c is not None]

    def preferred_height(self, width: float) -> float:
        return max(
            (child.preferred_height(width) for child in self.children),
            default=0.0,
        )

    def arrange(self, bounds: Rect) -> None:
        super().arrange(bounds)
        for child in self.children:
            child.arrange(bounds)

    def on_pointer_down(self, x: float, y: float) -> bool:
        return any(child.on_pointer_down(x, y) for child in self.children)

    def on_pointer_move(self, x: float, y: float) -> bool:
        results = [child.on_pointer_move(x, y) for child in self.children]
        return any(results)

    def on_pointer_up(self) -> None:
        for child in self.children:
            child.on_pointer_up()