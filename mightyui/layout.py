"""Chainable layout helpers for positioning rectangular boxes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum


class HorizontalAlign(Enum):
    """Horizontal alignment."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlign(Enum):
    """Vertical alignment."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Inset:
    """Distances from each edge of a parent."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def union(self, other: Rect) -> Rect:
        """Return the smallest rectangle containing both rectangles."""
        x0 = min(self.x, other.x)
        y0 = min(self.y, other.y)
        x1 = max(self.x + self.width, other.x + other.width)
        y1 = max(self.y + self.height, other.y + other.height)
        return Rect(x0, y0, x1 - x0, y1 - y0)


@dataclass(eq=False)
class Box:
    """A positioned element that may sit inside a parent box."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    parent: Box | None = field(default=None, repr=False)
    visible: bool = True

    def bounds(self) -> Rect:
        """Return the box's rectangle in its parent's coordinates."""
        return Rect(self.x, self.y, self.width, self.height)


class Layout:
    """Applies layout operations to a group of boxes; every operation chains."""

    def __init__(self, *args: Box | Iterable[Box]) -> None:
        self.targets: list[Box] = []
        for arg in args:
            if isinstance(arg, Box):
                self.targets.append(arg)
            else:
                self.targets.extend(arg)

    def __iter__(self) -> Iterator[Box]:
        return iter(self.targets)

    def __len__(self) -> int:
        return len(self.targets)

    def apply(self, func: Callable[[Box], object]) -> Layout:
        for target in self.targets:
            func(target)
        return self

    def x(self, x: float) -> Layout:
        for target in self.targets:
            target.x = x
        return self

    def y(self, y: float) -> Layout:
        for target in self.targets:
            target.y = y
        return self

    def pos(self, x: float, y: float) -> Layout:
        for target in self.targets:
            target.x = x
            target.y = y
        return self

    def pos_tl(self, x: float, y: float) -> Layout:
        return self.pos(x, y)

    def pos_tr(self, x: float, y: float) -> Layout:
        for target in self.targets:
            if target.parent is None:
                continue
            target.x = target.parent.width - x - target.width
            target.y = y
        return self

    def pos_bl(self, x: float, y: float) -> Layout:
        for target in self.targets:
            if target.parent is None:
                continue
            target.x = x
            target.y = target.parent.height - y - target.height
        return self

    def pos_br(self, x: float, y: float) -> Layout:
        for target in self.targets:
            if target.parent is None:
                continue
            target.x = target.parent.width - x - target.width
            target.y = target.parent.height - y - target.height
        return self

    def right_of(self, dest: Box, space: float = 0) -> Layout:
        for target in self.targets:
            target.x = dest.x + dest.width + space
            target.y = dest.y
        return self

    def left_of(self, dest: Box, space: float = 0) -> Layout:
        for target in self.targets:
            target.x = dest.x - target.width - space
            target.y = dest.y
        return self

    def align_left_edge_to(
        self, dest: Box, space: float = 0, align: HorizontalAlign = HorizontalAlign.LEFT
    ) -> Layout:
        for target in self.targets:
            if align is HorizontalAlign.LEFT:
                target.x = dest.x + space
            elif align is HorizontalAlign.RIGHT:
                target.x = dest.x + dest.width - space
            else:
                target.x = dest.x + dest.width / 2 + space
        return self

    def align_horizontal_center_to(
        self, dest: Box, space: float = 0, align: HorizontalAlign = HorizontalAlign.CENTER
    ) -> Layout:
        for target in self.targets:
            if align is HorizontalAlign.LEFT:
                target.x = dest.x + space - target.width / 2
            elif align is HorizontalAlign.RIGHT:
                target.x = dest.x + dest.width - target.width / 2 - space
            else:
                target.x = dest.x + dest.width / 2 - target.width / 2 + space
        return self

    def align_right_edge_to(
        self, dest: Box, space: float = 0, align: HorizontalAlign = HorizontalAlign.RIGHT
    ) -> Layout:
        for target in self.targets:
            if align is HorizontalAlign.LEFT:
                target.x = dest.x - target.width + space
            elif align is HorizontalAlign.RIGHT:
                target.x = dest.x + dest.width - target.width - space
            else:
                target.x = dest.x + dest.width / 2 - target.width + space
        return self

    def align_top_edge_to(
        self, dest: Box, space: float = 0, align: VerticalAlign = VerticalAlign.TOP
    ) -> Layout:
        for target in self.targets:
            if align is VerticalAlign.TOP:
                target.y = dest.y + space
            elif align is VerticalAlign.BOTTOM:
                target.y = dest.y + dest.height - space
            else:
                target.y = dest.y + dest.height / 2 + space
        return self

    def align_vertical_middle_to(
        self, dest: Box, space: float = 0, align: VerticalAlign = VerticalAlign.MIDDLE
    ) -> Layout:
        for target in self.targets:
            if align is VerticalAlign.TOP:
                target.y = dest.y + space - target.height / 2
            elif align is VerticalAlign.BOTTOM:
                target.y = dest.y + dest.height - target.height / 2 - space
            else:
                target.y = dest.y + dest.height / 2 - target.height / 2 + space
        return self

    def align_bottom_edge_to(
        self, dest: Box, space: float = 0, align: VerticalAlign = VerticalAlign.BOTTOM
    ) -> Layout:
        for target in self.targets:
            if align is VerticalAlign.TOP:
                target.y = dest.y - target.height + space
            elif align is VerticalAlign.BOTTOM:
                target.y = dest.y + dest.height - target.height - space
            else:
                target.y = dest.y + dest.height / 2 - target.height + space
        return self

    def align_to_parent(
        self,
        halign: HorizontalAlign = HorizontalAlign.CENTER,
        valign: VerticalAlign = VerticalAlign.MIDDLE,
        inset: Inset | None = None,
    ) -> Layout:
        inset = inset or Inset()
        for target in self.targets:
            parent_w = target.parent.width if target.parent else 0
            parent_h = target.parent.height if target.parent else 0

            if halign is HorizontalAlign.LEFT:
                target.x = inset.left
            elif halign is HorizontalAlign.CENTER:
                target.x = parent_w / 2 - target.width / 2
            else:
                target.x = parent_w - target.width - inset.right

            if valign is VerticalAlign.TOP:
                target.y = inset.top
            elif valign is VerticalAlign.MIDDLE:
                target.y = parent_h / 2 - target.height / 2
            else:
                target.y = parent_h - target.height - inset.bottom
        return self

    def center(self, space: float = 0) -> Layout:
        """Lay the targets out side by side, centred horizontally in the first parent."""
        parent = self.first_parent()
        if parent is None:
            raise ValueError("none of the targets has a parent")
        total = sum(t.width for t in self.targets) + space * (len(self.targets) - 1)
        x0 = parent.width / 2 - total / 2
        for target in self.targets:
            target.x = x0
            x0 += target.width + space
        return self

    def max_width(self, width: float) -> Layout:
        for target in self.targets:
            target.width = min(width, target.width)
        return self

    def width(self, width: float) -> Layout:
        for target in self.targets:
            target.width = width
        return self

    def height(self, height: float) -> Layout:
        for target in self.targets:
            target.height = height
        return self

    def size(self, width: float, height: float) -> Layout:
        for target in self.targets:
            target.width = width
            target.height = height
        return self

    def stretch_to_top_edge_of_parent(self, space: float = 0) -> Layout:
        for target in self.targets:
            target.height += target.y - space
            target.y = space
        return self

    def stretch_to_left_edge_of_parent(self, space: float = 0) -> Layout:
        for target in self.targets:
            target.width += target.x - space
            target.x = space
        return self

    def stretch_to_right_edge_of_parent(self, space: float = 0) -> Layout:
        for target in self.targets:
            if target.parent is None:
                continue
            target.width = target.parent.width - space - target.x
        return self

    def stretch_to_bottom_edge_of_parent(self, space: float = 0) -> Layout:
        for target in self.targets:
            if target.parent is None:
                continue
            target.height = target.parent.height - space - target.y
        return self

    def width_to(self, dest: Box, space: float = 0) -> Layout:
        for target in self.targets:
            target.width = dest.x - target.x - space
        return self

    def height_to(self, dest: Box, space: float = 0) -> Layout:
        for target in self.targets:
            target.height = dest.y - target.y - space
        return self

    def below(self, dest: Box, space: float = 0) -> Layout:
        for target in self.targets:
            target.x = dest.x
            target.y = dest.y + dest.height + space
        return self

    def above(self, dest: Box, space: float = 0) -> Layout:
        for target in self.targets:
            target.x = dest.x
            target.y = dest.y - target.height - space
        return self

    def move_by(self, x: float, y: float) -> Layout:
        for target in self.targets:
            target.x += x
            target.y += y
        return self

    def spread_evenly_horizontally(self, x: float, width: float, padding: float = 0) -> Layout:
        """Split the span into equal widths separated by padding."""
        n = len(self.targets)
        if n == 1:
            self.targets[0].x = x
            self.targets[0].width = width
        elif n > 1:
            w = (width - (n - 1) * padding) / n
            for i, target in enumerate(self.targets):
                target.x = x + i * (w + padding)
                target.width = w
        return self

    def spread_horizontally_aligned(self, x: float, width: float, align: HorizontalAlign) -> Layout:
        """Place each target in an equal slot, aligned within it; widths are kept."""
        n = len(self.targets)
        if n > 0:
            w = width / n
            move = _ALIGN_FRACTION[align]
            for i, target in enumerate(self.targets):
                target.x = x + i * w + (w - target.width) * move
        return self

    def spread_evenly_vertically(self, y: float, height: float, padding: float = 0) -> Layout:
        """Split the span into equal heights separated by padding."""
        n = len(self.targets)
        if n == 1:
            self.targets[0].y = y
            self.targets[0].height = height
        elif n > 1:
            h = (height - (n - 1) * padding) / n
            for i, target in enumerate(self.targets):
                target.y = y + i * (h + padding)
                target.height = h
        return self

    def spread_vertically_aligned(self, y: float, height: float, align: VerticalAlign) -> Layout:
        """Place each target in an equal slot, aligned within it; heights are kept."""
        n = len(self.targets)
        if n > 0:
            h = height / n
            move = _ALIGN_FRACTION[align]
            for i, target in enumerate(self.targets):
                target.y = y + i * h + (h - target.height) * move
        return self

    def columns(self, x: float, y: float, spacing: float = 1) -> Layout:
        for target in self.targets:
            target.x = x
            target.y = y
            x += target.width + spacing
        return self

    def columns_from_right(self, x: float, y: float, spacing: float = 1) -> Layout:
        for target in reversed(self.targets):
            target.x = x - target.width
            target.y = y
            x -= target.width + spacing
        return self

    def rows(self, x: float, y: float, spacing: float = 1) -> Layout:
        for target in self.targets:
            target.x = x
            target.y = y
            y += target.height + spacing
        return self

    def bounds(self, x: float, y: float, w: float, h: float) -> Layout:
        for target in self.targets:
            target.x = x
            target.y = y
            target.width = w
            target.height = h
        return self

    def filter_visible(self) -> Layout:
        return Layout([t for t in self.targets if t.visible])

    def filter(self, predicate: Callable[[Box], bool]) -> Layout:
        return Layout([t for t in self.targets if predicate(t)])

    def first(self) -> Box | None:
        return self.targets[0] if self.targets else None

    def last(self) -> Box | None:
        return self.targets[-1] if self.targets else None

    def first_parent(self) -> Box | None:
        return next((t.parent for t in self.targets if t.parent is not None), None)

    def bounding_box(self) -> Rect:
        """Return the union of all target rectangles, or an empty rectangle."""
        result: Rect | None = None
        for target in self.targets:
            rect = target.bounds()
            result = rect if result is None else result.union(rect)
        return result if result is not None else Rect()

    def __add__(self, other: Layout) -> Layout:
        return Layout(self.targets + other.targets)

    def __iadd__(self, other: Layout) -> Layout:
        self.targets.extend(other.targets)
        return self


_ALIGN_FRACTION = {
    HorizontalAlign.LEFT: 0.0,
    HorizontalAlign.CENTER: 0.5,
    HorizontalAlign.RIGHT: 1.0,
    VerticalAlign.TOP: 0.0,
    VerticalAlign.MIDDLE: 0.5,
    VerticalAlign.BOTTOM: 1.0,
}