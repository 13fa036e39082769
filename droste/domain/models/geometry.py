# droste/domain/models/geometry.py
"""
Geometry primitives: points and axis-aligned rectangles.

All coordinates are normalized. A viewport point lies in 0..1 on both axes,
and a pattern rectangle is expressed in the 0..1 frame of its container.
"""
from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Point:
    """A point in some normalized coordinate frame."""
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle in canonical form.

    Attributes:
        min_x, min_y: Top-left corner
        max_x, max_y: Bottom-right corner, never smaller than the top-left one
    """
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def is_degenerate(self) -> bool:
        """True when the rectangle has no area and cannot act as a frame."""
        return self.width <= 0.0 or self.height <= 0.0

    def contains(self, point: Point, strict: bool = True) -> bool:
        """
        Check whether ``point`` lies inside the rectangle.

        Args:
            point: Point expressed in the same frame as the rectangle
            strict: When True, points on the boundary are outside
        """
        if strict:
            return self.min_x < point.x < self.max_x and self.min_y < point.y < self.max_y
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def corners(self) -> Tuple[Point, Point]:
        """Return the (top-left, bottom-right) corners."""
        return Point(self.min_x, self.min_y), Point(self.max_x, self.max_y)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


def normalize_rect(p1: Point, p2: Point) -> Rect:
    """
    Build the canonical rectangle spanned by two arbitrary corner points.

    The drag direction does not matter. ``p1 == p2`` yields a degenerate
    rectangle; filtering those out is up to the caller.
    """
    return Rect(
        min_x=min(p1.x, p2.x),
        min_y=min(p1.y, p2.y),
        max_x=max(p1.x, p2.x),
        max_y=max(p1.y, p2.y),
    )


def boundaries_of(rect: Rect) -> Rect:
    """Return the boundary rectangle of a screen or pattern."""
    return rect
