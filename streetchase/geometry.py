"""Vectors, rectangles, polygon tests and the fixed dimensions of the game world."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

CHUNK_SIZE = 512
LOAD_RADIUS = 2

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
MAP_WIDTH = 4640
MAP_HEIGHT = 4672

MAX_HEALTH = 100


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if isinstance(scalar, Vec2):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        if isinstance(scalar, Vec2):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return self
        return self / length


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def _span(self) -> tuple[float, float, float, float]:
        return (
            min(self.left, self.right),
            max(self.left, self.right),
            min(self.top, self.bottom),
            max(self.top, self.bottom),
        )

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap with a non-empty area."""
        min_x1, max_x1, min_y1, max_y1 = self._span()
        min_x2, max_x2, min_y2, max_y2 = other._span()
        return max(min_x1, min_x2) < min(max_x1, max_x2) and max(min_y1, min_y2) < min(
            max_y1, max_y2
        )

    def contains(self, point: Vec2) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        min_x, max_x, min_y, max_y = self._span()
        return min_x <= point.x < max_x and min_y <= point.y < max_y


MAP_BOUNDS = Rect(0.0, 0.0, 4640.0, 4670.0)

Polygon = Sequence[Vec2]


def point_in_polygon(point: Vec2, polygon: Polygon) -> bool:
    """Even-odd ray casting test of a point against a polygon."""
    if not polygon:
        return False
    inside = False
    previous = polygon[-1]
    for current in polygon:
        crosses = (current.y > point.y) != (previous.y > point.y)
        if crosses:
            edge_x = (previous.x - current.x) * (point.y - current.y) / (
                previous.y - current.y + 0.0001
            ) + current.x
            if point.x < edge_x:
                inside = not inside
        previous = current
    return inside


def is_blocked(pos: Vec2, polygons: Sequence[Polygon]) -> bool:
    """True if the position lies inside any of the polygons."""
    return any(point_in_polygon(pos, polygon) for polygon in polygons)


def polygon_bounds(polygon: Polygon) -> Rect:
    """The smallest rectangle holding every vertex of the polygon."""
    if not polygon:
        raise ValueError("polygon has no vertices")
    xs = [p.x for p in polygon]
    ys = [p.y for p in polygon]
    return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))