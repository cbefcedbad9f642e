"""A region quadtree of items keyed by their bounding rectangles."""

from __future__ import annotations

from typing import Generic, TypeVar

from streetchase.geometry import MAP_HEIGHT, MAP_WIDTH, Rect

T = TypeVar("T")

DEFAULT_BOUNDARY = Rect(0.0, 0.0, float(MAP_WIDTH), float(MAP_HEIGHT))


class QuadTree(Generic[T]):
    """Stores items by area and finds those overlapping a query rectangle."""

    def __init__(
        self,
        boundary: Rect = DEFAULT_BOUNDARY,
        capacity: int = 4,
        level: int = 0,
        max_level: int = 10,
    ) -> None:
        self.boundary = boundary
        self.capacity = capacity
        self.level = level
        self.max_level = max_level
        self._items: list[tuple[Rect, T]] = []
        self._nodes: list[QuadTree[T]] = []

    def insert(self, bounds: Rect, item: T) -> bool:
        """Store the item; False if its bounds miss this tree's boundary."""
        if not self.boundary.intersects(bounds):
            return False
        if len(self._items) < self.capacity or self.level >= self.max_level:
            self._items.append((bounds, item))
            return True
        if not self._nodes:
            self._subdivide()
        return any(node.insert(bounds, item) for node in self._nodes)

    def query(self, area: Rect) -> list[T]:
        """All items whose bounds overlap the area."""
        if not self.boundary.intersects(area):
            return []
        found = [item for bounds, item in self._items if area.intersects(bounds)]
        for node in self._nodes:
            found.extend(node.query(area))
        return found

    def clear(self) -> None:
        """Remove every item and child node."""
        self._items.clear()
        self._nodes.clear()

    def _subdivide(self) -> None:
        x, y = self.boundary.left, self.boundary.top
        w, h = self.boundary.width / 2.0, self.boundary.height / 2.0
        self._nodes = [
            QuadTree(Rect(left, top, w, h), self.capacity, self.level + 1, self.max_level)
            for left, top in ((x, y), (x + w, y), (x, y + h), (x + w, y + h))
        ]