"""Road segments with lanes that vehicles drive along."""

from __future__ import annotations

from dataclasses import dataclass

from streetchase.geometry import Rect, Vec2


@dataclass
class RoadSegment:
    """A rectangular stretch of road running "up", "down", "left" or "right"."""

    bounds: Rect
    direction: str = ""
    lanes: int = 1
    is_2d: bool = False

    def _reversed(self, lane_index: int) -> bool:
        # On two-way roads the first half of the lanes run against the direction.
        return self.is_2d and self.lanes > 1 and lane_index < self.lanes // 2

    def lane_center(self, lane_index: int) -> Vec2:
        """The entry point of a lane, centred across it."""
        reverse = self._reversed(lane_index)
        b = self.bounds
        if self.direction in ("up", "down"):
            x = b.left + b.width / self.lanes * (lane_index + 0.5)
            at_bottom = (self.direction == "up") != reverse
            return Vec2(x, b.bottom if at_bottom else b.top)
        y = b.top + b.height / self.lanes * (lane_index + 0.5)
        at_left = (self.direction == "right" and not reverse) or (
            self.direction == "left" and reverse
        )
        return Vec2(b.left if at_left else b.right, y)

    def lane_edge(self, lane_index: int, at_start: bool) -> Vec2:
        """The start or end point of a lane in its travel direction."""
        start = not at_start if self._reversed(lane_index) else at_start
        b = self.bounds
        if self.direction in ("up", "down"):
            x = b.left + b.width / self.lanes * (lane_index + 0.5)
            if self.direction == "up":
                return Vec2(x, b.bottom if start else b.top)
            return Vec2(x, b.top if start else b.bottom)
        if self.direction in ("left", "right"):
            y = b.top + b.height / self.lanes * (lane_index + 0.5)
            if self.direction == "left":
                return Vec2(b.right if start else b.left, y)
            return Vec2(b.left if start else b.right, y)
        return Vec2(b.left, b.top)