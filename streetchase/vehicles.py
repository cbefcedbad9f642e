"""Cars that drive along roads and police cars that follow patrol routes."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from streetchase.geometry import Vec2
from streetchase.objects import MovingObject
from streetchase.roads import RoadSegment

logger = logging.getLogger(__name__)

Polygons = Sequence[Sequence[Vec2]]

TURN_RATE = 0.7
WAYPOINT_REACHED = 5.0
_PI_APPROX = 3.14159

_DIRECTIONS: dict[str, tuple[Vec2, float]] = {
    "up": (Vec2(0.0, -1.0), 0.0),
    "down": (Vec2(0.0, 1.0), 180.0),
    "left": (Vec2(-1.0, 0.0), 270.0),
    "right": (Vec2(1.0, 0.0), 90.0),
}


def bezier(t: float, p0: Vec2, p1: Vec2, p2: Vec2) -> Vec2:
    """The point at parameter t on the quadratic Bezier curve p0, p1, p2."""
    u = 1.0 - t
    return p0 * (u * u) + p1 * (2.0 * u * t) + p2 * (t * t)


def _heading_angle(direction: Vec2) -> float:
    return math.atan2(direction.y, direction.x) * 180.0 / _PI_APPROX + 90.0


class Vehicle(MovingObject):
    """A car driving straight along its lane or following a curved turn."""

    speed = 70.0

    def __init__(self, position: Vec2 = Vec2(300.0, 300.0)) -> None:
        super().__init__(position)
        self.speed = type(self).speed
        self.direction = ""
        self.direction_vec = Vec2()
        self.rotation = 0.0
        self.scale = (1.0, 1.0)
        self.in_turn = False
        self.bezier_t = 0.0
        self.bezier_points = (Vec2(), Vec2(), Vec2())
        self.current_road: RoadSegment | None = None
        self.previous_road: RoadSegment | None = None
        self.current_lane_index = 0

    def update(self, dt: float, blocked_polygons: Polygons) -> None:
        """Advance along the current turn, or straight ahead when not turning."""
        if self.in_turn:
            self.bezier_t += dt * TURN_RATE
            if self.bezier_t >= 1.0:
                self.bezier_t = 1.0
                self.in_turn = False
                self.set_direction(self.direction)
                if self.current_road is not None:
                    self.position = self.current_road.lane_edge(self.current_lane_index, True)

            p0, p1, p2 = self.bezier_points
            t = self.bezier_t
            tangent = (p1 - p0) * (2.0 * (1.0 - t)) + (p2 - p1) * (2.0 * t)
            self.rotation = _heading_angle(tangent)
            self.position = bezier(t, p0, p1, p2)
        else:
            heading = self.direction_vec.normalized()
            self.position = self.position + heading * self.speed * dt
            self.rotation = _heading_angle(heading)

    def move(self, direction: Vec2, dt: float) -> None:
        self.position = self.position + direction * self.speed * dt

    def set_direction(self, direction: str) -> None:
        """Face "up", "down", "left" or "right"; anything else stands still."""
        self.direction = direction
        self.direction_vec, self.rotation = _DIRECTIONS.get(direction, (Vec2(), 0.0))

    def start_turn(self, start: Vec2, control: Vec2, end: Vec2) -> None:
        """Begin a curved turn from start to end bent toward control."""
        self.bezier_points = (start, control, end)
        self.bezier_t = 0.0
        self.in_turn = True
        self.position = start
        logger.debug("start turn from %s control %s to %s", start, control, end)

    def stop(self) -> None:
        self.speed = 0.0


class PoliceCar(MovingObject):
    """A police car driving round a closed list of waypoints."""

    speed = 80.0

    def __init__(self, position: Vec2 = Vec2()) -> None:
        super().__init__(position)
        self.rotation = 0.0
        self.current_point = 0
        self.scale = 0.2

    def update(self, dt: float, patrol_path: Sequence[Vec2]) -> None:
        """Drive toward the current waypoint, moving on to the next once close."""
        if not patrol_path:
            return
        target = patrol_path[self.current_point % len(patrol_path)]
        offset = target - self.position
        distance = offset.length()
        if distance < WAYPOINT_REACHED:
            self.current_point = (self.current_point + 1) % len(patrol_path)
            return
        heading = offset / distance
        self.rotation = _heading_angle(heading)
        self.move(heading, dt)

    def move(self, direction: Vec2, dt: float) -> None:
        self.position = self.position + direction * self.speed * dt