"""Police officers who wander the map and chase the player when close."""

from __future__ import annotations

import logging
import math
import random
from enum import Enum
from typing import Sequence

from streetchase.geometry import MAP_BOUNDS, Rect, Vec2, is_blocked
from streetchase.objects import Character
from streetchase.pathfinder import find_path

logger = logging.getLogger(__name__)

Polygons = Sequence[Sequence[Vec2]]

PATHFINDING_GRID_SIZE = 32.0
FRAMES_PER_ROW = 6
POLICE_SCALE = 0.07
RADIUS_FACTOR = 0.8
MOVE_STEP = 5.0
COLLISION_STEPS = 5
CHASE_HYSTERESIS = 30.0
WANDER_MIN_RADIUS = 100.0
WANDER_RADIUS_RANGE = 400.0
WANDER_MAX_TRIES = 20
CHASE_FAIL_COOLDOWN = 3.0
IDLE_FAIL_COOLDOWN = 1.0
REPATH_INTERVAL = 1.0
START_POSITION = Vec2(100.0, 100.0)
DEFAULT_SHEET_SIZE = Vec2(1200.0, 200.0)


class PoliceState(Enum):
    """What an officer is doing."""

    IDLE = "idle"
    CHASING = "chasing"
    BACKING_UP = "backing_up"


class Police(Character):
    """An officer who follows grid paths to a wander point or to the player."""

    speed = 40.0

    def __init__(
        self,
        target: Vec2,
        rng: random.Random | None = None,
        position: Vec2 = START_POSITION,
        sheet_size: Vec2 = DEFAULT_SHEET_SIZE,
    ) -> None:
        super().__init__(position)
        self._rng = rng if rng is not None else random.Random()
        self.target = target
        self.frame_width = int(sheet_size.x) // FRAMES_PER_ROW
        self.frame_height = int(sheet_size.y)
        self.scale = POLICE_SCALE
        self.rotation = 0.0
        self.detection_radius = 100.0
        self.state = PoliceState.IDLE
        self.back_up_distance = 30.0
        self.backed_up_so_far = 0.0
        self.back_up_direction = Vec2()
        self.current_frame = 0
        self.animation_timer = 0.0
        self.animation_speed = 0.13
        self.current_path: list[Vec2] = []
        self.current_path_index = 0
        self.repath_timer = 0.0
        self.path_fail_cooldown = 0.0
        self.wander_destination = Vec2()
        self._set_random_wander_destination(MAP_BOUNDS)

    @property
    def frame_rect(self) -> tuple[int, int, int, int]:
        """The sprite sheet cell showing the current frame."""
        return (
            self.current_frame * self.frame_width,
            0,
            self.frame_width,
            self.frame_height,
        )

    def update(self, dt: float, blocked_polygons: Polygons) -> None:
        self.repath_timer += dt
        if self.path_fail_cooldown > 0.0:
            self.path_fail_cooldown -= dt

        dist_to_target = (self.target - self.position).length()
        if dist_to_target <= self.detection_radius:
            if self.state is not PoliceState.CHASING:
                self.state = PoliceState.CHASING
                self.current_frame = 0
                self._clear_path()
                self.repath_timer = REPATH_INTERVAL
                logger.debug("police switched to chasing")
        elif (
            self.state is PoliceState.CHASING
            and dist_to_target > self.detection_radius + CHASE_HYSTERESIS
        ):
            self.state = PoliceState.IDLE
            self.current_frame = 0
            self._clear_path()
            self._set_random_wander_destination(MAP_BOUNDS)
            logger.debug("police switched to idle")

        if self.state is PoliceState.BACKING_UP:
            self._back_up(dt, blocked_polygons)
            return

        if self.state is PoliceState.CHASING:
            if self.path_fail_cooldown <= 0.0 and (
                not self._following_path() or self.repath_timer > REPATH_INTERVAL
            ):
                self._plan_path(self.target, blocked_polygons)
                if not self.current_path:
                    logger.debug("police failed to find a path to the player")
                    self.path_fail_cooldown = CHASE_FAIL_COOLDOWN
        elif self.state is PoliceState.IDLE:
            if not self._following_path() and self.path_fail_cooldown <= 0.0:
                self._plan_path(self.wander_destination, blocked_polygons)
                if not self.current_path:
                    logger.debug("police failed to find a path to its wander point")
                    self.path_fail_cooldown = IDLE_FAIL_COOLDOWN
                    self._set_random_wander_destination(MAP_BOUNDS)

        if self._following_path():
            waypoint = self.current_path[self.current_path_index]
            if self.move_toward(waypoint, dt, blocked_polygons):
                self.state = PoliceState.BACKING_UP
                self.backed_up_so_far = 0.0
                offset = waypoint - self.position
                length = offset.length()
                if length > 0.01:
                    self.back_up_direction = -(offset / length)
                return

            if (waypoint - self.position).length() < PATHFINDING_GRID_SIZE / 2.0:
                self.current_path_index += 1
                if self.current_path_index >= len(self.current_path):
                    self._clear_path()
                    if self.state is PoliceState.IDLE:
                        self._set_random_wander_destination(MAP_BOUNDS)

        self.animation_timer += dt
        if self.animation_timer >= self.animation_speed:
            self.animation_timer = 0.0
            if self._following_path():
                self.current_frame = (self.current_frame + 1) % FRAMES_PER_ROW
            else:
                self.current_frame = 0

    def move_toward(self, target: Vec2, dt: float, blocked_polygons: Polygons) -> bool:
        """Step toward the target; True if an obstacle was hit and nothing moved."""
        current = self.position
        offset = target - current
        length = offset.length()
        if length < 0.01:
            return False
        direction = offset / length
        distance = min(self.speed * dt, length)

        traveled = 0.0
        while traveled < distance:
            segment = min(MOVE_STEP, distance - traveled)
            # Each probe is measured from the last probe, not from the start.
            next_pos = current + direction * (traveled + segment)
            if self._check_collision(current, next_pos, blocked_polygons):
                logger.debug("police collision after %.1f units", traveled)
                return True
            current = next_pos
            traveled += MOVE_STEP

        self.rotation = math.degrees(math.atan2(direction.y, direction.x)) - 270.0
        self.position = current
        return False

    def take_damage(self, amount: int) -> None:
        self.health = max(self.health - amount, 0)

    def is_dead(self) -> bool:
        return self.health <= 0

    def collision_radius(self) -> float:
        """Half the scaled frame width, slightly reduced."""
        return self.frame_width * self.scale / 2.0 * RADIUS_FACTOR

    def set_target(self, pos: Vec2) -> None:
        self.target = pos

    def _following_path(self) -> bool:
        return bool(self.current_path) and self.current_path_index < len(self.current_path)

    def _clear_path(self) -> None:
        self.current_path = []
        self.current_path_index = 0

    def _plan_path(self, goal: Vec2, blocked_polygons: Polygons) -> None:
        self.current_path = find_path(
            self.position, goal, blocked_polygons, MAP_BOUNDS, PATHFINDING_GRID_SIZE
        )
        self.current_path_index = 0
        self.repath_timer = 0.0
        logger.debug("police path to %s has %d points", goal, len(self.current_path))

    def _back_up(self, dt: float, blocked_polygons: Polygons) -> None:
        step = self.speed * dt
        if self.backed_up_so_far < self.back_up_distance:
            current = self.position
            next_pos = current + self.back_up_direction * step
            if self._check_collision(current, next_pos, blocked_polygons):
                self._clear_path()
                self._set_random_wander_destination(MAP_BOUNDS)
                self.state = PoliceState.IDLE
                self.backed_up_so_far = 0.0
                return
            self.position = next_pos
            self.backed_up_so_far += step
            self.rotation = (
                math.degrees(math.atan2(self.back_up_direction.y, self.back_up_direction.x))
                - 270.0
            )
        else:
            self.backed_up_so_far = 0.0
            self.state = PoliceState.IDLE
            self._clear_path()
            self._set_random_wander_destination(MAP_BOUNDS)

    def _set_random_wander_destination(self, map_bounds: Rect) -> None:
        destination = None
        for _ in range(WANDER_MAX_TRIES):
            angle = self._rng.random() * 2.0 * math.pi
            radius = WANDER_MIN_RADIUS + self._rng.random() * WANDER_RADIUS_RANGE
            candidate = self.position + Vec2(math.cos(angle), math.sin(angle)) * radius
            if map_bounds.contains(candidate):
                destination = candidate
                break
        if destination is None:
            destination = Vec2(map_bounds.width / 2.0, map_bounds.height / 2.0)
        self.wander_destination = destination
        self._clear_path()
        self.repath_timer = 0.0
        self.path_fail_cooldown = 0.0

    @staticmethod
    def _check_collision(current: Vec2, target: Vec2, blocked_polygons: Polygons) -> bool:
        return any(
            is_blocked(current + (target - current) * (i / COLLISION_STEPS), blocked_polygons)
            for i in range(1, COLLISION_STEPS + 1)
        )