"""Pedestrians wandering the streets, and the group that owns them."""

from __future__ import annotations

import math
import random
from typing import Sequence

from streetchase.geometry import Vec2, is_blocked
from streetchase.objects import MovingObject

Polygons = Sequence[Sequence[Vec2]]

FRAME_WIDTH = 64
FRAME_HEIGHT = 64
FRAMES_PER_ROW = 3
NUM_CHARACTERS = 7
TURN_SPEED = 3.0
COLLISION_STEPS = 5
FALLBACK_POSITION = Vec2(100.0, 100.0)


class Pedestrian(MovingObject):
    """A person who walks, turns, pauses and backs away from obstacles."""

    speed = 50.0

    def __init__(self, position: Vec2, rng: random.Random | None = None) -> None:
        super().__init__(position)
        self._rng = rng if rng is not None else random.Random()
        self.character_row = self._rng.randrange(NUM_CHARACTERS)
        self.current_frame = 0
        self.rotation = 0.0
        self.animation_timer = 0.0
        self.animation_speed = 0.12
        self.time_since_last_direction_change = 0.0
        self.direction_change_interval = 2.0
        self.backup_distance = 30.0
        self.is_backing_up = False
        self.backup_progress = 0.0
        self.is_idle = False
        self.idle_timer = 0.0
        self.idle_duration_min = 1.0
        self.idle_duration_max = 3.0
        self.idle_probability = 0.15
        self.direction = Vec2()
        self._set_random_direction()
        self.next_direction = self.direction

    @property
    def frame_rect(self) -> tuple[int, int, int, int]:
        """The sprite sheet cell showing the current frame."""
        return (
            self.current_frame * FRAME_WIDTH,
            self.character_row * FRAME_HEIGHT,
            FRAME_WIDTH,
            FRAME_HEIGHT,
        )

    def start_backing_up(self) -> None:
        self.is_backing_up = True
        self.backup_progress = 0.0

    def update(self, dt: float, blocked_polygons: Polygons) -> None:
        step = self.speed * dt

        if self.is_backing_up:
            self._back_up(step, blocked_polygons)
            return

        if self.is_idle:
            self.idle_timer -= dt
            if self.idle_timer <= 0.0:
                self.is_idle = False
                self._pick_fresh_direction()
            return

        self.time_since_last_direction_change += dt
        if self.time_since_last_direction_change >= self.direction_change_interval:
            self.time_since_last_direction_change = 0.0
            if self._rng.randrange(1000) / 1000.0 < self.idle_probability:
                self.is_idle = True
                self.idle_timer = self.idle_duration_min + self._rng.random() * (
                    self.idle_duration_max - self.idle_duration_min
                )
                self.direction = Vec2()
                return
            self.next_direction = self._random_heading()

        blended = self.direction + (self.next_direction - self.direction) * TURN_SPEED * dt
        if blended.length() > 0.001:
            self.direction = blended.normalized()
        else:
            self._set_random_direction()

        next_pos = self.position + self.direction * step
        if self._check_collision(self.position, next_pos, blocked_polygons):
            self.start_backing_up()
        else:
            self.position = next_pos

        moving = abs(self.direction.x) > 0.01 or abs(self.direction.y) > 0.01
        self.animation_timer += dt
        if self.animation_timer >= self.animation_speed:
            self.animation_timer = 0.0
            if moving:
                self.current_frame = 2 if self.current_frame == 1 else 1
            else:
                self.current_frame = 0

        if moving:
            angle = math.degrees(math.atan2(self.direction.y, self.direction.x))
            self.rotation = angle + 270.0
        else:
            self.rotation = 90.0

    def move(self, direction: Vec2, dt: float) -> None:
        self.position = self.position + direction * self.speed * dt

    def collision_radius(self) -> float:
        return 10.0

    def _back_up(self, step: float, blocked_polygons: Polygons) -> None:
        move_step = min(step, self.backup_distance - self.backup_progress)
        next_pos = self.position + (-self.direction) * move_step
        if self._check_collision(self.position, next_pos, blocked_polygons):
            self._finish_backing_up()
            return
        self.position = next_pos
        self.backup_progress += move_step
        if self.backup_progress >= self.backup_distance:
            self._finish_backing_up()

    def _finish_backing_up(self) -> None:
        self.is_backing_up = False
        self.backup_progress = 0.0
        self._pick_fresh_direction()

    def _pick_fresh_direction(self) -> None:
        self._set_random_direction()
        self.next_direction = self.direction

    def _random_heading(self) -> Vec2:
        while True:
            heading = Vec2(
                (self._rng.randrange(201) - 100) / 100.0,
                (self._rng.randrange(201) - 100) / 100.0,
            )
            if heading.length() > 0.001:
                heading = heading.normalized()
            if heading != Vec2():
                return heading

    def _set_random_direction(self) -> None:
        while True:
            candidate = Vec2(
                float(self._rng.randrange(3) - 1), float(self._rng.randrange(3) - 1)
            )
            if candidate != Vec2():
                break
        self.direction = candidate.normalized()

    @staticmethod
    def _check_collision(current: Vec2, target: Vec2, blocked_polygons: Polygons) -> bool:
        return any(
            is_blocked(current + (target - current) * (i / COLLISION_STEPS), blocked_polygons)
            for i in range(1, COLLISION_STEPS + 1)
        )


class PedestrianManager:
    """Owns every pedestrian and advances them together."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.pedestrians: list[Pedestrian] = []

    def spawn_pedestrian(self, pos: Vec2) -> Pedestrian:
        pedestrian = Pedestrian(pos, self._rng)
        self.pedestrians.append(pedestrian)
        return pedestrian

    def spawn_multiple(
        self, count: int, blocked_polygons: Polygons, map_width: int, map_height: int
    ) -> None:
        """Place count pedestrians at random unblocked spots on the map."""
        for _ in range(count):
            pos = self._valid_position(blocked_polygons, map_width, map_height)
            self.spawn_pedestrian(pos)

    def update(self, dt: float, blocked_polygons: Polygons) -> None:
        for pedestrian in self.pedestrians:
            pedestrian.update(dt, blocked_polygons)

    def _valid_position(
        self,
        blocked_polygons: Polygons,
        map_width: int,
        map_height: int,
        max_attempts: int = 100,
    ) -> Vec2:
        for _ in range(max_attempts):
            pos = Vec2(
                float(self._rng.randrange(map_width)), float(self._rng.randrange(map_height))
            )
            if not is_blocked(pos, blocked_polygons):
                return pos
        return FALLBACK_POSITION