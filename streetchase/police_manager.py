"""The group of police officers in the world."""

from __future__ import annotations

import logging
import math
import random
from typing import Sequence

from streetchase.geometry import CHUNK_SIZE, Vec2
from streetchase.police import Police

logger = logging.getLogger(__name__)

Polygons = Sequence[Sequence[Vec2]]

NEAR_CHUNK_SIZE = 256.0
SPAWN_CHECK_INTERVAL = 7.0
SPAWN_SKIP_PERCENT = 60
FRAME_TIME = 1.0 / 60.0
MIN_SPAWN_DISTANCE = 150.0
MAX_SPAWN_DISTANCE = 900.0


class PoliceManager:
    """Owns every officer, keeps them aimed at the player and removes the dead."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.police_units: list[Police] = []
        self.spawn_cooldown = 0.0
        self._spawn_check_cooldown = 0.0

    def spawn_police(self, position: Vec2) -> Police:
        police = Police(position, self._rng)
        self.police_units.append(police)
        logger.info("Spawned police at: (%s, %s)", position.x, position.y)
        return police

    def update(self, dt: float, player_pos: Vec2, blocked_polygons: Polygons) -> None:
        """Aim every officer at the player, advance them, and drop the dead."""
        self.spawn_cooldown -= dt
        for unit in self.police_units:
            unit.set_target(player_pos)
            unit.update(dt, blocked_polygons)
        self.police_units = [unit for unit in self.police_units if not unit.is_dead()]

    def damage_closest(self, pos: Vec2, amount: int) -> None:
        """Damage the officer nearest to pos, if there is one."""
        closest = None
        min_dist = math.inf
        for unit in self.police_units:
            dist = (unit.position - pos).length()
            if dist < min_dist:
                min_dist = dist
                closest = unit
        if closest is not None:
            closest.take_damage(amount)

    def try_spawn_random_police_near(
        self, active_chunks: Sequence[tuple[int, int]], player_pos: Vec2
    ) -> Police | None:
        """Now and then place an officer in an active chunk, not too near or far."""
        self._spawn_check_cooldown -= FRAME_TIME
        if self._spawn_check_cooldown > 0.0:
            return None
        self._spawn_check_cooldown = SPAWN_CHECK_INTERVAL

        if not active_chunks:
            return None
        if self._rng.randrange(100) < SPAWN_SKIP_PERCENT:
            return None

        chunk_x, chunk_y = active_chunks[self._rng.randrange(len(active_chunks))]
        x = chunk_x * CHUNK_SIZE + float(self._rng.randrange(CHUNK_SIZE))
        y = chunk_y * CHUNK_SIZE + float(self._rng.randrange(CHUNK_SIZE))
        pos = Vec2(x, y)

        dist = (player_pos - pos).length()
        if dist < MIN_SPAWN_DISTANCE or dist > MAX_SPAWN_DISTANCE:
            return None
        return self.spawn_police(pos)

    def _spawn_police_near_chunk(self, chunk: tuple[int, int]) -> Police:
        base = Vec2(chunk[0] * NEAR_CHUNK_SIZE, chunk[1] * NEAR_CHUNK_SIZE)
        offset = Vec2(
            float(self._rng.randrange(100) - 50), float(self._rng.randrange(100) - 50)
        )
        return self.spawn_police(base + offset)