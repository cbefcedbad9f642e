"""Builders that populate a new game world."""

from __future__ import annotations

import random
from typing import Sequence

from streetchase.geometry import MAP_HEIGHT, MAP_WIDTH, Vec2, is_blocked
from streetchase.pedestrians import PedestrianManager
from streetchase.player import Player
from streetchase.police_manager import PoliceManager
from streetchase.presents import AmmoPresent, HealthPresent, Present, SpeedBoost, WeaponPresent

Polygons = Sequence[Sequence[Vec2]]

INITIAL_POLICE = 10
POLICE_ATTEMPTS = 1000
INITIAL_PEDESTRIANS = 100
PEDESTRIAN_ATTEMPTS = 3000
PRESENT_ATTEMPTS = 1000

PRESENT_TYPES: tuple[type[Present], ...] = (
    HealthPresent,
    WeaponPresent,
    SpeedBoost,
    AmmoPresent,
)


def _random_map_point(rng: random.Random) -> Vec2:
    return Vec2(float(rng.randrange(MAP_WIDTH)), float(rng.randrange(MAP_HEIGHT)))


def _free_points(
    rng: random.Random, blocked_polygons: Polygons, wanted: int, attempts: int
) -> list[Vec2]:
    points: list[Vec2] = []
    for _ in range(attempts):
        if len(points) >= wanted:
            break
        pos = _random_map_point(rng)
        if not is_blocked(pos, blocked_polygons):
            points.append(pos)
    return points


def create_player(pos: Vec2) -> Player:
    return Player(pos)


def create_police_manager(
    blocked_polygons: Polygons, rng: random.Random | None = None
) -> PoliceManager:
    """A police manager with officers placed at random unblocked spots."""
    rng = rng if rng is not None else random.Random()
    manager = PoliceManager(rng)
    for pos in _free_points(rng, blocked_polygons, INITIAL_POLICE, POLICE_ATTEMPTS):
        manager.spawn_police(pos)
    return manager


def create_pedestrian_manager(
    blocked_polygons: Polygons, rng: random.Random | None = None
) -> PedestrianManager:
    """A pedestrian manager with pedestrians placed at random unblocked spots."""
    rng = rng if rng is not None else random.Random()
    manager = PedestrianManager(rng)
    for pos in _free_points(rng, blocked_polygons, INITIAL_PEDESTRIANS, PEDESTRIAN_ATTEMPTS):
        manager.spawn_pedestrian(pos)
    return manager


def create_presents(
    count: int, blocked_polygons: Polygons, rng: random.Random | None = None
) -> list[Present]:
    """Up to count presents of random kinds at random unblocked spots."""
    rng = rng if rng is not None else random.Random()
    presents: list[Present] = []
    attempts = 0
    while len(presents) < count and attempts < PRESENT_ATTEMPTS:
        attempts += 1
        kind = PRESENT_TYPES[rng.randrange(len(PRESENT_TYPES))]
        pos = _random_map_point(rng)
        if is_blocked(pos, blocked_polygons):
            continue
        presents.append(kind(pos))
    return presents