"""The playing world: map loading, camera limits and the per-frame update."""

from __future__ import annotations

import argparse
import json
import logging
import os
import random
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Sequence

from streetchase.factory import (
    create_pedestrian_manager,
    create_player,
    create_police_manager,
    create_presents,
)
from streetchase.geometry import (
    MAP_HEIGHT,
    MAP_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Rect,
    Vec2,
    polygon_bounds,
)
from streetchase.quadtree import QuadTree
from streetchase.roads import RoadSegment

logger = logging.getLogger(__name__)

MAP_LAYERS = ("collision", "roads")
ROADS_LAYER = "roads"
DEFAULT_MAP_PATH = "resources/map.tmj"
VIEW_ZOOM = 0.25
DEFAULT_VIEW_SIZE = Vec2(WINDOW_WIDTH * VIEW_ZOOM, WINDOW_HEIGHT * VIEW_ZOOM)
PLAYER_START = Vec2(100.0, 100.0)
INITIAL_PRESENTS = 1
FRAME_TIME = 1.0 / 60.0

INVENTORY_KEY = "I"
BACK_KEY = "Escape"


class GameState(Enum):
    """Which screen the game is on."""

    MENU = "menu"
    PLAYING = "playing"
    INVENTORY = "inventory"
    EXITING = "exiting"


@dataclass
class MapData:
    """The blocking polygons and road segments read from a map file."""

    blocked_polygons: list[list[Vec2]] = field(default_factory=list)
    roads: list[RoadSegment] = field(default_factory=list)


def _number(obj: Mapping[str, Any], key: str) -> float:
    value = obj.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"map object field {key!r} is missing or not a number")
    return float(value)


def _parse_object(obj: Mapping[str, Any], layer_name: str, result: MapData) -> None:
    x = _number(obj, "x")
    y = _number(obj, "y")

    if "width" in obj and "height" in obj:
        w = _number(obj, "width")
        h = _number(obj, "height")
        if layer_name != ROADS_LAYER:
            result.blocked_polygons.append(
                [Vec2(x, y), Vec2(x + w, y), Vec2(x + w, y + h), Vec2(x, y + h)]
            )

    if "polygon" in obj:
        result.blocked_polygons.append(
            [Vec2(x + _number(p, "x"), y + _number(p, "y")) for p in obj["polygon"]]
        )

    if "properties" in obj:
        road = RoadSegment(Rect(x, y, _number(obj, "width"), _number(obj, "height")))
        for prop in obj["properties"]:
            name = prop.get("name")
            value = prop.get("value")
            if name == "Direction":
                road.direction = str(value)
            elif name == "Lanes":
                road.lanes = int(value)
            elif name == "2D":
                road.is_2d = bool(value)
        if road.direction:
            result.roads.append(road)


def parse_map(data: Mapping[str, Any]) -> MapData:
    """Collect blocking polygons and roads from the collision and roads layers."""
    result = MapData()
    for layer in data.get("layers", []):
        name = layer.get("name")
        if layer.get("type") != "objectgroup" or name not in MAP_LAYERS:
            continue
        for obj in layer.get("objects", []):
            _parse_object(obj, name, result)
    return result


def load_map(path: str | os.PathLike[str]) -> MapData:
    """Read and parse a JSON map file."""
    with Path(path).open(encoding="utf-8") as fh:
        data = json.load(fh)
    return parse_map(data)


def clamp_view_center(
    center: Vec2, view_size: Vec2, map_width: float, map_height: float
) -> Vec2:
    """Keep a view of the given size inside the map; oversized views are centred."""
    half_w = view_size.x * 0.5
    half_h = view_size.y * 0.5
    if view_size.x > map_width:
        half_w = map_width * 0.5
    if view_size.y > map_height:
        half_h = map_height * 0.5

    x, y = center.x, center.y
    if x < half_w:
        x = half_w
    if x > map_width - half_w:
        x = map_width - half_w
    if y < half_h:
        y = half_h
    if y > map_height - half_h:
        y = map_height - half_h
    return Vec2(x, y)


class World:
    """Everything in a running game: player, police, pedestrians and presents."""

    def __init__(
        self,
        map_data: MapData | None = None,
        rng: random.Random | None = None,
        view_size: Vec2 = DEFAULT_VIEW_SIZE,
    ) -> None:
        self.map_data = map_data if map_data is not None else MapData()
        self._rng = rng if rng is not None else random.Random()
        self.blocked_polygons = self.map_data.blocked_polygons
        self.roads = self.map_data.roads
        self.blocked_tree: QuadTree[list[Vec2]] = QuadTree()
        for polygon in self.blocked_polygons:
            if polygon:
                self.blocked_tree.insert(polygon_bounds(polygon), polygon)

        self.pedestrian_manager = create_pedestrian_manager(self.blocked_polygons, self._rng)
        self.police_manager = create_police_manager(self.blocked_polygons, self._rng)
        self.player = create_player(PLAYER_START)
        self.presents = create_presents(INITIAL_PRESENTS, self.blocked_polygons, self._rng)

        self.view_size = view_size
        self.view_center = clamp_view_center(
            self.player.position, view_size, MAP_WIDTH, MAP_HEIGHT
        )
        self.state = GameState.PLAYING

    def handle_key(self, key: str) -> GameState:
        """Open the inventory with I while playing; return to play with Escape."""
        if self.state is GameState.PLAYING and key == INVENTORY_KEY:
            self.state = GameState.INVENTORY
        elif self.state is GameState.INVENTORY and key == BACK_KEY:
            self.state = GameState.PLAYING
        return self.state

    def update(self, dt: float, movement: Vec2 = Vec2()) -> None:
        """Advance everything by dt seconds while playing."""
        if self.state is not GameState.PLAYING:
            return
        self.player.update(dt, self.blocked_polygons, movement)
        self.view_center = clamp_view_center(
            self.player.position, self.view_size, MAP_WIDTH, MAP_HEIGHT
        )
        self.police_manager.update(dt, self.player.position, self.blocked_polygons)
        self.pedestrian_manager.update(dt, self.blocked_polygons)
        for present in self.presents:
            present.update(dt, self.blocked_polygons)

        player_bounds = self.player.collision_bounds()
        for present in self.presents:
            if not present.collected and player_bounds.intersects(present.bounds()):
                self.player.on_collision(present)


def main(argv: Sequence[str] | None = None) -> int:
    """Load a map and run the world for a number of frames without a display."""
    parser = argparse.ArgumentParser(prog="streetchase")
    parser.add_argument("map", nargs="?", default=DEFAULT_MAP_PATH, help="JSON map file")
    parser.add_argument("--frames", type=int, default=600, help="frames to simulate")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    try:
        map_data = load_map(args.map)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Loaded {len(map_data.blocked_polygons)} polygons")
    print(f"Loaded {len(map_data.roads)} road segments")

    world = World(map_data, random.Random(args.seed))
    for _ in range(max(args.frames, 0)):
        world.update(FRAME_TIME)

    print(f"Police: {len(world.police_manager.police_units)}")
    print(f"Pedestrians: {len(world.pedestrian_manager.pedestrians)}")
    print(f"Player at ({world.player.position.x:.1f}, {world.player.position.y:.1f})")
    return 0


if __name__ == "__main__":
    sys.exit(main())