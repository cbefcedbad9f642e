# streetchase

Game logic for a top-down city chase, with no graphics attached. A player
moves around a map loaded from a Tiled JSON export. Police officers wander the
map and chase the player when close, using grid A* pathfinding around blocked
polygons. Pedestrians wander the streets and back away from obstacles. Pickups
("presents") can be collected, and the player keeps an inventory of items.
Cars that drive along road lanes and take curved Bezier turns are provided as
building blocks.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
streetchase [MAP] [--frames N] [--seed S]
```

- `MAP` is a Tiled JSON map file (default `resources/map.tmj`). Objects in the
  `collision` and `roads` object layers are read: rectangles outside the
  `roads` layer and all polygons become blocked areas, and objects with a
  `Direction` property (plus optional `Lanes` and `2D`) become road segments.
- `--frames` is the number of 1/60 s frames to simulate (default 600).
- `--seed` seeds the random number generator.

The command prints how many polygons and road segments were loaded, runs the
world for the given number of frames without a display and without player
input, then prints the number of police officers and pedestrians and the
player's position. It exits with status 1 if the map cannot be read or parsed.

## Library overview

- `streetchase.geometry`: `Vec2`, `Rect`, `point_in_polygon`, `is_blocked`,
  `polygon_bounds`, and the map and window dimensions (`MAP_WIDTH`,
  `MAP_HEIGHT`, `MAP_BOUNDS`, ...).
- `streetchase.quadtree`: `QuadTree` with `insert`, `query` and `clear` over
  rectangles.
- `streetchase.roads`: `RoadSegment` with `lane_center` and `lane_edge`;
  on two-way (`is_2d`) roads the first half of the lanes run the other way.
- `streetchase.pathfinder`: `find_path(start, goal, obstacles, map_bounds,
  grid_size)` returns cell centres from start to goal, `[goal]` when both lie
  in the same cell, and an empty list when no path exists; `heuristic` is the
  scaled Euclidean cell distance.
- `streetchase.inventory`: `Inventory`, starting with one each of Health,
  Pistol, Ammo and SpeedBoost.
- `streetchase.resources`: `ResourceManager`, which loads texture and font
  files as raw bytes by name and raises `ResourceError` for missing or empty
  files and unknown names.
- `streetchase.objects`: `GameObject`, `MovingObject`, `Character`,
  `StaticObject`, `DestructibleObject`, `Explosion`, `Bullet`.
- `streetchase.presents`: `HealthPresent` (heals 25), `WeaponPresent`,
  `SpeedBoost` and `AmmoPresent`; a collected present reappears after 30 s.
- `streetchase.player`: `Player`, moved by a direction vector passed to
  `update`; healing at full health adds a Health item to the inventory.
- `streetchase.pedestrians`: `Pedestrian` and `PedestrianManager`.
- `streetchase.police`: `Police` and `PoliceState` (idle, chasing, backing up).
- `streetchase.police_manager`: `PoliceManager`, which aims officers at the
  player, removes dead ones, damages the closest one and occasionally spawns
  officers in active chunks.
- `streetchase.vehicles`: `Vehicle`, `PoliceCar` and `bezier`.
- `streetchase.factory`: `create_player`, `create_police_manager`,
  `create_pedestrian_manager` and `create_presents`, placing things at random
  unblocked spots.
- `streetchase.world`: `parse_map`, `load_map`, `MapData`,
  `clamp_view_center`, `GameState`, `World` and `main`. `World.handle_key("I")`
  opens the inventory while playing and `"Escape"` returns to play;
  `World.update(dt, movement)` advances everything while playing and hands
  touched presents to the player.
- `streetchase.menu`: `Menu`, whose `choose` records a choice ("Settings"
  does not end the menu).
- `streetchase.screens`: `Settings` (sound, volume and brightness, clamped to
  0..1) and `StoryTyper`, which reveals the story a character at a time.
- `streetchase.inventory_ui`: `use_inventory_item` and `item_labels`.

Example:

```python
from streetchase.geometry import Rect, Vec2
from streetchase.pathfinder import find_path

obstacles = [[Vec2(64, 0), Vec2(96, 0), Vec2(96, 96), Vec2(64, 96)]]
path = find_path(Vec2(10, 10), Vec2(150, 10), obstacles, Rect(0, 0, 320, 320), 32.0)
```

## What it does not do

- There is no window, rendering, sound or keyboard and mouse handling; the
  menu, settings, story and inventory modules hold only the state behind
  those screens.
- `World` does not create or steer traffic. `Vehicle` and `PoliceCar` move
  when updated, but choosing roads, spawning cars and planning turns between
  road segments is left to the caller.
- Collecting a weapon, speed boost or ammo present has no effect on the
  player beyond hiding the present.