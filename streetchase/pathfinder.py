"""Grid-based A* path search around blocking polygons."""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from typing import Sequence

from streetchase.geometry import Rect, Vec2, is_blocked

logger = logging.getLogger(__name__)

Cell = tuple[int, int]

STRAIGHT_COST = 10
DIAGONAL_COST = 14


def heuristic(current: Cell, goal: Cell) -> int:
    """Euclidean distance between two cells, scaled by ten and truncated."""
    dx = goal[0] - current[0]
    dy = goal[1] - current[1]
    return int(math.sqrt(dx * dx + dy * dy) * 10.0)


class _Grid:
    """The map divided into square cells, with cached walkability."""

    def __init__(
        self, obstacles: Sequence[Sequence[Vec2]], map_bounds: Rect, grid_size: float
    ) -> None:
        self.obstacles = obstacles
        self.origin = Vec2(map_bounds.left, map_bounds.top)
        self.grid_size = grid_size
        self.width = int(map_bounds.width / grid_size)
        self.height = int(map_bounds.height / grid_size)
        self._walkable: dict[Cell, bool] = {}

    def cell_of(self, point: Vec2) -> Cell:
        return (
            int((point.x - self.origin.x) / self.grid_size),
            int((point.y - self.origin.y) / self.grid_size),
        )

    def center(self, cell: Cell) -> Vec2:
        return Vec2(
            self.origin.x + (cell[0] + 0.5) * self.grid_size,
            self.origin.y + (cell[1] + 0.5) * self.grid_size,
        )

    def walkable(self, cell: Cell) -> bool:
        cached = self._walkable.get(cell)
        if cached is None:
            x, y = cell
            cached = (
                0 <= x < self.width
                and 0 <= y < self.height
                and not is_blocked(self.center(cell), self.obstacles)
            )
            self._walkable[cell] = cached
        return cached


def find_path(
    start: Vec2,
    goal: Vec2,
    obstacles: Sequence[Sequence[Vec2]],
    map_bounds: Rect,
    grid_size: float,
) -> list[Vec2]:
    """Cell centres leading from start to goal; empty when no path exists.

    When start and goal share a cell the path is just the goal itself.
    """
    grid = _Grid(obstacles, map_bounds, grid_size)
    start_cell = grid.cell_of(start)
    goal_cell = grid.cell_of(goal)

    if not grid.walkable(start_cell):
        logger.debug("start %s in cell %s is not walkable", start, start_cell)
        return []
    if not grid.walkable(goal_cell):
        logger.debug("goal %s in cell %s is not walkable", goal, goal_cell)
        return []
    if start_cell == goal_cell:
        return [goal]

    counter = itertools.count()
    g_cost: dict[Cell, int] = {start_cell: 0}
    h_cost: dict[Cell, int] = {start_cell: heuristic(start_cell, goal_cell)}
    parent: dict[Cell, Cell | None] = {start_cell: None}
    closed: set[Cell] = set()
    open_heap = [(h_cost[start_cell], h_cost[start_cell], next(counter), start_cell)]

    while open_heap:
        _, _, _, cell = heapq.heappop(open_heap)
        if cell in closed:
            continue
        if cell == goal_cell:
            return _reconstruct(cell, parent, grid)
        closed.add(cell)

        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                neighbour = (cell[0] + dx, cell[1] + dy)
                if not grid.walkable(neighbour) or neighbour in closed:
                    continue
                step = DIAGONAL_COST if dx and dy else STRAIGHT_COST
                tentative = g_cost[cell] + step
                if neighbour in g_cost and tentative >= g_cost[neighbour]:
                    continue
                g_cost[neighbour] = tentative
                parent[neighbour] = cell
                h = h_cost.setdefault(neighbour, heuristic(neighbour, goal_cell))
                heapq.heappush(open_heap, (tentative + h, h, next(counter), neighbour))

    logger.debug("no path found from %s to %s", start, goal)
    return []


def _reconstruct(
    goal_cell: Cell, parent: dict[Cell, Cell | None], grid: _Grid
) -> list[Vec2]:
    path: list[Vec2] = []
    cell: Cell | None = goal_cell
    while cell is not None:
        path.append(grid.center(cell))
        cell = parent[cell]
    path.reverse()
    return path