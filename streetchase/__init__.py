"""Headless game logic for a top-down city chase: map loading, actors, pathfinding and pickups."""

__version__ = "0.1.0"