"""Base game objects and the simple objects built on them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Sequence

from streetchase.geometry import MAX_HEALTH, Vec2

if TYPE_CHECKING:
    Polygons = Sequence[Sequence[Vec2]]


class GameObject(ABC):
    """Anything placed in the world."""

    def __init__(self, position: Vec2 = Vec2()) -> None:
        self.position = position

    @abstractmethod
    def update(self, dt: float, blocked_polygons: Polygons) -> None:
        """Advance the object by dt seconds."""

    def on_collision(self, other: GameObject) -> None:
        """First step of double dispatch; objects ignore collisions by default."""

    def collide_with_player(self, player: Any) -> None:
        """React to touching the player; nothing happens by default."""

    def collide_with_present(self, present: Any) -> None:
        """React to touching a present; nothing happens by default."""


class MovingObject(GameObject):
    """A game object with a speed that can move."""

    speed: float = 0.0

    @abstractmethod
    def move(self, direction: Vec2, dt: float) -> None:
        """Move along the direction for dt seconds."""


class Character(MovingObject):
    """A moving object with health."""

    speed = 100.0

    def __init__(self, position: Vec2 = Vec2()) -> None:
        super().__init__(position)
        self.health = MAX_HEALTH

    def update(self, dt: float, blocked_polygons: Polygons) -> None:
        """Plain characters stay where they are."""

    def move(self, direction: Vec2, dt: float) -> None:
        self.position = self.position + direction * self.speed * dt

    def take_damage(self, amount: int) -> None:
        self.health = max(self.health - amount, 0)

    def is_dead(self) -> bool:
        return self.health <= 0


class StaticObject(GameObject):
    """An object that never changes on its own."""

    def __init__(self, position: Vec2 = Vec2()) -> None:
        super().__init__(position)

    def update(self, dt: float, blocked_polygons: Polygons) -> None:
        """Static objects do not change over time."""


class DestructibleObject(GameObject):
    """An object such as a barrel that is destroyed once its health runs out."""

    def __init__(self, position: Vec2 = Vec2(400.0, 300.0)) -> None:
        super().__init__(position)
        self.health = 100

    def update(self, dt: float, blocked_polygons: Polygons) -> None:
        """Destructible objects only change when damaged."""

    def take_damage(self, amount: int) -> None:
        self.health = max(self.health - amount, 0)

    def is_destroyed(self) -> bool:
        return self.health <= 0


class Explosion(GameObject):
    """A short-lived effect that finishes after its duration."""

    def __init__(self, position: Vec2, duration: float = 0.5) -> None:
        super().__init__(position)
        self.timer = 0.0
        self.duration = duration

    def update(self, dt: float, blocked_polygons: Polygons) -> None:
        self.timer += dt

    def is_finished(self) -> bool:
        return self.timer >= self.duration


class Bullet(MovingObject):
    """A projectile flying in a straight line."""

    speed = 600.0

    def __init__(self, start: Vec2, direction: Vec2) -> None:
        super().__init__(start)
        self.direction = direction

    def update(self, dt: float, blocked_polygons: Polygons) -> None:
        self.move(self.direction, dt)

    def move(self, direction: Vec2, dt: float) -> None:
        self.position = self.position + direction * self.speed * dt