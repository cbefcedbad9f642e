"""Pick-ups lying on the map that affect the player who touches them."""

from __future__ import annotations

import math
from abc import abstractmethod
from typing import Any, Sequence

from streetchase.geometry import Rect, Vec2
from streetchase.objects import GameObject

PRESENT_SCALE = 0.02
SPIN_SPEED = 50.0
RESPAWN_DELAY = 30.0
HEAL_AMOUNT = 25
DEFAULT_TEXTURE_SIZE = Vec2(1000.0, 1000.0)


class Present(GameObject):
    """A spinning pick-up that vanishes when collected and returns later."""

    kind: str = ""

    def __init__(self, position: Vec2, texture_size: Vec2 = DEFAULT_TEXTURE_SIZE) -> None:
        super().__init__(position)
        self.texture_size = texture_size
        self.rotation = 0.0
        self.collected = False
        self.respawn_timer = 0.0

    def update(self, dt: float, blocked_polygons: Sequence[Sequence[Vec2]]) -> None:
        """Spin while available; count down to respawn while collected."""
        if self.collected:
            if self.respawn_timer > 0.0:
                self.respawn_timer -= dt
            if self.respawn_timer <= 0.0:
                self.collected = False
        else:
            self.rotation = (self.rotation + SPIN_SPEED * dt) % 360.0

    def bounds(self) -> Rect:
        """The axis-aligned box around the scaled, rotated present."""
        half_w = self.texture_size.x * PRESENT_SCALE / 2.0
        half_h = self.texture_size.y * PRESENT_SCALE / 2.0
        angle = math.radians(self.rotation)
        cos_a, sin_a = abs(math.cos(angle)), abs(math.sin(angle))
        extent_x = half_w * cos_a + half_h * sin_a
        extent_y = half_w * sin_a + half_h * cos_a
        return Rect(
            self.position.x - extent_x,
            self.position.y - extent_y,
            2.0 * extent_x,
            2.0 * extent_y,
        )

    def on_collision(self, other: GameObject) -> None:
        other.collide_with_present(self)

    def collide_with_player(self, player: Any) -> None:
        """Give the player the effect, then hide until the respawn delay passes."""
        if not self.collected and self.respawn_timer <= 0.0:
            self.apply_effect(player)
            self.collect()
            self.respawn_timer = RESPAWN_DELAY

    def collide_with_present(self, present: Present) -> None:
        """Presents do not affect each other."""

    def collect(self) -> None:
        self.collected = True

    @abstractmethod
    def apply_effect(self, player: Any) -> None:
        """Apply this present's effect to the player."""


class HealthPresent(Present):
    """Heals the player."""

    kind = "Health"

    def apply_effect(self, player: Any) -> None:
        player.heal(HEAL_AMOUNT)
        self.collect()


class WeaponPresent(Present):
    """A weapon pick-up."""

    kind = "Weapon"

    def apply_effect(self, player: Any) -> None:
        self.collect()


class SpeedBoost(Present):
    """A speed boost pick-up."""

    kind = "SpeedBoost"

    def apply_effect(self, player: Any) -> None:
        self.collect()


class AmmoPresent(Present):
    """An ammunition pick-up."""

    kind = "Ammo"

    def apply_effect(self, player: Any) -> None:
        self.collect()