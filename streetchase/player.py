"""The character controlled by the person playing."""

from __future__ import annotations

import logging
import math
from typing import Any, Sequence

from streetchase.geometry import MAX_HEALTH, Rect, Vec2, is_blocked
from streetchase.inventory import Inventory
from streetchase.objects import Character, GameObject

logger = logging.getLogger(__name__)

SHEET_COLUMNS = 4
SHEET_ROWS = 2
WALKING_FRAMES = 4
PLAYER_SCALE = 0.25
DEFAULT_SHEET_SIZE = Vec2(512.0, 256.0)
START_POSITION = Vec2(100.0, 100.0)


class Player(Character):
    """A walking character with an animated sprite sheet and an inventory."""

    speed = 250.0

    def __init__(
        self,
        position: Vec2 = START_POSITION,
        sheet_size: Vec2 = DEFAULT_SHEET_SIZE,
    ) -> None:
        super().__init__(position)
        self.frame_width = int(sheet_size.x) // SHEET_COLUMNS
        self.frame_height = int(sheet_size.y) // SHEET_ROWS
        self.scale = PLAYER_SCALE
        self.rotation = 0.0
        self.current_frame = 0
        self.anim_timer = 0.0
        self.anim_delay = 0.1
        self.frame_rect = (0, 0, self.frame_width, self.frame_height)
        self.inventory = Inventory()

    def update(
        self,
        dt: float,
        blocked_polygons: Sequence[Sequence[Vec2]],
        movement: Vec2 = Vec2(),
    ) -> None:
        """Walk in the movement direction unless the next spot is blocked."""
        if movement.x == 0.0 and movement.y == 0.0:
            self.anim_timer = 0.0
            self.current_frame = 0
            self.frame_rect = (0, self.frame_height, self.frame_width, self.frame_height)
            return

        direction = movement.normalized()
        self.rotation = math.atan2(direction.y, direction.x) * 180.0 / 3.14159 + 90.0

        step = direction * self.speed * dt
        if not is_blocked(self.position + step, blocked_polygons):
            self.position = self.position + step

        self.anim_timer += dt
        if self.anim_timer >= self.anim_delay:
            self.anim_timer -= self.anim_delay
            self.current_frame = (self.current_frame + 1) % WALKING_FRAMES

        self.frame_rect = (
            self.current_frame * self.frame_width,
            0,
            self.frame_width,
            self.frame_height,
        )

    def collision_bounds(self, offset: Vec2 = Vec2()) -> Rect:
        """The scaled frame box centred on the player, shifted by offset."""
        width = self.frame_width * self.scale
        height = self.frame_height * self.scale
        return Rect(
            self.position.x - width / 2.0 + offset.x,
            self.position.y - height / 2.0 + offset.y,
            width,
            height,
        )

    def center(self) -> Vec2:
        """The centre of the collision circle, slightly left of and below the sprite."""
        return Vec2(self.position.x - 2.0, self.position.y + 4.0)

    def collision_radius(self) -> float:
        return 6.0

    def take_damage(self, amount: int) -> None:
        """Damage does not affect the player."""

    def on_collision(self, other: GameObject) -> None:
        other.collide_with_player(self)

    def collide_with_present(self, present: Any) -> None:
        logger.debug("player touched present %r", present)

    def collide_with_player(self, player: Any) -> None:
        """Players do not affect each other."""

    def heal(self, amount: int) -> None:
        """Restore health up to the maximum; at full health keep a Health item instead."""
        if self.health < MAX_HEALTH:
            before = self.health
            self.health = min(self.health + amount, MAX_HEALTH)
            logger.info("Healed from %d to %d HP.", before, self.health)
        else:
            self.inventory.add_item("Health")
            logger.info("Health is full! Added Health item to inventory.")