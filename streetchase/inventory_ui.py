"""What the inventory screen shows and what clicking an item does."""

from __future__ import annotations

import logging

from streetchase.inventory import Inventory
from streetchase.player import Player
from streetchase.presents import HEAL_AMOUNT

logger = logging.getLogger(__name__)


def use_inventory_item(player: Player, inventory: Inventory, name: str) -> bool:
    """Spend one of the named item and apply it; False if none was left."""
    if not inventory.use_item(name):
        return False
    if name == "Health":
        player.heal(HEAL_AMOUNT)
    elif name == "Ammo":
        logger.info("Ammo used")
    elif name == "SpeedBoost":
        logger.info("Speed boost used")
    return True


def item_labels(inventory: Inventory) -> list[str]:
    """One line per item, as listed on the inventory screen."""
    return [f"{name} x{count}" for name, count in inventory.items().items()]