"""The player's item counts."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

STARTING_ITEMS = ("Health", "Pistol", "Ammo", "SpeedBoost")


class Inventory:
    """Counts of named items, starting with one of each basic item."""

    def __init__(self) -> None:
        self._items: dict[str, int] = {}
        for name in STARTING_ITEMS:
            self.add_item(name)

    def items(self) -> Mapping[str, int]:
        """A read-only view of every item name and its count."""
        return MappingProxyType(self._items)

    def add_item(self, name: str) -> None:
        self._items[name] = self._items.get(name, 0) + 1

    def use_item(self, name: str) -> bool:
        """Spend one of the item; False if none is left."""
        # Asking for an item lists it, even with a count of zero.
        count = self._items.setdefault(name, 0)
        if count > 0:
            self._items[name] = count - 1
            return True
        return False

    def count(self, name: str) -> int:
        return self._items.get(name, 0)