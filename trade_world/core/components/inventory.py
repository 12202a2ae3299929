"""Inventory component."""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from ...config import CONFIG
from ..errors import ItemNotFoundError
from ..slotted_container import SlottedContainer
from ..values import ItemType
from .item import Item

logger = logging.getLogger(__name__)


class Inventory:
    """Slot-indexed items carried by a character.

    Inventories are values: every mutating operation returns a new
    ``Inventory`` and leaves the receiver untouched.
    """

    NUMBER_OF_SLOTS = CONFIG.containers.inventory_slots

    def __init__(
        self,
        items: Optional[Mapping[int, Item]] = None,
        capacity: Optional[int] = None,
    ) -> None:
        self._container: SlottedContainer[Item] = SlottedContainer(
            self.NUMBER_OF_SLOTS if capacity is None else capacity,
            items,
            name="Inventory",
        )

    @classmethod
    def with_items(cls, items: Mapping[int, Item]) -> "Inventory":
        return cls(items)

    @property
    def capacity(self) -> int:
        return self._container.capacity

    # ------------------------------------------------------------------
    # Copy-producing mutation
    # ------------------------------------------------------------------
    def with_added_item(self, slot: int, item: Item) -> "Inventory":
        """Return a new inventory holding ``item`` at ``slot``."""

        return self._add_item(slot, item)

    def with_added_item_to_free_slot(self, item: Item) -> "Inventory":
        slot = self.find_free_slot()
        return self._add_item(slot, item)

    def with_removed_item(self, item: Item) -> "Inventory":
        """Return a new inventory without ``item`` and clear its slot."""

        if not self.has_item(item):
            raise ItemNotFoundError(f"Item {item.get_id()} is not in the inventory")

        container, removed = self._container.with_removed_matching(
            lambda occupant: occupant == item
        )
        removed.set_inventory_slot(None)
        return Inventory(container.items(), self.capacity)

    def _add_item(self, slot: int, item: Item) -> "Inventory":
        container = self._container.with_put_at(slot, item)
        inventory = Inventory(container.items(), self.capacity)
        # Only synchronise the item once the new inventory is known to be valid.
        item.set_inventory_slot(slot)
        logger.debug("[Inventory] Added item %s to slot %s", item.get_id(), slot)
        return inventory

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find_free_slot(self) -> int:
        return self._container.find_free_slot()

    def find_equipped_item_of_type(self, item_type: ItemType) -> Optional[Item]:
        return self._container.first(
            lambda item: item.is_of_type(item_type) and item.is_equipped()
        )

    def has_item(self, item: Item) -> bool:
        return item in self._container

    def get_equipped_items(self) -> List[Item]:
        return self._container.filter(lambda item: item.is_equipped())

    def get_equipped_items_effect(self, effect_type: str) -> int:
        """Sum ``effect_type`` over every equipped item."""

        return sum(item.get_item_effect(effect_type) for item in self.get_equipped_items())

    def get_item_for_slot(self, slot: int) -> Optional[Item]:
        return self._container.get(slot)

    def get_items(self) -> Mapping[int, Item]:
        return self._container.items()

    def count(self) -> int:
        return self._container.occupied_count()

    def __repr__(self) -> str:
        return f"Inventory(capacity={self.capacity}, occupied={self.count()})"


__all__ = ["Inventory"]
