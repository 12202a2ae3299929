"""Item component."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from ..values import ItemId, ItemType, Money

# Common effect names; items may define any others.
STRENGTH = "strength"
AGILITY = "agility"
CONSTITUTION = "constitution"
INTELLIGENCE = "intelligence"
DAMAGE = "damage"
DEFENSE = "defense"


@dataclass(eq=False)
class Item:
    """A carried item: a category, a listed price and numeric effects."""

    id: ItemId
    name: str
    type: ItemType
    price: Money = field(default_factory=Money)
    effects: Dict[str, int] = field(default_factory=dict)
    equipped: bool = False
    inventory_slot: Optional[int] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def get_id(self) -> ItemId:
        return self.id

    def get_type(self) -> ItemType:
        return self.type

    def is_of_type(self, item_type: ItemType) -> bool:
        return self.type is item_type

    def is_equipped(self) -> bool:
        return self.equipped

    def equip(self) -> None:
        self.equipped = True

    def unequip(self) -> None:
        self.equipped = False

    def get_price(self) -> Money:
        return self.price

    def get_item_effect(self, effect_type: str) -> int:
        """Return the value of ``effect_type`` or ``0`` when undefined."""

        return int(self.effects.get(effect_type, 0))

    def set_inventory_slot(self, slot: Optional[int]) -> None:
        self.inventory_slot = slot


__all__ = [
    "Item",
    "STRENGTH",
    "AGILITY",
    "CONSTITUTION",
    "INTELLIGENCE",
    "DAMAGE",
    "DEFENSE",
]
