"""Helpers for converting inventories and stores to JSON-ready data."""

from __future__ import annotations

from typing import Any, Dict

from ..core.components.inventory import Inventory
from ..core.components.item import Item
from ..core.components.store import Store, StoreItem, StoreType
from ..core.values import CharacterId, ItemId, ItemType, Money, StoreId


def _slots_from_dict(data: Dict[str, Any], load: Any) -> Dict[int, Any]:
    """JSON object keys are strings; slots are indices."""

    return {int(slot): load(value) for slot, value in data.items()}


def item_to_dict(item: Item) -> Dict[str, Any]:
    return {
        "id": item.id.value,
        "name": item.name,
        "type": item.type.value,
        "price": item.price.amount,
        "effects": dict(item.effects),
        "equipped": item.equipped,
        "inventory_slot": item.inventory_slot,
    }


def item_from_dict(data: Dict[str, Any]) -> Item:
    return Item(
        id=ItemId(data["id"]),
        name=data.get("name", ""),
        type=ItemType(data["type"]),
        price=Money(int(data.get("price", 0))),
        effects={k: int(v) for k, v in (data.get("effects") or {}).items()},
        equipped=bool(data.get("equipped", False)),
        inventory_slot=data.get("inventory_slot"),
    )


def inventory_to_dict(inventory: Inventory) -> Dict[str, Any]:
    """Serialize ``inventory`` into a dictionary."""

    return {
        "capacity": inventory.capacity,
        "slots": {
            str(slot): item_to_dict(item)
            for slot, item in sorted(inventory.get_items().items())
        },
    }


def inventory_from_dict(data: Dict[str, Any]) -> Inventory:
    """Create an :class:`Inventory` from ``data`` produced by :func:`inventory_to_dict`.

    The regular constructor runs, so a snapshot violating the slot
    invariants is rejected. Each item's assigned slot is taken from the key it
    is stored under.
    """

    slots = _slots_from_dict(data.get("slots", {}), item_from_dict)
    for slot, item in slots.items():
        item.set_inventory_slot(slot)
    return Inventory(slots, capacity=data.get("capacity"))


def store_item_to_dict(store_item: StoreItem) -> Dict[str, Any]:
    return {"item": item_to_dict(store_item.item), "price": store_item.price.amount}


def store_item_from_dict(data: Dict[str, Any]) -> StoreItem:
    return StoreItem(item=item_from_dict(data["item"]), price=Money(int(data["price"])))


def store_to_dict(store: Store) -> Dict[str, Any]:
    """Serialize ``store`` into a dictionary."""

    return {
        "id": store.get_id().value,
        "character_id": store.get_character_id().value,
        "type": store.get_type().value,
        "money": store.get_money().amount,
        "capacity": store.capacity,
        "slots": {
            str(slot): store_item_to_dict(item)
            for slot, item in sorted(store.get_items().items())
        },
    }


def store_from_dict(data: Dict[str, Any]) -> Store:
    """Create a :class:`Store` from ``data`` produced by :func:`store_to_dict`."""

    return Store(
        StoreId(data["id"]),
        CharacterId(data["character_id"]),
        StoreType(data["type"]),
        _slots_from_dict(data.get("slots", {}), store_item_from_dict),
        Money(int(data.get("money", 0))),
        capacity=data.get("capacity"),
    )


__all__ = [
    "item_to_dict",
    "item_from_dict",
    "inventory_to_dict",
    "inventory_from_dict",
    "store_item_to_dict",
    "store_item_from_dict",
    "store_to_dict",
    "store_from_dict",
]
