"""Implementations of inspection CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ...core.components.inventory import Inventory
from ...core.components.store import Store
from ...core.errors import ContainerError
from ...persistence.save_load import load_inventory, load_store

logger = logging.getLogger(__name__)


def describe_inventory(inventory: Inventory) -> List[str]:
    lines = [f"Inventory: {inventory.count()}/{inventory.capacity} slots used"]
    for slot in range(inventory.capacity):
        item = inventory.get_item_for_slot(slot)
        if item is None:
            continue
        marker = " [equipped]" if item.is_equipped() else ""
        lines.append(f"  {slot:>2}  {item.name} ({item.type.value}){marker}")
    return lines


def describe_store(store: Store) -> List[str]:
    kind = "sell only" if store.get_type().is_sell_only() else "buy and sell"
    lines = [
        f"Store {store.get_id()} owned by {store.get_character_id()} ({kind})",
        f"Money: {store.get_money().amount}",
    ]
    for slot, store_item in sorted(store.get_items().items()):
        item = store_item.to_base_item()
        lines.append(f"  {slot:>2}  {item.name} ({item.type.value})  {store_item.price.amount}")
    return lines


def show_inventory(path: str) -> List[str]:
    p = Path(path)
    return describe_inventory(load_inventory(p))


def show_store(path: str) -> List[str]:
    p = Path(path)
    return describe_store(load_store(p))


def effect(path: str, effect_type: str) -> List[str]:
    """Sum ``effect_type`` over the equipped items of a saved inventory."""

    p = Path(path)
    inventory = load_inventory(p)
    return [f"{effect_type}: {inventory.get_equipped_items_effect(effect_type)}"]


def help_command() -> List[str]:
    return [
        "Available commands:",
        "  /help                         - Show this help message.",
        "  /show-inventory <path>        - Print the slots of a saved inventory.",
        "  /show-store <path>            - Print the listings and money of a saved store.",
        "  /effect <path> <effect>       - Sum an effect over equipped items.",
    ]


def execute(command: str, args: list[str]) -> List[str]:
    """Run ``command`` and return the lines to print."""

    cmd_lower = command.lower()

    try:
        if cmd_lower == "show-inventory" and args:
            return show_inventory(args[0])
        if cmd_lower == "show-store" and args:
            return show_store(args[0])
        if cmd_lower == "effect" and len(args) >= 2:
            return effect(args[0], args[1])
    except (OSError, ValueError, KeyError, ContainerError) as exc:
        logger.error("Could not load snapshot for /%s: %s", command, exc)
        return []

    if cmd_lower == "help":
        return help_command()

    logger.error("Unknown command: /%s. Type /help for available commands.", command)
    return []


__all__ = [
    "describe_inventory",
    "describe_store",
    "effect",
    "execute",
    "help_command",
    "show_inventory",
    "show_store",
]
