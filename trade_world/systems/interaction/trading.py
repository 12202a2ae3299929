"""Trades between a character's inventory and a store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from ...config import CONFIG
from ...core.components.inventory import Inventory
from ...core.components.item import Item
from ...core.components.store import Store
from ...core.errors import (
    InsufficientFundsError,
    ItemNotFoundError,
    ItemNotInContainerError,
    NotEnoughSpaceError,
    StoreDoesNotBuyItemsError,
    TradeError,
)
from ...core.values import ItemId, Money
from ...persistence.event_log import TRADE_BUY, TRADE_SELL, EventLog, append_event

logger = logging.getLogger(__name__)


@dataclass
class TradeResult:
    """State handed back to the caller after a completed trade."""

    inventory: Inventory
    wallet: Money
    item: Item


class TradingSystem:
    """Move items and money between an inventory and a store.

    Each call is one transaction: all checks run first and the store is only
    mutated once the trade is known to succeed. Callers persist the returned
    inventory and wallet together with the store.
    """

    def __init__(self, event_log: str | Path | List[Dict[str, Any]] | None = None) -> None:
        if event_log is None:
            event_log = CONFIG.persistence.event_log
        if isinstance(event_log, (str, Path)):
            event_log = EventLog(event_log)
        self.event_log: EventLog | List[Dict[str, Any]] | None = event_log

    # ------------------------------------------------------------------
    # Buying from a store
    # ------------------------------------------------------------------
    def buy(
        self, store: Store, inventory: Inventory, wallet: Money, item_id: ItemId
    ) -> TradeResult:
        """Buy ``item_id`` from ``store`` and place it in ``inventory``."""

        listed = store.find_item(item_id)
        if listed is None:
            raise ItemNotInContainerError(
                f"Item {item_id} is not listed in store {store.get_id()}"
            )

        price = listed.get_price()
        if not wallet.covers(price):
            raise InsufficientFundsError(
                f"Price {price.amount} exceeds available {wallet.amount}"
            )

        # Raises when the inventory has no room; nothing is committed yet.
        new_inventory = inventory.with_added_item_to_free_slot(listed.to_base_item())

        item = store.take_out(item_id)
        item.unequip()
        store.put_money_in(price)
        new_wallet = wallet.remove(price)

        logger.info(
            "[Trade] Bought item %s from store %s for %s",
            item_id, store.get_id(), price.amount,
        )
        self._record(TRADE_BUY, store, item, price)
        return TradeResult(new_inventory, new_wallet, item)

    # ------------------------------------------------------------------
    # Selling to a store
    # ------------------------------------------------------------------
    def sell(
        self, store: Store, inventory: Inventory, wallet: Money, item: Item
    ) -> TradeResult:
        """Sell ``item`` from ``inventory`` to ``store`` at the item's price."""

        if not store.buys_items():
            raise StoreDoesNotBuyItemsError("Store does not buy items")
        if not inventory.has_item(item):
            raise ItemNotFoundError(f"Item {item.get_id()} is not in the inventory")
        if item.is_equipped():
            raise TradeError(f"Item {item.get_id()} is equipped and cannot be sold")
        if not store.has_room():
            raise NotEnoughSpaceError(f"Store {store.get_id()} has no room for more items")

        price = item.get_price()
        # The ledger raises NegativeMoneyError when the store cannot pay.
        paid = store.take_money_out(price)

        new_inventory = inventory.with_removed_item(item)
        store.add(item)

        logger.info(
            "[Trade] Sold item %s to store %s for %s",
            item.get_id(), store.get_id(), price.amount,
        )
        self._record(TRADE_SELL, store, item, price)
        return TradeResult(new_inventory, wallet.combine(paid), item)

    def _record(self, event_type: str, store: Store, item: Item, price: Money) -> None:
        if self.event_log is None:
            return
        data = {
            "store_id": store.get_id().value,
            "character_id": store.get_character_id().value,
            "item_id": item.get_id().value,
            "price": price.amount,
        }
        if isinstance(self.event_log, EventLog):
            self.event_log.append(event_type, data)
        else:
            append_event(self.event_log, event_type, data)


__all__ = ["TradeResult", "TradingSystem"]
