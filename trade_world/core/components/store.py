"""Store component: priced items listed for trade and a money ledger."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Optional

from ...config import CONFIG
from ..errors import ItemNotInContainerError, StoreDoesNotBuyItemsError
from ..slotted_container import SlottedContainer
from ..values import CharacterId, ItemId, ItemType, Money, StoreId
from .item import Item

logger = logging.getLogger(__name__)


class StoreType(Enum):
    """Whether a store can pay money out to sellers."""

    SELL_ONLY = "sell_only"
    BUY_AND_SELL = "buy_and_sell"

    def is_sell_only(self) -> bool:
        return self is StoreType.SELL_ONLY


@dataclass
class StoreItem:
    """An item listed in a store at a given price."""

    item: Item
    price: Money

    def get_id(self) -> ItemId:
        return self.item.get_id()

    def get_type(self) -> ItemType:
        return self.item.get_type()

    def is_of_type(self, item_type: ItemType) -> bool:
        return self.item.is_of_type(item_type)

    def get_price(self) -> Money:
        return self.price

    def to_base_item(self) -> Item:
        return self.item


class Store:
    """A character's store.

    Unlike :class:`~trade_world.core.components.inventory.Inventory`, a store
    is mutated in place. Every check runs before the slot mapping or the
    ledger changes, so a failed operation leaves the store as it was. The slot
    mapping is owned by the store; the one passed in is copied.
    """

    NUMBER_OF_SLOTS = CONFIG.containers.store_slots

    def __init__(
        self,
        store_id: StoreId,
        character_id: CharacterId,
        store_type: StoreType,
        items: Optional[Mapping[int, StoreItem]] = None,
        money: Optional[Money] = None,
        capacity: Optional[int] = None,
    ) -> None:
        self._container: SlottedContainer[StoreItem] = SlottedContainer(
            self.NUMBER_OF_SLOTS if capacity is None else capacity,
            items,
            name="Store",
        )
        self._id = store_id
        self._character_id = character_id
        self._type = store_type
        self._money = money if money is not None else Money(0)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def get_id(self) -> StoreId:
        return self._id

    def get_character_id(self) -> CharacterId:
        return self._character_id

    def get_type(self) -> StoreType:
        return self._type

    def buys_items(self) -> bool:
        return not self._type.is_sell_only()

    def get_items(self) -> Mapping[int, StoreItem]:
        return self._container.items()

    def get_money(self) -> Money:
        return self._money

    @property
    def capacity(self) -> int:
        return self._container.capacity

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------
    def add_item_to_slot(self, slot: int, item: StoreItem) -> None:
        self._container.put_at(slot, item)

    def add(self, item: Item) -> None:
        """List ``item`` at its own price in the lowest free slot."""

        store_item = StoreItem(item, item.get_price())
        slot = self.find_free_slot()
        self._container.put_at(slot, store_item)
        logger.debug(
            "[Store] %s listed item %s at slot %s for %s",
            self._id, item.get_id(), slot, store_item.price.amount,
        )

    def find_free_slot(self) -> int:
        return self._container.find_free_slot()

    def has_room(self) -> bool:
        return self._container.has_room()

    def find_item(self, item_id: ItemId) -> Optional[StoreItem]:
        return self._container.first(lambda item: item.get_id().equals(item_id))

    def find_items_of_type(self, item_type: ItemType) -> List[StoreItem]:
        return self._container.filter(lambda item: item.is_of_type(item_type))

    def take_out(self, item_id: ItemId) -> Item:
        """Remove the listed item and return it without its price."""

        slot = self._container.find_slot(lambda item: item.get_id().equals(item_id))
        if slot is None:
            raise ItemNotInContainerError("Cannot take out item from empty slot")

        store_item = self._container.remove_at(slot)
        logger.debug("[Store] %s took out item %s from slot %s", self._id, item_id, slot)
        return store_item.to_base_item()

    # ------------------------------------------------------------------
    # Money
    # ------------------------------------------------------------------
    def put_money_in(self, money: Money) -> None:
        self._money = self._money.combine(money)

    def take_money_out(self, money: Money) -> Money:
        """Withdraw ``money``; the ledger raises if the balance is too low."""

        if self._type.is_sell_only():
            raise StoreDoesNotBuyItemsError("Store does not buy items")

        self._money = self._money.remove(money)
        return money

    def __repr__(self) -> str:
        return (
            f"Store(id={self._id}, type={self._type.value}, "
            f"occupied={self._container.occupied_count()}, money={self._money.amount})"
        )


__all__ = ["Store", "StoreItem", "StoreType"]
