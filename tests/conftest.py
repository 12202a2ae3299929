# tests/conftest.py
from typing import Callable, Dict, Optional

import pytest

from trade_world.core.components.item import Item
from trade_world.core.components.store import Store, StoreType
from trade_world.core.values import CharacterId, ItemId, ItemType, Money, StoreId


def make_item(
    name: str = "item",
    item_type: ItemType = ItemType.MISC,
    price: int = 10,
    effects: Optional[Dict[str, int]] = None,
    equipped: bool = False,
) -> Item:
    return Item(
        id=ItemId.generate(),
        name=name,
        type=item_type,
        price=Money(price),
        effects=dict(effects or {}),
        equipped=equipped,
    )


@pytest.fixture
def item_factory() -> Callable[..., Item]:
    return make_item


@pytest.fixture
def sell_only_store() -> Store:
    return Store(StoreId("store-1"), CharacterId("char-1"), StoreType.SELL_ONLY, {}, Money(0))


@pytest.fixture
def trading_store() -> Store:
    return Store(StoreId("store-2"), CharacterId("char-2"), StoreType.BUY_AND_SELL, {}, Money(100))
