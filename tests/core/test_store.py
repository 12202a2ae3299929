import pytest

from trade_world.core.components.store import Store, StoreItem, StoreType
from trade_world.core.errors import (
    ItemNotFoundError,
    ItemNotInContainerError,
    NegativeMoneyError,
    NotEnoughSpaceError,
    SlotOutOfRangeError,
    SlotTakenError,
    StoreDoesNotBuyItemsError,
)
from trade_world.core.values import CharacterId, ItemId, ItemType, Money, StoreId


def test_accessors(sell_only_store):
    assert sell_only_store.get_id() == StoreId("store-1")
    assert sell_only_store.get_character_id() == CharacterId("char-1")
    assert sell_only_store.get_type() is StoreType.SELL_ONLY
    assert not sell_only_store.buys_items()
    assert sell_only_store.get_money() == Money(0)
    assert dict(sell_only_store.get_items()) == {}
    assert sell_only_store.capacity == 24


def test_constructor_rejects_full_mapping(item_factory):
    items = {slot: StoreItem(item_factory(), Money(1)) for slot in range(24)}
    with pytest.raises(NotEnoughSpaceError):
        Store(StoreId("s"), CharacterId("c"), StoreType.SELL_ONLY, items, Money(0))


def test_constructor_does_not_alias_mapping(item_factory):
    items = {}
    store = Store(StoreId("s"), CharacterId("c"), StoreType.SELL_ONLY, items, Money(0))
    store.add(item_factory())
    assert items == {}


def test_add_then_take_out(sell_only_store, item_factory):
    item = item_factory("lamp", price=50)
    sell_only_store.add(item)

    listed = sell_only_store.find_item(item.get_id())
    assert listed is not None
    assert listed.get_price() == Money(50)

    taken = sell_only_store.take_out(item.get_id())
    assert taken is item
    assert dict(sell_only_store.get_items()) == {}

    with pytest.raises(ItemNotInContainerError):
        sell_only_store.take_out(item.get_id())


def test_take_out_error_is_an_item_not_found(sell_only_store):
    with pytest.raises(ItemNotFoundError):
        sell_only_store.take_out(ItemId("missing"))


def test_add_uses_lowest_free_slot(sell_only_store, item_factory):
    sell_only_store.add_item_to_slot(0, StoreItem(item_factory(), Money(1)))
    sell_only_store.add_item_to_slot(2, StoreItem(item_factory(), Money(1)))
    item = item_factory()
    sell_only_store.add(item)
    assert sell_only_store.get_items()[1].to_base_item() is item
    assert sell_only_store.find_free_slot() == 3


def test_add_item_to_slot_failures(sell_only_store, item_factory):
    sell_only_store.add_item_to_slot(5, StoreItem(item_factory(), Money(1)))
    with pytest.raises(SlotOutOfRangeError):
        sell_only_store.add_item_to_slot(24, StoreItem(item_factory(), Money(1)))
    with pytest.raises(SlotTakenError):
        sell_only_store.add_item_to_slot(5, StoreItem(item_factory(), Money(1)))
    assert len(sell_only_store.get_items()) == 1


def test_add_refuses_to_fill_last_slot(sell_only_store, item_factory):
    for _ in range(23):
        sell_only_store.add(item_factory())
    assert not sell_only_store.has_room()
    with pytest.raises(NotEnoughSpaceError):
        sell_only_store.add(item_factory())
    assert len(sell_only_store.get_items()) == 23


def test_find_item_missing_is_none(sell_only_store):
    assert sell_only_store.find_item(ItemId("nothing")) is None


def test_find_items_of_type(sell_only_store, item_factory):
    sword = item_factory("sword", ItemType.WEAPON)
    potion = item_factory("potion", ItemType.POTION)
    axe = item_factory("axe", ItemType.WEAPON)
    sell_only_store.add_item_to_slot(7, StoreItem(axe, Money(3)))
    sell_only_store.add_item_to_slot(1, StoreItem(sword, Money(3)))
    sell_only_store.add(potion)

    weapons = sell_only_store.find_items_of_type(ItemType.WEAPON)
    assert [w.to_base_item() for w in weapons] == [sword, axe]
    assert sell_only_store.find_items_of_type(ItemType.RING) == []


def test_put_money_in(sell_only_store):
    sell_only_store.put_money_in(Money(25))
    sell_only_store.put_money_in(Money(5))
    assert sell_only_store.get_money() == Money(30)


def test_sell_only_store_refuses_money_out(sell_only_store):
    sell_only_store.put_money_in(Money(1000))
    with pytest.raises(StoreDoesNotBuyItemsError):
        sell_only_store.take_money_out(Money(10))
    assert sell_only_store.get_money() == Money(1000)


def test_buy_and_sell_store_pays_out(trading_store):
    assert trading_store.take_money_out(Money(30)) == Money(30)
    assert trading_store.get_money() == Money(70)


def test_take_money_out_insufficient_funds_leaves_balance(trading_store):
    with pytest.raises(NegativeMoneyError):
        trading_store.take_money_out(Money(101))
    assert trading_store.get_money() == Money(100)


def test_store_item_unwraps(item_factory):
    item = item_factory("cloak", ItemType.ARMOR, price=12)
    store_item = StoreItem(item, Money(40))
    assert store_item.get_id() == item.get_id()
    assert store_item.get_type() is ItemType.ARMOR
    assert store_item.is_of_type(ItemType.ARMOR)
    assert store_item.to_base_item() is item


def test_take_out_then_reuse_slot(sell_only_store, item_factory):
    first = item_factory("first")
    second = item_factory("second")
    sell_only_store.add_item_to_slot(6, StoreItem(first, Money(2)))

    sell_only_store.take_out(first.get_id())
    sell_only_store.add_item_to_slot(6, StoreItem(second, Money(3)))

    assert sell_only_store.get_items()[6].to_base_item() is second
    assert sell_only_store.find_item(first.get_id()) is None
