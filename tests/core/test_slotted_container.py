import pytest

from trade_world.core.errors import (
    ContainerFullError,
    ItemNotFoundError,
    NotEnoughSpaceError,
    SlotOutOfRangeError,
    SlotTakenError,
)
from trade_world.core.slotted_container import SlottedContainer


def test_construction_copies_mapping():
    slots = {0: "a", 2: "b"}
    container = SlottedContainer(4, slots)
    slots[1] = "c"
    assert container.get(1) is None
    assert container.occupied_count() == 2


def test_construction_rejects_full_occupancy():
    SlottedContainer(3, {0: "a", 1: "b"})
    with pytest.raises(NotEnoughSpaceError):
        SlottedContainer(3, {0: "a", 1: "b", 2: "c"})


def test_construction_rejects_out_of_range_keys():
    with pytest.raises(SlotOutOfRangeError):
        SlottedContainer(4, {4: "a"})
    with pytest.raises(SlotOutOfRangeError):
        SlottedContainer(4, {-1: "a"})


def test_construction_rejects_bad_capacity():
    with pytest.raises(ValueError):
        SlottedContainer(0)


def test_find_free_slot_returns_lowest_index():
    container = SlottedContainer(6, {0: "a", 1: "b", 3: "c"})
    assert container.find_free_slot() == 2
    container.remove_at(0)
    assert container.find_free_slot() == 0


def test_find_free_slot_raises_when_every_slot_is_taken():
    container = SlottedContainer(3)
    # Only reachable by bypassing the occupancy check.
    container._slots.update({0: "a", 1: "b", 2: "c"})
    with pytest.raises(ContainerFullError):
        container.find_free_slot()


def test_put_at_then_get():
    container = SlottedContainer(5, {1: "x"})
    container.put_at(3, "y")
    assert container.get(3) == "y"
    assert container.get(1) == "x"
    assert container.get(0) is None
    assert container.get(99) is None


def test_put_at_rejects_out_of_range_and_taken():
    container = SlottedContainer(5, {1: "x"})
    with pytest.raises(SlotOutOfRangeError):
        container.put_at(5, "y")
    with pytest.raises(SlotTakenError):
        container.put_at(1, "y")
    assert dict(container.items()) == {1: "x"}


def test_put_at_keeps_occupancy_below_capacity():
    container = SlottedContainer(3, {0: "a"})
    container.put_at(1, "b")
    assert not container.has_room()
    with pytest.raises(NotEnoughSpaceError):
        container.put_at(2, "c")
    assert container.occupied_count() == 2
    assert container.get(2) is None


def test_remove_and_reuse_slot():
    container = SlottedContainer(4, {0: "a", 1: "b"})
    assert container.remove_at(1) == "b"
    container.put_at(1, "c")
    assert container.get(1) == "c"


def test_remove_missing_raises():
    container = SlottedContainer(4, {0: "a"})
    with pytest.raises(ItemNotFoundError):
        container.remove_at(2)
    with pytest.raises(ItemNotFoundError):
        container.remove_matching(lambda occupant: occupant == "zzz")


def test_remove_matching_takes_lowest_slot():
    container = SlottedContainer(6, {4: "dup", 1: "dup", 2: "other"})
    assert container.remove_matching(lambda occupant: occupant == "dup") == "dup"
    assert container.get(1) is None
    assert container.get(4) == "dup"


def test_filter_iterates_in_slot_order():
    container = SlottedContainer(10, {7: 7, 2: 2, 5: 5, 0: 0})
    assert container.filter(lambda n: n > 1) == [2, 5, 7]
    assert container.filter(lambda n: n > 100) == []
    assert list(container) == [0, 2, 5, 7]


def test_with_methods_leave_receiver_untouched():
    original = SlottedContainer(5, {0: "a"})

    added = original.with_put_at(2, "b")
    assert original.get(2) is None
    assert added.get(2) == "b"

    removed, occupant = added.with_removed_at(0)
    assert occupant == "a"
    assert added.get(0) == "a"
    assert removed.get(0) is None

    _, occupant = added.with_removed_matching(lambda o: o == "b")
    assert occupant == "b"
    assert added.get(2) == "b"


def test_with_put_at_revalidates_occupancy():
    original = SlottedContainer(3, {0: "a", 1: "b"})
    with pytest.raises(NotEnoughSpaceError):
        original.with_put_at(2, "c")


def test_items_view_is_read_only():
    container = SlottedContainer(4, {0: "a"})
    view = container.items()
    with pytest.raises(TypeError):
        view[1] = "b"  # type: ignore[index]
