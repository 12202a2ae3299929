"""Fixed-capacity, slot-indexed storage shared by inventories and stores."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Dict, Generic, Iterator, List, Mapping, Optional, Tuple, TypeVar

from .errors import (
    ContainerFullError,
    ItemNotFoundError,
    NotEnoughSpaceError,
    SlotOutOfRangeError,
    SlotTakenError,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SlottedContainer(Generic[T]):
    """Map slot indices ``0..capacity-1`` to occupants.

    A container never holds ``capacity`` occupants: construction and every
    placement are rejected with :class:`NotEnoughSpaceError` once the
    occupancy would reach ``capacity``, so at most ``capacity - 1`` slots are
    ever filled.

    Two mutation disciplines share the same checks. ``put_at`` and the
    ``remove_*`` methods change the receiver; the ``with_*`` methods leave it
    untouched and return a new container built from a copied mapping.
    """

    def __init__(
        self,
        capacity: int,
        slots: Optional[Mapping[int, T]] = None,
        *,
        name: str = "Container",
    ) -> None:
        if not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Capacity must be a positive integer, got {capacity!r}")

        # Copy so the caller's mapping is never aliased.
        slots = dict(slots or {})
        if len(slots) >= capacity:
            raise NotEnoughSpaceError(
                f"Not enough space in the {name} for {len(slots)} new items"
            )
        for slot in slots:
            if not self._in_range(slot, capacity):
                raise SlotOutOfRangeError(f"{name} slot {slot} is out of range.")

        self.capacity = capacity
        self.name = name
        self._slots: Dict[int, T] = slots

    @staticmethod
    def _in_range(slot: int, capacity: int) -> bool:
        return isinstance(slot, int) and 0 <= slot < capacity

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def find_free_slot(self) -> int:
        """Return the lowest unoccupied slot index."""

        for slot in range(self.capacity):
            if slot not in self._slots:
                return slot

        raise ContainerFullError(f"Cannot add to full {self.name.lower()}")

    def get(self, slot: int) -> Optional[T]:
        """Return the occupant of ``slot`` or ``None`` for an empty or invalid slot."""

        return self._slots.get(slot)

    def is_occupied(self, slot: int) -> bool:
        return slot in self._slots

    def occupied_count(self) -> int:
        return len(self._slots)

    def find_slot(self, predicate: Callable[[T], bool]) -> Optional[int]:
        """Return the lowest slot whose occupant satisfies ``predicate``."""

        for slot in sorted(self._slots):
            if predicate(self._slots[slot]):
                return slot
        return None

    def first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        slot = self.find_slot(predicate)
        return None if slot is None else self._slots[slot]

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        """Return occupants satisfying ``predicate`` in ascending slot order."""

        return [occupant for occupant in self if predicate(occupant)]

    def items(self) -> Mapping[int, T]:
        """Read-only view of the slot mapping."""

        return MappingProxyType(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[T]:
        for slot in sorted(self._slots):
            yield self._slots[slot]

    def __contains__(self, occupant: object) -> bool:
        return any(occupant == other for other in self._slots.values())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, capacity={self.capacity}, occupied={len(self)})"

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def _check_placement(self, slot: int) -> None:
        if not self._in_range(slot, self.capacity):
            raise SlotOutOfRangeError(f"{self.name} slot {slot} is out of range.")
        if slot in self._slots:
            raise SlotTakenError(f"{self.name} slot {slot} is already taken")

    def has_room(self) -> bool:
        """Whether one more occupant keeps the occupancy below ``capacity``."""

        return len(self._slots) + 1 < self.capacity

    def _check_room(self) -> None:
        if not self.has_room():
            raise NotEnoughSpaceError(
                f"Not enough space in the {self.name} for {len(self._slots) + 1} new items"
            )

    def _require_slot(self, predicate: Callable[[T], bool], message: str) -> int:
        slot = self.find_slot(predicate)
        if slot is None:
            raise ItemNotFoundError(message)
        return slot

    # ------------------------------------------------------------------
    # In-place mutation
    # ------------------------------------------------------------------
    def put_at(self, slot: int, occupant: T) -> None:
        """Place ``occupant`` at ``slot``, validating before mutating."""

        self._check_placement(slot)
        self._check_room()
        self._slots[slot] = occupant
        logger.debug("[%s] Placed %r at slot %s", self.name, occupant, slot)

    def remove_at(self, slot: int) -> T:
        if slot not in self._slots:
            raise ItemNotFoundError(f"{self.name} slot {slot} is empty")
        occupant = self._slots.pop(slot)
        logger.debug("[%s] Freed slot %s", self.name, slot)
        return occupant

    def remove_matching(self, predicate: Callable[[T], bool]) -> T:
        """Remove and return the lowest-slot occupant satisfying ``predicate``."""

        slot = self._require_slot(predicate, f"No matching item in the {self.name}")
        return self.remove_at(slot)

    # ------------------------------------------------------------------
    # Copy-producing mutation
    # ------------------------------------------------------------------
    def _derive(self, slots: Mapping[int, T]) -> "SlottedContainer[T]":
        return SlottedContainer(self.capacity, slots, name=self.name)

    def with_put_at(self, slot: int, occupant: T) -> "SlottedContainer[T]":
        """Return a new container with ``occupant`` placed at ``slot``."""

        self._check_placement(slot)
        slots = dict(self._slots)
        slots[slot] = occupant
        return self._derive(slots)

    def with_removed_at(self, slot: int) -> Tuple["SlottedContainer[T]", T]:
        if slot not in self._slots:
            raise ItemNotFoundError(f"{self.name} slot {slot} is empty")
        slots = dict(self._slots)
        occupant = slots.pop(slot)
        return self._derive(slots), occupant

    def with_removed_matching(
        self, predicate: Callable[[T], bool]
    ) -> Tuple["SlottedContainer[T]", T]:
        slot = self._require_slot(predicate, f"No matching item in the {self.name}")
        return self.with_removed_at(slot)


__all__ = ["SlottedContainer"]
