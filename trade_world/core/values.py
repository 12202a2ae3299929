"""Identity tokens, item categories and money."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum

from .errors import NegativeMoneyError


@dataclass(frozen=True)
class _Identifier:
    value: str

    @classmethod
    def generate(cls):
        return cls(str(uuid.uuid4()))

    def equals(self, other: object) -> bool:
        return self == other

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ItemId(_Identifier):
    """Identity of an item."""


@dataclass(frozen=True)
class CharacterId(_Identifier):
    """Identity of a character owning an inventory or a store."""


@dataclass(frozen=True)
class StoreId(_Identifier):
    """Identity of a store."""


class ItemType(Enum):
    """Enumerate item categories."""

    WEAPON = "weapon"
    SHIELD = "shield"
    HELMET = "helmet"
    ARMOR = "armor"
    GLOVES = "gloves"
    BOOTS = "boots"
    RING = "ring"
    AMULET = "amulet"
    POTION = "potion"
    MISC = "misc"

    def equals(self, other: object) -> bool:
        return self is other


@dataclass(frozen=True, order=True)
class Money:
    """Non-negative amount of the game currency."""

    amount: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(f"Money amount must be an int, got {self.amount!r}")
        if self.amount < 0:
            raise NegativeMoneyError(f"Money cannot be negative: {self.amount}")

    def combine(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def remove(self, other: "Money") -> "Money":
        """Return ``self - other``; raise :class:`NegativeMoneyError` when short."""

        if other.amount > self.amount:
            raise NegativeMoneyError(
                f"Cannot remove {other.amount} from {self.amount}"
            )
        return Money(self.amount - other.amount)

    def covers(self, other: "Money") -> bool:
        return self.amount >= other.amount

    def get_amount(self) -> int:
        return self.amount


__all__ = ["ItemId", "CharacterId", "StoreId", "ItemType", "Money"]
