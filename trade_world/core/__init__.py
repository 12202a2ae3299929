"""core package."""

from .errors import (
    ContainerError,
    ContainerFullError,
    InsufficientFundsError,
    ItemNotFoundError,
    ItemNotInContainerError,
    NegativeMoneyError,
    NotEnoughSpaceError,
    SlotOutOfRangeError,
    SlotTakenError,
    StoreDoesNotBuyItemsError,
    StoreError,
    TradeError,
)
from .slotted_container import SlottedContainer

__all__ = [
    "ContainerError",
    "ContainerFullError",
    "InsufficientFundsError",
    "ItemNotFoundError",
    "ItemNotInContainerError",
    "NegativeMoneyError",
    "NotEnoughSpaceError",
    "SlotOutOfRangeError",
    "SlotTakenError",
    "SlottedContainer",
    "StoreDoesNotBuyItemsError",
    "StoreError",
    "TradeError",
]
