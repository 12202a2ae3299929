"""Exceptions raised by slotted containers, stores and trades."""

from __future__ import annotations


class ContainerError(Exception):
    """Base error for slotted container violations."""


class SlotOutOfRangeError(ContainerError):
    """Raised when a slot index falls outside ``[0, capacity)``."""


class SlotTakenError(ContainerError):
    """Raised when placing into a slot that is already occupied."""


class ContainerFullError(ContainerError):
    """Raised when no free slot is left for automatic placement."""


class NotEnoughSpaceError(ContainerError):
    """Raised when the occupancy would reach the container capacity."""


class ItemNotFoundError(ContainerError):
    """Raised when removing an occupant the container does not hold."""


class ItemNotInContainerError(ItemNotFoundError):
    """Raised when taking an item out of a store that does not list it."""


class StoreError(Exception):
    """Base error for store policy violations."""


class StoreDoesNotBuyItemsError(StoreError):
    """Raised when money is withdrawn from a sell-only store."""


class NegativeMoneyError(ValueError):
    """Raised when an amount of money would drop below zero."""


class TradeError(Exception):
    """Raised when a trade between a character and a store is refused."""


class InsufficientFundsError(TradeError):
    """Raised when a buyer cannot cover the listed price."""


__all__ = [
    "ContainerError",
    "SlotOutOfRangeError",
    "SlotTakenError",
    "ContainerFullError",
    "NotEnoughSpaceError",
    "ItemNotFoundError",
    "ItemNotInContainerError",
    "StoreError",
    "StoreDoesNotBuyItemsError",
    "NegativeMoneyError",
    "TradeError",
    "InsufficientFundsError",
]
