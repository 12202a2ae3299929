"""components package."""

from .inventory import Inventory
from .item import Item
from .store import Store, StoreItem, StoreType

__all__ = ["Inventory", "Item", "Store", "StoreItem", "StoreType"]
