"""Slot-indexed inventories and trade stores."""
