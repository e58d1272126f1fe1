"""Group store protocols."""

from .protocols import GroupStore, GroupStoreHandle

__all__ = ["GroupStore", "GroupStoreHandle"]
