"""Boundary for the host game's item-definition catalog."""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol


class EquipmentSlot(str, Enum):
    """Mutually exclusive equipment positions on a horse."""

    ARMOR = "armor"
    FEET = "feet"
    STORAGE = "storage"
    HEAD = "head"


class ItemCatalog(Protocol):
    """Read-only lookup of item definitions by short name."""

    def find_definition(self, identifier: str) -> int | None:
        """Return the item handle for ``identifier`` or ``None`` when unknown."""

    def get_slot_category(self, handle: int) -> Any:
        """Return the equipment slot the item occupies, or ``None`` if it is not equipment."""


DEFAULT_HORSE_ITEMS: dict[str, EquipmentSlot] = {
    "horse.armor.roadsign": EquipmentSlot.ARMOR,
    "horse.armor.wood": EquipmentSlot.ARMOR,
    "horse.shoes.advanced": EquipmentSlot.FEET,
    "horse.shoes.basic": EquipmentSlot.FEET,
    "horse.saddlebag": EquipmentSlot.STORAGE,
}


class InMemoryItemCatalog:
    """Catalog backed by a dict, used for the CLI simulation and tests."""

    def __init__(self, definitions: dict[str, Any] | None = None) -> None:
        self._handles: dict[str, int] = {}
        self._slots: dict[int, Any] = {}
        self.lookups = 0
        for identifier, slot in (DEFAULT_HORSE_ITEMS if definitions is None else definitions).items():
            self.register(identifier, slot)

    def register(self, identifier: str, slot: Any) -> int:
        handle = self._handles.get(identifier)
        if handle is None:
            handle = len(self._handles) + 1
            self._handles[identifier] = handle
        self._slots[handle] = slot
        return handle

    def unregister(self, identifier: str) -> None:
        handle = self._handles.pop(identifier, None)
        if handle is not None:
            self._slots.pop(handle, None)

    def find_definition(self, identifier: str) -> int | None:
        self.lookups += 1
        return self._handles.get(identifier)

    def get_slot_category(self, handle: int) -> Any:
        return self._slots.get(handle)
