"""Boundaries to the host game: item catalog and equippable entities."""

from .catalog import DEFAULT_HORSE_ITEMS, EquipmentSlot, InMemoryItemCatalog, ItemCatalog
from .entity import EquipmentContainer, EquipmentInventory, MountableEntity, SimulatedHorse

__all__ = [
    "DEFAULT_HORSE_ITEMS",
    "EquipmentContainer",
    "EquipmentInventory",
    "EquipmentSlot",
    "InMemoryItemCatalog",
    "ItemCatalog",
    "MountableEntity",
    "SimulatedHorse",
]
