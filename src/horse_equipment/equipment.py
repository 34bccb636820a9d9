"""Per-entity equipment assignment."""

from __future__ import annotations

import logging
import random

from horse_equipment.adapters.entity import MountableEntity
from horse_equipment.catalog import ItemCatalogResolver
from horse_equipment.config_store import EquipmentConfig
from horse_equipment.models import SlotAssignmentResult
from horse_equipment.seating import assign_seats
from horse_equipment.selection import UniqueSlotSelector

MAX_EQUIPMENT_SLOTS = 4


def compute_slots_to_fill(min_slots: int, max_slots: int, available: int, rng: random.Random) -> int:
    """Draw how many unique items to grant.

    The draw spans the configured minimum up to the configured maximum capped by the
    available item count; an empty range yields zero instead of failing. The draw is
    then clamped to the equipment slot count.
    """
    ceiling = min(MAX_EQUIPMENT_SLOTS, available)
    low = max(0, min_slots)
    high = min(max(0, max_slots), available)
    if low > high:
        return 0
    return max(0, min(rng.randint(low, high), ceiling))


class EquipmentAssigner:
    """Saddles an entity and re-equips it from scratch."""

    def __init__(self, resolver: ItemCatalogResolver, *, logger: logging.Logger | None = None) -> None:
        self._resolver = resolver
        self._selector = UniqueSlotSelector(resolver)
        self._logger = logger or logging.getLogger("horse_equipment.equipment")

    def assign(self, entity: MountableEntity, config: EquipmentConfig, rng: random.Random) -> SlotAssignmentResult:
        container = entity.equipment
        if container is None:
            self._logger.debug("entity_without_equipment", extra={"entity": repr(entity)})
            return SlotAssignmentResult()

        seat_count = assign_seats(config.double_seat_chance, config.single_seat_chance, rng)
        entity.set_seat_state(int(seat_count))

        container.clear()

        unique_items = self._selector.select_unique(config.item_specs, rng)
        slots_to_fill = compute_slots_to_fill(
            config.min_slots_to_equip,
            config.max_slots_to_equip,
            len(unique_items),
            rng,
        )

        result = SlotAssignmentResult(seat_count=seat_count, slots_to_fill=slots_to_fill)
        for candidate in unique_items[:slots_to_fill]:
            # A catalog change since selection drops the item without substituting another.
            resolved = self._resolver.resolve(candidate.spec)
            if resolved is None:
                continue
            container.grant(resolved.handle, resolved.amount)
            result.granted_items.append(resolved)

        self._logger.debug(
            "entity_equipped",
            extra={
                "seat_count": int(result.seat_count),
                "slots_to_fill": slots_to_fill,
                "granted": [item.identifier for item in result.granted_items],
            },
        )
        return result
