"""Random selection of at most one item per equipment slot."""

from __future__ import annotations

import random
from collections.abc import Sequence

from horse_equipment.catalog import ItemCatalogResolver
from horse_equipment.models import ItemSpec, ResolvedItem


class UniqueSlotSelector:
    def __init__(self, resolver: ItemCatalogResolver) -> None:
        self._resolver = resolver

    def select_unique(self, items: Sequence[ItemSpec], rng: random.Random) -> list[ResolvedItem]:
        """Shuffle a copy of ``items`` and keep the first item seen for each slot category.

        Unknown items and items competing for an already taken slot are dropped.
        """
        shuffled = list(items)
        rng.shuffle(shuffled)

        seen_slots: set = set()
        unique: list[ResolvedItem] = []
        for spec in shuffled:
            resolved = self._resolver.resolve(spec)
            if resolved is None or resolved.slot_category in seen_slots:
                continue
            seen_slots.add(resolved.slot_category)
            unique.append(resolved)
        return unique
