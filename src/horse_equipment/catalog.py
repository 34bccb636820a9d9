"""Memoized resolution of configured items against the game item catalog."""

from __future__ import annotations

import logging

from horse_equipment.adapters.catalog import ItemCatalog
from horse_equipment.models import ItemSpec, ResolvedItem


class ItemCatalogResolver:
    """Resolves item specs to catalog handles and slot categories.

    Successful lookups are cached per spec instance. Failed lookups are not cached,
    so an item becomes usable as soon as the catalog learns about it.
    """

    def __init__(self, catalog: ItemCatalog, *, logger: logging.Logger | None = None) -> None:
        self._catalog = catalog
        self._resolved: dict[ItemSpec, ResolvedItem] = {}
        self._logger = logger or logging.getLogger("horse_equipment.catalog")

    def resolve(self, spec: ItemSpec) -> ResolvedItem | None:
        """Return the resolved item, or ``None`` when the catalog does not know it."""
        cached = self._resolved.get(spec)
        if cached is not None:
            return cached

        handle = self._catalog.find_definition(spec.identifier)
        if handle is None:
            self._logger.debug("item_not_found", extra={"identifier": spec.identifier})
            return None

        slot_category = self._catalog.get_slot_category(handle)
        if slot_category is None:
            self._logger.debug("item_not_equipment", extra={"identifier": spec.identifier})
            return None

        resolved = ResolvedItem(spec=spec, slot_category=slot_category, handle=handle)
        self._resolved[spec] = resolved
        return resolved

    def forget(self, spec: ItemSpec) -> None:
        self._resolved.pop(spec, None)

    def clear(self) -> None:
        self._resolved.clear()

    def __len__(self) -> int:
        return len(self._resolved)
