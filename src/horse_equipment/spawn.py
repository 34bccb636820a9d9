"""Equips horses as the host reports them spawning."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Callable

from horse_equipment.adapters.entity import MountableEntity
from horse_equipment.config_store import EquipmentConfig
from horse_equipment.equipment import EquipmentAssigner
from horse_equipment.scheduler import CooperativeScheduler


class SpawnListener:
    """Defers assignment by one scheduler step so the entity finishes constructing first."""

    def __init__(
        self,
        assigner: EquipmentAssigner,
        scheduler: CooperativeScheduler,
        *,
        config_source: Callable[[], EquipmentConfig | None],
        rng: random.Random,
        logger: logging.Logger | None = None,
    ) -> None:
        self._assigner = assigner
        self._scheduler = scheduler
        self._config_source = config_source
        self._rng = rng
        self._logger = logger or logging.getLogger("horse_equipment.spawn")
        self._pending: set[asyncio.Handle] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def on_spawned(self, entity: MountableEntity | None) -> asyncio.Handle | None:
        if entity is None:
            return None

        handle: asyncio.Handle | None = None

        def _deferred() -> None:
            self._pending.discard(handle)
            self._equip(entity)

        handle = self._scheduler.next_tick(_deferred)
        self._pending.add(handle)
        return handle

    def cancel_pending(self) -> None:
        for handle in self._pending:
            handle.cancel()
        self._pending.clear()

    def _equip(self, entity: MountableEntity) -> None:
        if entity.is_destroyed:
            self._logger.debug("spawned_entity_destroyed", extra={"entity": repr(entity)})
            return

        config = self._config_source()
        if config is None:
            return

        self._assigner.assign(entity, config, self._rng)
