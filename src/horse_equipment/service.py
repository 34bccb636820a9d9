"""Service object wiring configuration, randomness and the equipment pipeline."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Iterable

from horse_equipment.adapters.catalog import ItemCatalog
from horse_equipment.adapters.entity import MountableEntity
from horse_equipment.batch import BatchProcessor
from horse_equipment.catalog import ItemCatalogResolver
from horse_equipment.config_store import ConfigStore, EquipmentConfig
from horse_equipment.equipment import EquipmentAssigner
from horse_equipment.models import SlotAssignmentResult
from horse_equipment.scheduler import AsyncioScheduler, CooperativeScheduler
from horse_equipment.spawn import SpawnListener


class HorseEquipmentService:
    """Owns the equipment configuration and reacts to host lifecycle hooks."""

    def __init__(
        self,
        *,
        catalog: ItemCatalog,
        store: ConfigStore,
        scheduler: CooperativeScheduler | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
        batch_delay_seconds: float = 0.01,
        logger: logging.Logger | None = None,
    ) -> None:
        self._store = store
        self._scheduler = scheduler or AsyncioScheduler()
        self._rng = rng or random.Random(seed)
        self._logger = logger or logging.getLogger("horse_equipment.service")
        self._config: EquipmentConfig | None = None

        self.resolver = ItemCatalogResolver(catalog)
        self.assigner = EquipmentAssigner(self.resolver)
        self.batch = BatchProcessor(self.assigner, self._scheduler, delay_seconds=batch_delay_seconds)
        self.spawn_listener = SpawnListener(
            self.assigner,
            self._scheduler,
            config_source=lambda: self._config,
            rng=self._rng,
        )

    @property
    def config(self) -> EquipmentConfig | None:
        return self._config

    @property
    def rng(self) -> random.Random:
        return self._rng

    def init(self) -> EquipmentConfig:
        self._config = self._store.load()
        self._logger.info(
            "service_initialized",
            extra={"version": self._config.version, "items": len(self._config.item_specs)},
        )
        return self._config

    def reload(self) -> EquipmentConfig:
        """Replace the configuration wholesale; cached item lookups belong to the old one."""
        self._config = self._store.load()
        self.resolver.clear()
        self._logger.info("service_reloaded", extra={"version": self._config.version})
        return self._config

    def shutdown(self) -> None:
        self._scheduler.stop_all()
        self.spawn_listener.cancel_pending()
        self.resolver.clear()
        self._config = None
        self._logger.info("service_shutdown")

    def on_server_initialized(self, population: Iterable[MountableEntity | None]) -> asyncio.Task[int] | None:
        if self._config is None:
            self._logger.debug("batch_skipped_uninitialized")
            return None
        return self.batch.start(population, self._config, self._rng)

    def on_entity_spawned(self, entity: MountableEntity | None) -> asyncio.Handle | None:
        if self._config is None:
            self._logger.debug("spawn_skipped_uninitialized")
            return None
        return self.spawn_listener.on_spawned(entity)

    def equip(self, entity: MountableEntity) -> SlotAssignmentResult:
        """Equip ``entity`` immediately with the current configuration."""
        if self._config is None:
            return SlotAssignmentResult()
        return self.assigner.assign(entity, self._config, self._rng)
