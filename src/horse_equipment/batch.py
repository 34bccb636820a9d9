"""Startup sweep that equips the pre-existing horse population."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Iterable, Sequence

from horse_equipment.adapters.entity import MountableEntity
from horse_equipment.config_store import EquipmentConfig
from horse_equipment.equipment import EquipmentAssigner
from horse_equipment.scheduler import CooperativeScheduler


class BatchProcessor:
    """Walks a population snapshot one entity per step so the host loop is never starved."""

    TASK_NAME = "horse-equipment-batch"

    def __init__(
        self,
        assigner: EquipmentAssigner,
        scheduler: CooperativeScheduler,
        *,
        delay_seconds: float = 0.01,
        logger: logging.Logger | None = None,
    ) -> None:
        if delay_seconds <= 0:
            raise ValueError("delay_seconds must be positive")

        self._assigner = assigner
        self._scheduler = scheduler
        self._delay_seconds = delay_seconds
        self._logger = logger or logging.getLogger("horse_equipment.batch")
        self._task: asyncio.Task[int] | None = None
        self.processed = 0

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_all(
        self,
        entities: Sequence[MountableEntity | None],
        config: EquipmentConfig,
        rng: random.Random,
    ) -> int:
        """Equip every live entity in ``entities``, pausing after each one."""
        self.processed = 0
        self._logger.info("batch_started", extra={"population": len(entities)})
        try:
            for entity in entities:
                if entity is not None and not entity.is_destroyed:
                    self._assigner.assign(entity, config, rng)
                    self.processed += 1

                await asyncio.sleep(self._delay_seconds)
        except asyncio.CancelledError:
            self._logger.info("batch_cancelled", extra={"processed": self.processed})
            raise

        self._logger.info("batch_finished", extra={"processed": self.processed})
        return self.processed

    def start(
        self,
        entities: Iterable[MountableEntity | None],
        config: EquipmentConfig,
        rng: random.Random,
    ) -> asyncio.Task[int]:
        """Snapshot ``entities`` and run the sweep as the single active batch task."""
        snapshot = list(entities)
        self._task = self._scheduler.start_task(self.TASK_NAME, self.run_all(snapshot, config, rng))
        return self._task

    def cancel(self) -> bool:
        return self._scheduler.stop_task(self.TASK_NAME)

    async def wait(self) -> int | None:
        """Wait for the current batch; ``None`` when it was cancelled or never started.

        Cancelling the waiter cancels only the waiter, the sweep keeps running.
        """
        task = self._task
        if task is None:
            return None
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            if task.cancelled():
                return None
            raise

    async def stop(self) -> None:
        """Cancel the current batch and wait until it has unwound."""
        if not self._task:
            return

        self.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        finally:
            self._task = None
