"""Cooperative scheduling on top of the asyncio event loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any, Callable, Protocol


class CooperativeScheduler(Protocol):
    """Host ticker that runs deferred callbacks and long-running cooperative tasks."""

    def next_tick(self, fn: Callable[..., Any], *args: Any) -> asyncio.Handle:
        """Run ``fn`` once the current scheduling step has completed."""

    def run_later(self, delay: float, fn: Callable[..., Any], *args: Any) -> asyncio.TimerHandle:
        """Run ``fn`` after ``delay`` seconds."""

    def start_task(self, name: str, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        """Start a named task, cancelling any in-flight task with the same name."""

    def stop_task(self, name: str) -> bool:
        """Cancel the named task; return whether one was running."""

    def stop_all(self) -> None:
        """Cancel every task started through this scheduler."""


class AsyncioScheduler:
    """Scheduler keyed by task name, one active task per name."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._loop = loop
        self._tasks: dict[str, asyncio.Task[Any]] = {}
        self._logger = logger or logging.getLogger("horse_equipment.scheduler")

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def next_tick(self, fn: Callable[..., Any], *args: Any) -> asyncio.Handle:
        return self.loop.call_soon(fn, *args)

    def run_later(self, delay: float, fn: Callable[..., Any], *args: Any) -> asyncio.TimerHandle:
        return self.loop.call_later(delay, fn, *args)

    def start_task(self, name: str, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        self.stop_task(name)

        task = self.loop.create_task(coro, name=name)
        self._tasks[name] = task
        task.add_done_callback(lambda finished: self._discard(name, finished))
        self._logger.debug("task_started", extra={"task_name": name})
        return task

    def get_task(self, name: str) -> asyncio.Task[Any] | None:
        return self._tasks.get(name)

    def stop_task(self, name: str) -> bool:
        task = self._tasks.pop(name, None)
        if task is None or task.done():
            return False

        task.cancel()
        self._logger.debug("task_cancelled", extra={"task_name": name})
        return True

    def stop_all(self) -> None:
        for name in list(self._tasks):
            self.stop_task(name)

    def _discard(self, name: str, task: asyncio.Task[Any]) -> None:
        if self._tasks.get(name) is task:
            del self._tasks[name]
