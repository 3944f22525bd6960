from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from contextlib import suppress
from datetime import timedelta

from models.session import SWEEP_INTERVAL
from services.session_manager import SessionManager

logger = logging.getLogger(__name__)


class SessionSweeper:
    """
    Periodically removes expired guessing sessions.

    The sleep function is injectable; tests pass one that advances a fake clock
    instead of waiting.
    """

    def __init__(
        self,
        manager: SessionManager,
        *,
        interval: timedelta = SWEEP_INTERVAL,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._manager = manager
        self._interval = interval
        self._sleep = sleep
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def tick(self) -> int:
        try:
            return self._manager.sweep_expired()
        except Exception as exc:  # noqa: BLE001
            logger.error("[sweeper] Sweep failed: %s", exc, exc_info=True)
            return 0

    async def run(self) -> None:
        seconds = self._interval.total_seconds()
        while True:
            await self._sleep(seconds)
            self.tick()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self.run(), name="session-sweeper")
        logger.info("[sweeper] Started; interval=%ss", int(self._interval.total_seconds()))

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task
        logger.info("[sweeper] Stopped.")
