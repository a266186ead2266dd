import asyncio
from typing import Optional

from hbot.infra.logging import logger, log_event
from hbot.recency import RecencySet


class Sweeper:
    """Clears a RecencySet every `interval` seconds until stopped."""

    def __init__(self, recency: RecencySet, interval: float = 2.0):
        self.recency = recency
        self.interval = interval
        self._stop = asyncio.Event()
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        # ready can fire again after a reconnect; keep a single loop
        if self.running:
            return self._task
        self._stop.clear()
        self._task = asyncio.get_running_loop().create_task(self.run(), name="recency_sweeper")
        log_event("sweeper_started", interval_s=self.interval)
        return self._task

    async def stop(self) -> None:
        self._stop.set()
        task, self._task = self._task, None
        if task is None:
            return
        await task
        log_event("sweeper_stopped")

    async def sweep_once(self) -> int:
        cleared = await self.recency.clear()
        if cleared > 0:
            log_event("recency_cleared", count=cleared)
        return cleared

    async def run(self) -> None:
        while not self._stop.is_set():
            try:
                await asyncio.wait_for(self._stop.wait(), timeout=self.interval)
            except asyncio.TimeoutError:
                pass
            else:
                return
            try:
                await self.sweep_once()
            except Exception as e:
                logger.exception(e)


__all__ = ["Sweeper"]
