"""Periodic refresh - one asyncio loop per provider."""

import asyncio

from loguru import logger

from app.models.common import Unavailable
from app.services.base import BaseCollector
from settings import (
    INTERVAL_DISCORD,
    INTERVAL_GITHUB,
    INTERVAL_LEETCODE,
    INTERVAL_SPOTIFY,
    INTERVAL_WAKATIME,
)

# Minutes between refreshes
INTERVALS = {
    "discord": INTERVAL_DISCORD,
    "spotify": INTERVAL_SPOTIFY,
    "leetcode": INTERVAL_LEETCODE,
    "wakatime": INTERVAL_WAKATIME,
    "github": INTERVAL_GITHUB,
}


async def run_refresh(name: str, collector: BaseCollector) -> bool:
    """Refresh one provider; ``False`` if nothing usable came out of it."""
    try:
        result = await collector.refresh()
    except Exception:
        logger.exception("Scheduled refresh of {} crashed", name)
        return False
    return not isinstance(result, Unavailable)


class Scheduler:
    """Runs every collector once at start-up, then on its own interval.

    A slow or failing provider never delays the others: each one gets an
    independent task.
    """

    def __init__(self, collectors: dict[str, BaseCollector], intervals: dict[str, float] | None = None):
        self.collectors = collectors
        self.intervals = {**INTERVALS, **(intervals or {})}
        self._stop = asyncio.Event()

    async def run_once(self, names: list[str] | None = None) -> dict[str, bool]:
        """Refresh the given providers (all by default) concurrently."""
        selected = {n: c for n, c in self.collectors.items() if names is None or n in names}
        results = await asyncio.gather(*(run_refresh(n, c) for n, c in selected.items()))
        return dict(zip(selected, results))

    async def _loop(self, name: str, collector: BaseCollector) -> None:
        interval = self.intervals[name] * 60
        logger.info("Scheduling {} every {} min", name, self.intervals[name])
        while not self._stop.is_set():
            await run_refresh(name, collector)
            try:
                await asyncio.wait_for(self._stop.wait(), timeout=interval)
            except TimeoutError:
                pass

    async def run(self) -> None:
        """Run until ``stop()`` is called."""
        self._stop.clear()
        tasks = [asyncio.create_task(self._loop(n, c), name=f"refresh:{n}") for n, c in self.collectors.items()]
        logger.info("Scheduler started with {} providers", len(tasks))
        try:
            await self._stop.wait()
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.info("Scheduler stopped")

    def stop(self) -> None:
        self._stop.set()
