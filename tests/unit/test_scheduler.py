"""Tests for the refresh scheduler."""

import asyncio

from app.models.common import Unavailable
from stats_client.errors import FailureKind
from worker import Scheduler, run_refresh


class CountingCollector:
    def __init__(self, result=None, error: Exception | None = None):
        self.result = {"ok": True} if result is None else result
        self.error = error
        self.calls = 0

    async def refresh(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.result


class TestRunRefresh:
    async def test_ok(self):
        assert await run_refresh("a", CountingCollector()) is True

    async def test_unavailable(self):
        collector = CountingCollector(Unavailable("a", FailureKind.NOT_CONFIGURED))
        assert await run_refresh("a", collector) is False

    async def test_crash_is_contained(self):
        assert await run_refresh("a", CountingCollector(error=RuntimeError("boom"))) is False


class TestScheduler:
    async def test_run_once(self):
        good, bad = CountingCollector(), CountingCollector(error=RuntimeError("boom"))
        scheduler = Scheduler({"good": good, "bad": bad}, intervals={"good": 1, "bad": 1})
        assert await scheduler.run_once() == {"good": True, "bad": False}

    async def test_run_once_selected(self):
        a, b = CountingCollector(), CountingCollector()
        scheduler = Scheduler({"a": a, "b": b}, intervals={"a": 1, "b": 1})
        await scheduler.run_once(["b"])
        assert (a.calls, b.calls) == (0, 1)

    async def test_loop_keeps_going_after_crash(self):
        good, bad = CountingCollector(), CountingCollector(error=RuntimeError("boom"))
        scheduler = Scheduler({"good": good, "bad": bad}, intervals={"good": 0.0005, "bad": 0.0005})
        task = asyncio.create_task(scheduler.run())
        await asyncio.sleep(0.2)
        scheduler.stop()
        await asyncio.wait_for(task, timeout=1)
        assert good.calls >= 2
        assert bad.calls >= 2

    async def test_initial_run(self):
        collector = CountingCollector()
        scheduler = Scheduler({"slow": collector}, intervals={"slow": 60})
        task = asyncio.create_task(scheduler.run())
        await asyncio.sleep(0.05)
        scheduler.stop()
        await asyncio.wait_for(task, timeout=1)
        assert collector.calls == 1
