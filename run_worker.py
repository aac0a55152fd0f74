#!/usr/bin/env python3
"""
Refresh provider stats into the cache.

Usage:
    python run_worker.py                  # Run the scheduler until interrupted
    python run_worker.py once             # Refresh every provider once and exit
    python run_worker.py github leetcode  # Refresh the named providers once
    python run_worker.py --keys           # List cached keys
"""

import asyncio
import signal
import sys

from app.container import container
from app.models.common import CACHE_PREFIX
from settings import LOG_LEVEL
from settings.logging import setup_logging
from worker import Scheduler

logger = setup_logging(level=LOG_LEVEL, to_file=True)


async def refresh_once(names: list[str] | None) -> bool:
    scheduler = Scheduler(container.collectors)
    try:
        results = await scheduler.run_once(names)
    finally:
        await container.close()

    for name, ok in results.items():
        logger.info("{}: {}", name, "ok" if ok else "unavailable")
    return all(results.values())


async def list_keys() -> None:
    try:
        keys = await container.cache.list_keys(f"{CACHE_PREFIX}*")
    finally:
        await container.close()
    for key in sorted(keys):
        print(key)


async def serve() -> None:
    scheduler = Scheduler(container.collectors)
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, scheduler.stop)
    try:
        await scheduler.run()
    finally:
        await container.close()


def main():
    args = sys.argv[1:]
    container.init()

    if "--keys" in args:
        asyncio.run(list_keys())
        return

    if not args:
        asyncio.run(serve())
        return

    names = None if args == ["once"] else args
    unknown = [n for n in names or [] if n not in container.collectors]
    if unknown:
        print(__doc__)
        sys.exit(1)

    if not asyncio.run(refresh_once(names)):
        sys.exit(1)


if __name__ == "__main__":
    main()
