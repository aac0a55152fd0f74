"""Cache backends - in-process dict and Redis.

Backends raise ``CacheBackendUnavailable`` on any failure; the store turns
that into a miss.
"""

import fnmatch
from typing import Protocol, runtime_checkable

import redis.asyncio as aioredis
from loguru import logger
from redis.exceptions import RedisError

from app.models.common import CachedEntry
from stats_client.errors import CacheBackendUnavailable


@runtime_checkable
class CacheBackend(Protocol):
    """Raw string key/value store with per-key expiry."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str, ttl: int) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def keys(self, pattern: str) -> list[str]: ...

    async def ping(self) -> bool: ...

    async def close(self) -> None: ...


class MemoryBackend:
    """Process-local backend; entries expire lazily on read."""

    def __init__(self):
        self._store: dict[str, CachedEntry] = {}

    async def get(self, key: str) -> str | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        if entry.is_expired():
            del self._store[key]
            return None
        return entry.value

    async def set(self, key: str, value: str, ttl: int) -> None:
        self._store[key] = CachedEntry.create(key, value, ttl)

    async def delete(self, key: str) -> None:
        self._store.pop(key, None)

    async def keys(self, pattern: str) -> list[str]:
        return sorted(k for k, e in self._store.items() if fnmatch.fnmatchcase(k, pattern) and not e.is_expired())

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._store.clear()


class RedisBackend:
    """Redis backend over ``redis.asyncio``; one connection pool per process."""

    def __init__(self, url: str | None = None, client: aioredis.Redis | None = None):
        self._client = client or aioredis.from_url(
            url,
            decode_responses=True,
            socket_timeout=5,
            socket_connect_timeout=5,
            health_check_interval=30,
        )

    async def get(self, key: str) -> str | None:
        try:
            return await self._client.get(key)
        except (RedisError, OSError) as e:
            raise CacheBackendUnavailable(f"GET {key}: {e}") from e

    async def set(self, key: str, value: str, ttl: int) -> None:
        try:
            await self._client.set(key, value, ex=ttl)
        except (RedisError, OSError) as e:
            raise CacheBackendUnavailable(f"SET {key}: {e}") from e

    async def delete(self, key: str) -> None:
        try:
            await self._client.delete(key)
        except (RedisError, OSError) as e:
            raise CacheBackendUnavailable(f"DEL {key}: {e}") from e

    async def keys(self, pattern: str) -> list[str]:
        try:
            return sorted([k async for k in self._client.scan_iter(match=pattern)])
        except (RedisError, OSError) as e:
            raise CacheBackendUnavailable(f"SCAN {pattern}: {e}") from e

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except (RedisError, OSError) as e:
            raise CacheBackendUnavailable(f"PING: {e}") from e

    async def close(self) -> None:
        try:
            await self._client.aclose()
        except (RedisError, OSError) as e:
            logger.warning("Redis close failed: {}", e)
