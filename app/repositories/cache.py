"""Cache store - JSON documents with per-key expiry."""

import json
from typing import Any

from loguru import logger

from app.repositories.backends import CacheBackend, MemoryBackend, RedisBackend
from stats_client.errors import CacheBackendUnavailable


class CacheStore:
    """Best-effort document cache shared by every collector.

    Created once at startup and closed once at shutdown. Without a backend
    it is a permanent no-op: reads miss, writes report ``False``. No method
    raises; a failing backend looks exactly like an empty cache.
    """

    def __init__(self, backend: CacheBackend | None = None):
        self._backend = backend
        if backend is None:
            logger.warning("No cache backend configured, running without cache")
        else:
            logger.info("Cache backend: {}", backend.__class__.__name__)

    @property
    def configured(self) -> bool:
        return self._backend is not None

    async def get(self, key: str) -> Any | None:
        """Cached document, or ``None`` on miss, expiry or any failure."""
        if self._backend is None:
            return None
        try:
            raw = await self._backend.get(key)
        except CacheBackendUnavailable as e:
            logger.error("Cache get failed for {}: {}", key, e)
            return None
        if raw is None:
            return None
        try:
            value = json.loads(raw)
        except ValueError as e:
            logger.error("Cache entry {} is not valid JSON: {}", key, e)
            return None
        logger.debug("Cache hit: {}", key)
        return value

    async def set(self, key: str, value: Any, ttl: int) -> bool:
        """Store a document for ``ttl`` seconds; ``False`` if it was not stored."""
        if self._backend is None:
            return False
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.error("Cache value for {} is not serializable: {}", key, e)
            return False
        try:
            await self._backend.set(key, raw, max(int(ttl), 1))
        except CacheBackendUnavailable as e:
            logger.error("Cache set failed for {}: {}", key, e)
            return False
        logger.debug("Cache saved: {} (ttl={}s)", key, ttl)
        return True

    async def delete(self, key: str) -> bool:
        """Purge one key."""
        if self._backend is None:
            return False
        try:
            await self._backend.delete(key)
        except CacheBackendUnavailable as e:
            logger.error("Cache delete failed for {}: {}", key, e)
            return False
        logger.info("Cache cleared: {}", key)
        return True

    async def list_keys(self, pattern: str = "*") -> list[str]:
        """Keys matching a glob pattern."""
        if self._backend is None:
            return []
        try:
            return await self._backend.keys(pattern)
        except CacheBackendUnavailable as e:
            logger.error("Cache keys failed for {}: {}", pattern, e)
            return []

    async def is_available(self) -> bool:
        """Backend reachable right now (health reporting only)."""
        if self._backend is None:
            return False
        try:
            return await self._backend.ping()
        except CacheBackendUnavailable:
            return False

    async def close(self) -> None:
        if self._backend is not None:
            await self._backend.close()
            logger.info("Cache connection closed")


def create_cache_store(url: str | None) -> CacheStore:
    """Build the store for a backend URL.

    ``None``/empty - no cache, ``memory://`` - in-process,
    ``redis://``/``rediss://``/``unix://`` - Redis.
    """
    if not url:
        return CacheStore()
    if url.startswith("memory://"):
        return CacheStore(MemoryBackend())
    if url.startswith(("redis://", "rediss://", "unix://")):
        return CacheStore(RedisBackend(url))
    logger.error("Unsupported cache URL scheme: {}", url.split("://")[0])
    return CacheStore()
