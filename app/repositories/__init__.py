"""Repositories package - cache storage for collected documents."""

from app.repositories.backends import CacheBackend, MemoryBackend, RedisBackend
from app.repositories.cache import CacheStore, create_cache_store

__all__ = [
    # Backends
    "CacheBackend",
    "MemoryBackend",
    "RedisBackend",
    # Store
    "CacheStore",
    "create_cache_store",
]
