"""Collector base - fetch, normalize, cache, fall back."""

from collections.abc import Callable
from datetime import UTC, datetime, tzinfo
from enum import StrEnum
from typing import Any
from zoneinfo import ZoneInfo

import httpx
from loguru import logger
from tenacity import AsyncRetrying, retry_if_result, stop_after_attempt, wait_exponential

from app.models.common import Document, Unavailable
from app.repositories.cache import CacheStore
from settings import CACHE_TTL, REFRESH_ATTEMPTS, STATS_TIMEZONE
from stats_client.errors import FailureKind
from stats_client.result import Result


class RefreshState(StrEnum):
    """Where the last refresh cycle ended up."""

    IDLE = "idle"
    FETCHING = "fetching"
    NORMALIZING = "normalizing"
    CACHED = "cached"
    FAILED = "failed"
    FALLBACK_LOOKUP = "fallback_lookup"
    STALE_SERVED = "stale_served"
    ABSENT = "absent"


def utc_now() -> datetime:
    return datetime.now(UTC)


class BaseCollector:
    """One provider end to end.

    ``refresh()`` and ``get()`` never raise: they resolve to a document dict
    or to an ``Unavailable`` marker. Subclasses implement ``fetch()`` (all
    upstream calls, returning a ``Result``) and ``normalize()`` (pure).
    """

    provider = ""
    cache_key = ""
    hint = ""

    def __init__(
        self,
        cache: CacheStore,
        ttl: int = CACHE_TTL,
        attempts: int = REFRESH_ATTEMPTS,
        backoff: float = 1.0,
        timezone: tzinfo | str = STATS_TIMEZONE,
        clock: Callable[[], datetime] = utc_now,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._cache = cache
        self._ttl = ttl
        self._attempts = max(attempts, 1)
        self._backoff = backoff
        self._tz = ZoneInfo(timezone) if isinstance(timezone, str) else timezone
        self._clock = clock
        self._transport = transport
        self._log = logger.bind(provider=self.provider)

        self.state = RefreshState.IDLE
        self.last_failure: FailureKind | None = None
        self.last_success: str | None = None

    @property
    def configured(self) -> bool:
        """All required credentials/identifiers are present."""
        return True

    def status(self) -> dict[str, Any]:
        """Health snapshot."""
        return {
            "configured": self.configured,
            "state": str(self.state),
            "last_failure": str(self.last_failure) if self.last_failure else None,
            "last_success": self.last_success,
        }

    async def fetch(self) -> Result[Any]:
        raise NotImplementedError

    def normalize(self, raw: Any) -> Document:
        raise NotImplementedError

    async def get(self) -> dict | Unavailable:
        """Cached document when fresh, otherwise a synchronous refresh."""
        cached = await self._cache.get(self.cache_key)
        if cached is not None:
            return cached
        return await self.refresh()

    async def refresh(self) -> dict | Unavailable:
        """Fetch, normalize and cache; serve the last cached copy on failure."""
        if not self.configured:
            self.state = RefreshState.ABSENT
            self.last_failure = FailureKind.NOT_CONFIGURED
            self._log.warning("{} not configured: {}", self.provider, self.hint)
            return self._unavailable(FailureKind.NOT_CONFIGURED)

        self.state = RefreshState.FETCHING
        self._log.info("Fetching {} data...", self.provider)
        try:
            result = await self._fetch_with_retry()
        except Exception as e:
            self._log.exception("Unexpected error while fetching {}", self.provider)
            result = Result.fail(FailureKind.MALFORMED_RESPONSE, str(e))

        if result.ok:
            self.state = RefreshState.NORMALIZING
            result = self._normalize(result.value)

        if not result.ok:
            self.state = RefreshState.FAILED
            self.last_failure = result.failure
            self._log.error("{} refresh failed ({}): {}", self.provider, result.failure, result.message)
            return await self._fallback(result.failure)

        document = result.value.to_dict()
        await self._cache.set(self.cache_key, document, self._ttl)
        self.state = RefreshState.CACHED
        self.last_failure = None
        self.last_success = document.get("last_updated")
        self._log.info("{} data updated", self.provider)
        return document

    async def _fetch_with_retry(self) -> Result[Any]:
        """Run ``fetch()``, retrying only transient failures."""
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._attempts),
            wait=wait_exponential(multiplier=self._backoff, max=30),
            retry=retry_if_result(lambda r: r.is_transient),
            retry_error_callback=lambda state: state.outcome.result(),
            before_sleep=lambda state: self._log.warning(
                "{} attempt {} failed, retrying", self.provider, state.attempt_number
            ),
        )
        return await retrying(self.fetch)

    def _normalize(self, raw: Any) -> Result[Document]:
        try:
            return Result.success(self.normalize(raw))
        except Exception as e:
            self._log.error("Could not normalize {} data: {}", self.provider, e)
            return Result.fail(FailureKind.MALFORMED_RESPONSE, str(e))

    async def _fallback(self, reason: FailureKind) -> dict | Unavailable:
        self.state = RefreshState.FALLBACK_LOOKUP
        cached = await self._cache.get(self.cache_key)
        if cached is not None:
            self.state = RefreshState.STALE_SERVED
            self._log.info("Returning cached {} data", self.provider)
            return cached
        self.state = RefreshState.ABSENT
        return self._unavailable(reason)

    def _unavailable(self, reason: FailureKind) -> Unavailable:
        return Unavailable(provider=self.provider, reason=reason, hint=self.hint)

    def _now(self) -> datetime:
        return self._clock()

    def _today(self):
        return self._now().astimezone(self._tz).date()
