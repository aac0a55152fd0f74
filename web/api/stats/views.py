"""Stats API views - thin layer over collectors."""

import asyncio
from datetime import UTC, date, datetime

from app.container import container
from app.models.common import DailyCount, Unavailable, utc_now_iso
from app.services.base import BaseCollector, RefreshState
from helpers.activity import daily_series
from settings import VERSION
from web.api.errors import NotAvailableError, validate_days

from .schemas import (
    AllStatsData,
    AllStatsResponse,
    DailySeriesData,
    DailySeriesResponse,
    HealthData,
    HealthResponse,
    InfoResponse,
    Meta,
    ProviderStatus,
    StatsResponse,
)

STARTED_AT = datetime.now(UTC)

ENDPOINTS = {
    "all_stats": "/api/stats",
    "discord": "/api/stats/discord",
    "spotify": "/api/stats/spotify",
    "leetcode": "/api/stats/leetcode",
    "leetcode_submissions_daily": "/api/stats/leetcode/submissions/daily",
    "wakatime": "/api/stats/wakatime",
    "github": "/api/stats/github",
    "github_commits_daily": "/api/stats/github/commits/daily",
    "github_contributions_daily": "/api/stats/github/contributions/daily",
    "health": "/api/health",
}


def _meta() -> Meta:
    return Meta(generated_at=utc_now_iso(), version=VERSION)


async def _document(collector: BaseCollector) -> dict:
    """Provider document, or ``NotAvailableError`` with the provider hint."""
    data = await collector.get()
    if isinstance(data, Unavailable):
        raise NotAvailableError(f"{collector.provider} data not available ({data.reason})", data.hint)
    return data


async def _series(collector: BaseCollector, field: str, days: int | None) -> DailySeriesResponse:
    doc = await _document(collector)
    series = doc.get(field)
    if not series:
        raise NotAvailableError(f"{collector.provider} {field} not available", collector.hint)

    if days is not None:
        validate_days(days)
        entries = [DailyCount(**d) for d in series["days"]][-days:]
        # Streaks are recomputed against the last day of the stored window
        series = daily_series(entries, date.fromisoformat(entries[-1].date)).to_dict() if entries else series

    return DailySeriesResponse(meta=_meta(), data=DailySeriesData(**series))


async def get_all_stats() -> AllStatsResponse:
    """Get every provider's document; unavailable providers are ``None``."""
    collectors = container.collectors
    results = await asyncio.gather(*(c.get() for c in collectors.values()))
    data = {name: (None if isinstance(r, Unavailable) else r) for name, r in zip(collectors, results)}
    return AllStatsResponse(meta=_meta(), data=AllStatsData(**data))


async def get_discord() -> StatsResponse:
    """Get Discord presence."""
    return StatsResponse(meta=_meta(), data=await _document(container.discord))


async def get_spotify() -> StatsResponse:
    """Get the currently playing track."""
    return StatsResponse(meta=_meta(), data=await _document(container.spotify))


async def get_leetcode() -> StatsResponse:
    """Get LeetCode stats."""
    return StatsResponse(meta=_meta(), data=await _document(container.leetcode))


async def get_leetcode_submissions_daily(days: int | None = None) -> DailySeriesResponse:
    """Get daily LeetCode submissions, optionally only the last ``days`` days."""
    return await _series(container.leetcode, "submissions_last_365_days", days)


async def get_wakatime() -> StatsResponse:
    """Get WakaTime coding stats."""
    return StatsResponse(meta=_meta(), data=await _document(container.wakatime))


async def get_github() -> StatsResponse:
    """Get GitHub stats."""
    return StatsResponse(meta=_meta(), data=await _document(container.github))


async def get_github_commits_daily(days: int | None = None) -> DailySeriesResponse:
    """Get daily GitHub commits."""
    return await _series(container.github, "commits_last_365_days", days)


async def get_github_contributions_daily(days: int | None = None) -> DailySeriesResponse:
    """Get daily GitHub contributions from the contribution calendar."""
    return await _series(container.github, "contributions_last_365_days", days)


async def get_health() -> HealthResponse:
    """Cache reachability and last refresh state per provider."""
    cache_available = await container.cache.is_available()
    providers = {name: ProviderStatus(**c.status()) for name, c in container.collectors.items()}

    failing = any(p.configured and p.state in (RefreshState.FAILED, RefreshState.ABSENT) for p in providers.values())
    degraded = failing or (container.cache.configured and not cache_available)

    return HealthResponse(
        meta=_meta(),
        data=HealthData(
            status="degraded" if degraded else "healthy",
            cache_available=cache_available,
            providers=providers,
            uptime_seconds=int((datetime.now(UTC) - STARTED_AT).total_seconds()),
        ),
    )


def get_info() -> InfoResponse:
    """Service name, version and endpoint map."""
    return InfoResponse(name="Personal Stats API", version=VERSION, endpoints=ENDPOINTS)
