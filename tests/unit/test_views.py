"""Tests for the stats API views."""

from datetime import date

import pytest

from app.container import container
from app.models.common import DailyCount
from app.repositories import CacheStore, MemoryBackend
from app.services import (
    DiscordCollector,
    GitHubCollector,
    LeetCodeCollector,
    SpotifyCollector,
    WakaTimeCollector,
)
from helpers.activity import daily_series
from web.api import stats
from web.api.errors import NotAvailableError, ValidationError

TODAY = date(2024, 1, 10)
COUNTS = [1, 0, 0, 0, 1, 1, 1]


def github_doc() -> dict:
    days = [DailyCount(date=date(2024, 1, 4 + i).isoformat(), count=c) for i, c in enumerate(COUNTS)]
    return {
        "user": {"username": "me"},
        "commits_last_365_days": daily_series(days, TODAY).to_dict(),
        "contributions_last_365_days": None,
    }


@pytest.fixture
async def wired(monkeypatch):
    cache = CacheStore(MemoryBackend())
    await cache.set("stats:github", github_doc(), 300)

    discord = DiscordCollector(cache, user_id=None)
    collectors = {
        "cache": cache,
        "discord": discord,
        "spotify": SpotifyCollector(cache, discord),
        "github": GitHubCollector(cache, token="token"),
        "leetcode": LeetCodeCollector(cache, username=None),
        "wakatime": WakaTimeCollector(cache, api_key=None),
    }
    for name, value in collectors.items():
        monkeypatch.setattr(container, name, value, raising=False)
    return cache


class TestProviderViews:
    async def test_cached_document(self, wired):
        resp = await stats.get_github()
        assert resp.data["user"]["username"] == "me"
        assert resp.meta.version == "1.0.0"

    async def test_not_configured(self, wired):
        with pytest.raises(NotAvailableError) as exc:
            await stats.get_leetcode()
        assert exc.value.hint == "Check if LEETCODE_USERNAME is configured correctly"

    async def test_all_stats(self, wired):
        resp = await stats.get_all_stats()
        assert resp.data.github["user"]["username"] == "me"
        assert resp.data.leetcode is None
        assert resp.data.spotify is None


class TestDailyViews:
    async def test_full_series(self, wired):
        resp = await stats.get_github_commits_daily()
        assert resp.data.window_days == 7
        assert resp.data.total == 4

    async def test_trimmed_series(self, wired):
        resp = await stats.get_github_commits_daily(days=3)
        assert [d.date for d in resp.data.days] == ["2024-01-08", "2024-01-09", "2024-01-10"]
        assert resp.data.total == 3
        assert resp.data.streak.current_streak == 3
        assert resp.data.streak.active_days_in_period == 3

    async def test_invalid_days(self, wired):
        with pytest.raises(ValidationError):
            await stats.get_github_commits_daily(days=0)

    async def test_missing_series(self, wired):
        with pytest.raises(NotAvailableError):
            await stats.get_github_contributions_daily()


class TestHealth:
    async def test_health(self, wired):
        resp = await stats.get_health()
        assert resp.data.status == "healthy"
        assert resp.data.cache_available is True
        assert set(resp.data.providers) == {"discord", "spotify", "leetcode", "wakatime", "github"}
        assert resp.data.providers["leetcode"].configured is False

    def test_info(self):
        info = stats.get_info()
        assert info.version == "1.0.0"
        assert info.endpoints["health"] == "/api/health"
