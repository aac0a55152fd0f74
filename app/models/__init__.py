"""Models package - normalized documents and shared entities for all providers."""

from app.models.common import (
    BaseEntity,
    CachedEntry,
    DailyCount,
    DailySeries,
    Document,
    StreakResult,
    Unavailable,
)
from app.models.github import GitHubStats
from app.models.leetcode import LeetCodeStats
from app.models.presence import DiscordStats, SpotifyStats
from app.models.wakatime import WakaTimeStats

__all__ = [
    # Common
    "BaseEntity",
    "Document",
    "CachedEntry",
    "Unavailable",
    "DailyCount",
    "DailySeries",
    "StreakResult",
    # Documents
    "GitHubStats",
    "LeetCodeStats",
    "WakaTimeStats",
    "DiscordStats",
    "SpotifyStats",
]
