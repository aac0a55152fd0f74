"""Services package - one collector per provider."""

from app.services.base import BaseCollector, RefreshState
from app.services.github import GitHubCollector
from app.services.leetcode import LeetCodeCollector
from app.services.presence import DiscordCollector, SpotifyCollector
from app.services.wakatime import WakaTimeCollector

__all__ = [
    "BaseCollector",
    "RefreshState",
    "DiscordCollector",
    "SpotifyCollector",
    "GitHubCollector",
    "LeetCodeCollector",
    "WakaTimeCollector",
]
