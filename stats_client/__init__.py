"""Upstream API clients package."""

from stats_client.base import BaseClient, classify_status
from stats_client.errors import (
    CacheBackendUnavailable,
    FailureKind,
    MalformedUpstreamResponse,
    NotConfigured,
    UpstreamError,
    UpstreamRejected,
    UpstreamUnavailable,
)
from stats_client.github import GitHubClient
from stats_client.lanyard import LanyardClient
from stats_client.leetcode import LeetCodeClient
from stats_client.result import Result, as_result
from stats_client.spotify import SpotifyClient
from stats_client.wakatime import WakaTimeClient

__all__ = [
    # Base
    "BaseClient",
    "classify_status",
    "Result",
    "as_result",
    # Errors
    "FailureKind",
    "UpstreamError",
    "UpstreamUnavailable",
    "UpstreamRejected",
    "MalformedUpstreamResponse",
    "NotConfigured",
    "CacheBackendUnavailable",
    # Clients
    "GitHubClient",
    "LeetCodeClient",
    "WakaTimeClient",
    "LanyardClient",
    "SpotifyClient",
]
