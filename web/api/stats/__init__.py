"""Stats API."""

from web.api.stats.views import (
    get_all_stats,
    get_discord,
    get_github,
    get_github_commits_daily,
    get_github_contributions_daily,
    get_health,
    get_info,
    get_leetcode,
    get_leetcode_submissions_daily,
    get_spotify,
    get_wakatime,
)

__all__ = [
    "get_all_stats",
    "get_discord",
    "get_spotify",
    "get_leetcode",
    "get_leetcode_submissions_daily",
    "get_wakatime",
    "get_github",
    "get_github_commits_daily",
    "get_github_contributions_daily",
    "get_health",
    "get_info",
]
