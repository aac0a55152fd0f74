"""WakaTime domain models."""

from app.models.wakatime.documents import AllTime, BestDay, DaySummary, WakaTimeStats, WakaTimeUser, WeeklyStats

__all__ = [
    "WakaTimeStats",
    "WakaTimeUser",
    "WeeklyStats",
    "BestDay",
    "AllTime",
    "DaySummary",
]
