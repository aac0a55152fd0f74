"""Shared time-series entities - daily counts, streaks, distributions."""

from typing import Any

from app.models.common.base import Document


class DailyCount(Document):
    """One calendar day of a dense series."""

    date: str
    count: int = 0


class StreakResult(Document):
    """Activity streaks over a window."""

    current_streak: int = 0
    longest_streak_in_period: int = 0
    active_days_in_period: int = 0


class DailySeries(Document):
    """Dense trailing window with its streaks."""

    window_days: int
    total: int
    days: list[DailyCount]
    streak: StreakResult


class TimeBucket(Document):
    """Commits in one local-hour range."""

    hours: str
    count: int = 0
    percent: float = 0.0
    examples: list[dict[str, Any]] = []


class TimeOfDayDistribution(Document):
    total_commits: int = 0
    timezone: str = "UTC"
    buckets: dict[str, TimeBucket] = {}


class BreakdownEntry(Document):
    """Named duration share (language, project, editor, ...)."""

    name: str
    total_seconds: float = 0.0
    percent: float = 0.0
    digital: str | None = None
    text: str | None = None


class LanguageShare(Document):
    name: str
    count: int
    percent: float
