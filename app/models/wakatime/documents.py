"""WakaTime stats document."""

from typing import Literal

from app.models.common import BreakdownEntry, Document, StreakResult


class WakaTimeUser(Document):
    id: str
    username: str | None = None
    display_name: str | None = None
    email: str | None = None
    photo: str | None = None
    website: str | None = None
    location: str | None = None
    created_at: str | None = None
    last_heartbeat_at: str | None = None
    last_plugin_name: str | None = None
    last_project: str | None = None


class BestDay(Document):
    date: str
    total_seconds: float = 0.0
    text: str | None = None


class WeeklyStats(Document):
    total_seconds: float = 0.0
    daily_average: float = 0.0
    human_readable_total: str | None = None
    human_readable_daily_average: str | None = None
    breakdown_source: Literal["daily_summaries", "aggregate"] = "aggregate"
    languages: list[BreakdownEntry] = []
    editors: list[BreakdownEntry] = []
    operating_systems: list[BreakdownEntry] = []
    categories: list[BreakdownEntry] = []
    projects: list[BreakdownEntry] = []
    best_day: BestDay | None = None


class AllTime(Document):
    total_seconds: float = 0.0
    text: str | None = None
    is_up_to_date: bool = False


class DaySummary(Document):
    date: str
    total_seconds: float = 0.0
    text: str | None = None
    digital: str | None = None


class WakaTimeStats(Document):
    user: WakaTimeUser
    stats_last_7_days: WeeklyStats
    all_time: AllTime | None = None
    daily_summaries: list[DaySummary] = []
    coding_streak: StreakResult = StreakResult()
    unavailable: list[str] = []
    last_updated: str
