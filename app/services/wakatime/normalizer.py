"""WakaTime normalizer."""

from dataclasses import dataclass, field
from datetime import date

from app.models.common import utc_now_iso
from app.models.wakatime import AllTime, BestDay, DaySummary, WakaTimeStats, WakaTimeUser, WeeklyStats
from helpers import activity
from stats_client.wakatime.schemas import AllTimeSchema, DaySummarySchema, StatsSchema, UserSchema

SUMMARY_DAYS = 7
TOP_ENTRIES = 10
BREAKDOWNS = ("languages", "editors", "operating_systems", "categories", "projects")
LIMITED = ("languages", "projects")


@dataclass
class WakaTimeRaw:
    user: UserSchema
    stats: StatsSchema
    summaries: list[DaySummarySchema] | None = None
    all_time: AllTimeSchema | None = None
    unavailable: list[str] = field(default_factory=list)


def weekly_stats(stats: StatsSchema, summaries: list[DaySummarySchema] | None) -> WeeklyStats:
    """Weekly totals; breakdowns come from the per-day summaries when present."""
    breakdowns = {}
    for name in BREAKDOWNS:
        daily = [getattr(day, name) for day in summaries] if summaries else None
        merged = activity.merge_breakdowns(getattr(stats, name), daily)
        breakdowns[name] = merged[:TOP_ENTRIES] if name in LIMITED else merged

    best_day = None
    if stats.best_day:
        best_day = BestDay(
            date=stats.best_day.date,
            total_seconds=stats.best_day.total_seconds,
            text=stats.best_day.text,
        )

    return WeeklyStats(
        total_seconds=stats.total_seconds,
        daily_average=stats.daily_average,
        human_readable_total=stats.human_readable_total,
        human_readable_daily_average=stats.human_readable_daily_average,
        breakdown_source="daily_summaries" if summaries else "aggregate",
        best_day=best_day,
        **breakdowns,
    )


def normalize_wakatime(raw: WakaTimeRaw, today: date) -> WakaTimeStats:
    user = raw.user
    summaries = raw.summaries or []
    active = [date.fromisoformat(d.range.date) for d in summaries if d.grand_total.total_seconds > 0]

    return WakaTimeStats(
        user=WakaTimeUser(**user.model_dump()),
        stats_last_7_days=weekly_stats(raw.stats, raw.summaries),
        all_time=AllTime(**raw.all_time.model_dump()) if raw.all_time else None,
        daily_summaries=[
            DaySummary(
                date=d.range.date,
                total_seconds=d.grand_total.total_seconds,
                text=d.grand_total.text,
                digital=d.grand_total.digital,
            )
            for d in summaries
        ],
        coding_streak=activity.calculate_streak(active, today),
        unavailable=raw.unavailable,
        last_updated=utc_now_iso(),
    )
