"""Pure time-series formulas - dense windows, streaks, distributions.

Every function takes "today"/"now" explicitly so results are reproducible.
Calendar days are taken in one reference timezone throughout.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import UTC, date, datetime, timedelta, tzinfo
from typing import Any, Protocol

from app.models.common import (
    BreakdownEntry,
    DailyCount,
    DailySeries,
    LanguageShare,
    StreakResult,
    TimeBucket,
    TimeOfDayDistribution,
)

ONE_DAY = timedelta(days=1)

TIME_BUCKETS = (
    ("night", 0, 6),
    ("morning", 6, 12),
    ("daytime", 12, 18),
    ("evening", 18, 24),
)
EXAMPLES_PER_BUCKET = 5


class NamedDuration(Protocol):
    name: str
    total_seconds: float


# ---------------------------------------------------------------- days


def local_day(ts: datetime, tz: tzinfo = UTC) -> date:
    """Calendar day of a timestamp in ``tz`` (naive timestamps are UTC)."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)
    return ts.astimezone(tz).date()


def window(days: int, today: date) -> list[date]:
    """Every calendar day in [today - days + 1, today], oldest first."""
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def dense_daily_counts(pairs: Iterable[tuple[date, int]], days: int, today: date) -> list[DailyCount]:
    """Fold (day, count) pairs into a dense window; zero days are kept."""
    counts = dict.fromkeys(window(days, today), 0)
    for day, n in pairs:
        if day in counts:
            counts[day] += n
    return [DailyCount(date=d.isoformat(), count=c) for d, c in counts.items()]


def dense_daily_window(
    timestamps: Iterable[datetime],
    days: int,
    today: date,
    tz: tzinfo = UTC,
) -> list[DailyCount]:
    """One entry per calendar day, counting timestamps that fall on it."""
    return dense_daily_counts(((local_day(ts, tz), 1) for ts in timestamps), days, today)


# ---------------------------------------------------------------- streaks


def calculate_streak(active_days: Iterable[date], today: date) -> StreakResult:
    """Current and longest runs of consecutive active days.

    The current streak may end yesterday: today can still be in progress.
    """
    active = set(active_days)
    if not active:
        return StreakResult()

    yesterday = today - ONE_DAY
    current = 0
    if today in active or yesterday in active:
        cursor = today if today in active else yesterday
        while cursor in active:
            current += 1
            cursor -= ONE_DAY

    ordered = sorted(active)
    longest = run = 1
    for prev, cur in zip(ordered, ordered[1:]):
        run = run + 1 if (cur - prev).days == 1 else 1
        longest = max(longest, run)

    return StreakResult(
        current_streak=current,
        longest_streak_in_period=longest,
        active_days_in_period=len(ordered),
    )


def streak_from_daily(days: Sequence[DailyCount], today: date) -> StreakResult:
    """Streaks over the days of a dense series with count > 0."""
    return calculate_streak((date.fromisoformat(d.date) for d in days if d.count > 0), today)


def daily_series(days: list[DailyCount], today: date) -> DailySeries:
    """Dense series plus totals and streaks."""
    return DailySeries(
        window_days=len(days),
        total=sum(d.count for d in days),
        days=days,
        streak=streak_from_daily(days, today),
    )


# ---------------------------------------------------------------- distributions


def time_of_day_distribution(
    commits: Iterable[tuple[datetime, dict[str, Any]]],
    tz: tzinfo = UTC,
) -> TimeOfDayDistribution:
    """Bucket commits by local hour into night/morning/daytime/evening.

    Only the newest examples per bucket are kept; counts use every commit.
    """
    grouped: dict[str, list[tuple[datetime, dict[str, Any]]]] = defaultdict(list)
    for ts, example in commits:
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=UTC)
        hour = ts.astimezone(tz).hour
        for name, start, end in TIME_BUCKETS:
            if start <= hour < end:
                grouped[name].append((ts, example))
                break

    total = sum(len(v) for v in grouped.values())
    buckets = {}
    for name, start, end in TIME_BUCKETS:
        items = sorted(grouped[name], key=lambda item: item[0], reverse=True)
        buckets[name] = TimeBucket(
            hours=f"{start:02d}-{end:02d}",
            count=len(items),
            percent=round(len(items) / total * 100, 1) if total else 0.0,
            examples=[example for _, example in items[:EXAMPLES_PER_BUCKET]],
        )

    return TimeOfDayDistribution(total_commits=total, timezone=str(tz), buckets=buckets)


def format_duration(seconds: float) -> tuple[str, str]:
    """WakaTime-style renderings: ("H:MM", "X hrs Y mins")."""
    minutes = int(seconds // 60)
    hours, mins = divmod(minutes, 60)
    digital = f"{hours}:{mins:02d}"
    if hours:
        text = f"{hours} hr{'s' if hours != 1 else ''} {mins} min{'s' if mins != 1 else ''}"
    else:
        text = f"{mins} min{'s' if mins != 1 else ''}"
    return digital, text


def merge_breakdowns(
    aggregate: Sequence[NamedDuration],
    daily: Sequence[Sequence[NamedDuration]] | None = None,
) -> list[BreakdownEntry]:
    """Combine per-day breakdowns by name, or pass the aggregate through.

    Durations are summed and percentages recomputed from the merged totals;
    per-day percentages are never averaged.
    """
    if not daily:
        return [
            BreakdownEntry(
                name=e.name,
                total_seconds=e.total_seconds,
                percent=getattr(e, "percent", 0.0),
                digital=getattr(e, "digital", None),
                text=getattr(e, "text", None),
            )
            for e in aggregate
        ]

    totals: dict[str, float] = defaultdict(float)
    for day in daily:
        for entry in day:
            totals[entry.name] += entry.total_seconds

    grand_total = sum(totals.values())
    merged = []
    for name, seconds in sorted(totals.items(), key=lambda kv: (-kv[1], kv[0])):
        digital, text = format_duration(seconds)
        merged.append(
            BreakdownEntry(
                name=name,
                total_seconds=seconds,
                percent=round(seconds / grand_total * 100, 2) if grand_total else 0.0,
                digital=digital,
                text=text,
            )
        )
    return merged


def language_distribution(languages: Iterable[str | None]) -> list[LanguageShare]:
    """Share of repositories per primary language."""
    counts: dict[str, int] = defaultdict(int)
    for lang in languages:
        if lang:
            counts[lang] += 1

    total = sum(counts.values()) or 1
    return [
        LanguageShare(name=name, count=count, percent=round(count / total * 100, 1))
        for name, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    ]


def hours_ago(ts: datetime | None, now: datetime) -> str | None:
    """Human label like ``"5 hours ago"``."""
    if ts is None:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)
    return f"{int((now - ts).total_seconds() // 3600)} hours ago"
