"""LeetCode normalizer."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from app.models.common import DailySeries, utc_now_iso
from app.models.leetcode import ContestStats, DifficultySplit, LeetCodeProfile, LeetCodeStats
from helpers import activity
from stats_client.leetcode.schemas import (
    CalendarSchema,
    ContestSchema,
    DifficultyCount,
    ProfileSchema,
    UserProfileSchema,
)

HISTORY_DAYS = 365
CONTEST_HISTORY = 10
DIFFICULTIES = ("all", "easy", "medium", "hard")


@dataclass
class LeetCodeRaw:
    profile: UserProfileSchema
    contest: ContestSchema | None = None
    calendar: CalendarSchema | None = None
    unavailable: list[str] = field(default_factory=list)


def _pct(part: float, whole: float) -> float:
    return round(part / whole * 100, 2) if whole else 0


def by_difficulty(entries: Sequence[DifficultyCount], attr: str = "count") -> DifficultySplit:
    """Pick one number per difficulty; missing difficulties are 0."""
    values = {e.difficulty.lower(): getattr(e, attr) for e in entries}
    return DifficultySplit(**{d: values.get(d, 0) for d in DIFFICULTIES})


def normalize_profile(profile: ProfileSchema | None) -> LeetCodeProfile:
    if profile is None:
        return LeetCodeProfile()
    return LeetCodeProfile(
        real_name=profile.real_name,
        avatar=profile.user_avatar,
        location=profile.location,
        country=profile.country_name,
        company=profile.company,
        school=profile.school,
        websites=profile.websites or [],
        skill_tags=profile.skill_tags or [],
        about=profile.about_me,
        star_rating=profile.star_rating,
        ranking=profile.ranking,
    )


def contest_stats(contest: ContestSchema | None) -> ContestStats | None:
    """Rating summary plus the most recent attended contests."""
    if contest is None or contest.ranking is None:
        return None
    ranking = contest.ranking
    attended = [h for h in contest.history if h.get("attended")]
    return ContestStats(
        attended=ranking.attended_contests_count,
        rating=round(ranking.rating),
        global_ranking=ranking.global_ranking,
        top_percentage=round(ranking.top_percentage, 2) if ranking.top_percentage is not None else None,
        history=attended[-CONTEST_HISTORY:],
    )


def submission_history(calendar: CalendarSchema, today: date, days: int = HISTORY_DAYS) -> DailySeries:
    """Dense daily submissions; calendar keys are UTC-midnight day labels."""
    pairs = ((datetime.fromtimestamp(ts, UTC).date(), n) for ts, n in calendar.submission_calendar.items())
    return activity.daily_series(activity.dense_daily_counts(pairs, days, today), today)


def normalize_leetcode(raw: LeetCodeRaw, today: date) -> LeetCodeStats:
    user = raw.profile.matched_user
    stats = user.submit_stats.ac_submission_num if user.submit_stats else []

    solved = by_difficulty(stats)
    submissions = by_difficulty(stats, "submissions")
    totals = by_difficulty(raw.profile.all_questions_count)
    progress = DifficultySplit(**{d: _pct(getattr(solved, d), getattr(totals, d)) for d in DIFFICULTIES})

    return LeetCodeStats(
        username=user.username,
        profile=normalize_profile(user.profile),
        problems_solved=solved,
        total_submissions=submissions,
        total_problems=totals,
        progress_percentage=progress,
        acceptance_rate=_pct(solved.all, submissions.all),
        contest_stats=contest_stats(raw.contest),
        submissions_last_365_days=submission_history(raw.calendar, today) if raw.calendar else None,
        unavailable=raw.unavailable,
        last_updated=utc_now_iso(),
    )
