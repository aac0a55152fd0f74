"""LeetCode stats document."""

from typing import Any

from app.models.common import DailySeries, Document


class DifficultySplit(Document):
    all: int | float = 0
    easy: int | float = 0
    medium: int | float = 0
    hard: int | float = 0


class LeetCodeProfile(Document):
    real_name: str | None = None
    avatar: str | None = None
    location: str | None = None
    country: str | None = None
    company: str | None = None
    school: str | None = None
    websites: list[str] = []
    skill_tags: list[str] = []
    about: str | None = None
    star_rating: float | None = None
    ranking: int | None = None


class ContestStats(Document):
    attended: int = 0
    rating: int = 0
    global_ranking: int | None = None
    top_percentage: float | None = None
    history: list[dict[str, Any]] = []


class LeetCodeStats(Document):
    username: str
    profile: LeetCodeProfile
    problems_solved: DifficultySplit
    total_submissions: DifficultySplit
    total_problems: DifficultySplit
    progress_percentage: DifficultySplit
    acceptance_rate: float = 0.0
    contest_stats: ContestStats | None = None
    submissions_last_365_days: DailySeries | None = None
    unavailable: list[str] = []
    last_updated: str
