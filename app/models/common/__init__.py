"""Common models - base classes, time-series entities and cache records."""

from app.models.common.activity import (
    BreakdownEntry,
    DailyCount,
    DailySeries,
    LanguageShare,
    StreakResult,
    TimeBucket,
    TimeOfDayDistribution,
)
from app.models.common.base import BaseEntity, Document, utc_now_iso
from app.models.common.cache import CACHE_PREFIX, CachedEntry, Unavailable

__all__ = [
    "BaseEntity",
    "Document",
    "utc_now_iso",
    "DailyCount",
    "DailySeries",
    "StreakResult",
    "TimeBucket",
    "TimeOfDayDistribution",
    "BreakdownEntry",
    "LanguageShare",
    "CACHE_PREFIX",
    "CachedEntry",
    "Unavailable",
]
