"""Stats API response schemas."""

from typing import Any

from pydantic import BaseModel


class Meta(BaseModel):
    """Response metadata."""

    generated_at: str
    version: str | None = None


class StatsResponse(BaseModel):
    """Single provider document."""

    meta: Meta
    data: dict[str, Any]


class AllStatsData(BaseModel):
    """Every provider; ``None`` where a provider has nothing to show."""

    discord: dict[str, Any] | None = None
    spotify: dict[str, Any] | None = None
    leetcode: dict[str, Any] | None = None
    wakatime: dict[str, Any] | None = None
    github: dict[str, Any] | None = None


class AllStatsResponse(BaseModel):
    """Aggregated stats response."""

    meta: Meta
    data: AllStatsData


class DailyItem(BaseModel):
    """One day of a daily series."""

    date: str
    count: int


class StreakItem(BaseModel):
    current_streak: int
    longest_streak_in_period: int
    active_days_in_period: int


class DailySeriesData(BaseModel):
    """Daily series, trimmed to the requested window."""

    window_days: int
    total: int
    days: list[DailyItem]
    streak: StreakItem


class DailySeriesResponse(BaseModel):
    meta: Meta
    data: DailySeriesData


class ProviderStatus(BaseModel):
    """Last refresh state of one provider."""

    configured: bool
    state: str
    last_failure: str | None
    last_success: str | None


class HealthData(BaseModel):
    status: str
    cache_available: bool
    providers: dict[str, ProviderStatus]
    uptime_seconds: int


class HealthResponse(BaseModel):
    """Health check response."""

    meta: Meta
    data: HealthData


class InfoResponse(BaseModel):
    """Service info with endpoint map."""

    name: str
    version: str
    endpoints: dict[str, str]
