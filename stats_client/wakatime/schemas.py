"""WakaTime API schemas."""

from pydantic import BaseModel, field_validator


class DurationEntry(BaseModel):
    """Named slice of coding time (language, project, editor, ...)."""

    name: str
    total_seconds: float = 0.0
    percent: float = 0.0
    digital: str | None = None
    text: str | None = None


class BestDay(BaseModel):
    date: str
    total_seconds: float = 0.0
    text: str | None = None


class UserSchema(BaseModel):
    """GET /users/current."""

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


class StatsSchema(BaseModel):
    """GET /users/current/stats/last_7_days - pre-aggregated totals."""

    total_seconds: float = 0.0
    daily_average: float = 0.0
    human_readable_total: str | None = None
    human_readable_daily_average: str | None = None
    languages: list[DurationEntry] = []
    editors: list[DurationEntry] = []
    operating_systems: list[DurationEntry] = []
    categories: list[DurationEntry] = []
    projects: list[DurationEntry] = []
    best_day: BestDay | None = None

    @field_validator("languages", "editors", "operating_systems", "categories", "projects", mode="before")
    @classmethod
    def _none_list(cls, v):
        return v or []


class GrandTotal(BaseModel):
    total_seconds: float = 0.0
    text: str | None = None
    digital: str | None = None


class SummaryRange(BaseModel):
    date: str


class DaySummarySchema(BaseModel):
    """One day of GET /users/current/summaries."""

    range: SummaryRange
    grand_total: GrandTotal = GrandTotal()
    languages: list[DurationEntry] = []
    editors: list[DurationEntry] = []
    operating_systems: list[DurationEntry] = []
    categories: list[DurationEntry] = []
    projects: list[DurationEntry] = []

    @field_validator("languages", "editors", "operating_systems", "categories", "projects", mode="before")
    @classmethod
    def _none_list(cls, v):
        return v or []


class AllTimeSchema(BaseModel):
    """GET /users/current/all_time_since_today."""

    total_seconds: float = 0.0
    text: str | None = None
    is_up_to_date: bool = False
