"""WakaTime API client."""

from datetime import date

from settings import PRESENCE_TIMEOUT
from stats_client.base import BaseClient
from stats_client.errors import MalformedUpstreamResponse

from .schemas import AllTimeSchema, DaySummarySchema, StatsSchema, UserSchema


class WakaTimeClient(BaseClient):
    """Client for the WakaTime v1 API (api key as bearer token)."""

    base_url = "https://wakatime.com/api/v1"
    timeout = PRESENCE_TIMEOUT

    def __init__(self, api_key: str, **kwargs):
        self._api_key = api_key
        super().__init__(**kwargs)

    def _headers(self) -> dict[str, str]:
        return {**super()._headers(), "Authorization": f"Bearer {self._api_key}"}

    async def _data(self, path: str, params: dict | None = None):
        self._require(self._api_key, "WAKATIME_API_KEY")
        resp = await self._get(path, params)
        if not isinstance(resp, dict) or "data" not in resp:
            raise MalformedUpstreamResponse(f"{path}: missing data envelope")
        return resp["data"]

    async def user(self) -> UserSchema:
        """GET /users/current."""
        return UserSchema.model_validate(await self._data("/users/current"))

    async def stats_last_7_days(self) -> StatsSchema:
        """GET /users/current/stats/last_7_days."""
        return StatsSchema.model_validate(await self._data("/users/current/stats/last_7_days"))

    async def summaries(self, start: date, end: date) -> list[DaySummarySchema]:
        """GET /users/current/summaries - one entry per day in [start, end]."""
        data = await self._data(
            "/users/current/summaries",
            {"start": start.isoformat(), "end": end.isoformat()},
        )
        return [DaySummarySchema.model_validate(d) for d in data]

    async def all_time(self) -> AllTimeSchema:
        """GET /users/current/all_time_since_today."""
        return AllTimeSchema.model_validate(await self._data("/users/current/all_time_since_today"))
