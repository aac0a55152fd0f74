"""WakaTime collector."""

import asyncio
from datetime import timedelta

from app.models.wakatime import WakaTimeStats
from app.services.base import BaseCollector
from app.services.wakatime.normalizer import SUMMARY_DAYS, WakaTimeRaw, normalize_wakatime
from stats_client.result import Result, as_result
from stats_client.wakatime import WakaTimeClient


class WakaTimeCollector(BaseCollector):
    """User and weekly stats are required; summaries and all-time are optional."""

    provider = "wakatime"
    cache_key = "stats:wakatime"
    hint = "Check if WAKATIME_API_KEY is configured correctly"

    def __init__(self, cache, api_key: str | None, **kwargs):
        super().__init__(cache, **kwargs)
        self._api_key = api_key

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    async def fetch(self) -> Result[WakaTimeRaw]:
        today = self._today()
        start = today - timedelta(days=SUMMARY_DAYS - 1)

        async with WakaTimeClient(self._api_key, transport=self._transport) as client:
            user, stats, summaries, all_time = await asyncio.gather(
                as_result(client.user()),
                as_result(client.stats_last_7_days()),
                as_result(client.summaries(start, today)),
                as_result(client.all_time()),
            )

        for required in (user, stats):
            if not required.ok:
                return required

        optional = {"daily_summaries": summaries, "all_time": all_time}
        return Result.success(
            WakaTimeRaw(
                user=user.value,
                stats=stats.value,
                summaries=summaries.value_or(None),
                all_time=all_time.value_or(None),
                unavailable=[name for name, r in optional.items() if not r.ok],
            )
        )

    def normalize(self, raw: WakaTimeRaw) -> WakaTimeStats:
        return normalize_wakatime(raw, self._today())
