"""LeetCode collector."""

import asyncio
from datetime import UTC

from app.models.leetcode import LeetCodeStats
from app.services.base import BaseCollector
from app.services.leetcode.normalizer import LeetCodeRaw, normalize_leetcode
from stats_client.leetcode import LeetCodeClient
from stats_client.result import Result, as_result


class LeetCodeCollector(BaseCollector):
    """Profile query is required; contest stats and the calendar are not
    (contest stats are missing for users who never entered one)."""

    provider = "leetcode"
    cache_key = "stats:leetcode"
    hint = "Check if LEETCODE_USERNAME is configured correctly"

    def __init__(self, cache, username: str | None, **kwargs):
        super().__init__(cache, **kwargs)
        self._username = username

    @property
    def configured(self) -> bool:
        return bool(self._username)

    async def fetch(self) -> Result[LeetCodeRaw]:
        async with LeetCodeClient(transport=self._transport) as client:
            profile, contest, calendar = await asyncio.gather(
                as_result(client.profile(self._username)),
                as_result(client.contest(self._username)),
                as_result(client.calendar(self._username)),
            )

        if not profile.ok:
            return profile

        optional = {"contest_stats": contest, "submissions_last_365_days": calendar}
        return Result.success(
            LeetCodeRaw(
                profile=profile.value,
                contest=contest.value_or(None),
                calendar=calendar.value_or(None),
                unavailable=[name for name, r in optional.items() if not r.ok],
            )
        )

    def normalize(self, raw: LeetCodeRaw) -> LeetCodeStats:
        # calendar days are UTC days, so the window ends on the UTC date
        return normalize_leetcode(raw, self._now().astimezone(UTC).date())
