"""GitHub collector."""

import asyncio
from datetime import timedelta

from app.models.github import GitHubStats
from app.services.base import BaseCollector
from app.services.github.normalizer import HISTORY_DAYS, GitHubRaw, normalize_github
from stats_client.github import GitHubClient
from stats_client.result import Result, as_result


class GitHubCollector(BaseCollector):
    """Profile, repos and events are required; commit search and the
    contribution calendar are optional extras."""

    provider = "github"
    cache_key = "stats:github"
    hint = "Check if GITHUB_TOKEN is configured correctly"

    def __init__(self, cache, token: str | None, **kwargs):
        super().__init__(cache, **kwargs)
        self._token = token

    @property
    def configured(self) -> bool:
        return bool(self._token)

    async def fetch(self) -> Result[GitHubRaw]:
        today = self._today()
        since = today - timedelta(days=HISTORY_DAYS - 1)

        async with GitHubClient(self._token, transport=self._transport) as client:
            user = await as_result(client.user())
            if not user.ok:
                return user

            login = user.value.login
            repos, events, commits, calendar = await asyncio.gather(
                as_result(client.repos()),
                as_result(client.events(login)),
                as_result(client.commits(login, since)),
                as_result(client.contribution_calendar(login, since, today)),
            )

        for required in (repos, events):
            if not required.ok:
                return required

        optional = {"commits_last_365_days": commits, "contributions_last_365_days": calendar}
        unavailable = [name for name, r in optional.items() if not r.ok]
        return Result.success(
            GitHubRaw(
                user=user.value,
                repos=repos.value,
                events=events.value,
                commits=commits.value_or(None),
                calendar=calendar.value_or(None),
                unavailable=unavailable,
            )
        )

    def normalize(self, raw: GitHubRaw) -> GitHubStats:
        return normalize_github(raw, self._now(), self._tz)
