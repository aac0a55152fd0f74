"""GitHub API client - REST v3 plus the GraphQL contribution calendar."""

from datetime import date

from stats_client.base import BaseClient
from stats_client.errors import MalformedUpstreamResponse

from .schemas import (
    CommitSearchItem,
    ContributionCalendarSchema,
    EventSchema,
    RepoSchema,
    UserSchema,
)

REPO_PAGES = 10
EVENT_PAGES = 3  # the events API stops at 300 events / 90 days anyway
COMMIT_PAGES = 10  # search results are capped at 1000

CALENDAR_QUERY = """
query($login: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $login) {
    contributionsCollection(from: $from, to: $to) {
      contributionCalendar {
        totalContributions
        weeks { contributionDays { date contributionCount } }
      }
    }
  }
}
"""


class GitHubClient(BaseClient):
    """Client for the endpoints behind the GitHub stats document."""

    base_url = "https://api.github.com"

    def __init__(self, token: str, **kwargs):
        self._token = token
        super().__init__(**kwargs)

    def _headers(self) -> dict[str, str]:
        return {
            **super()._headers(),
            "Accept": "application/vnd.github.v3+json",
            "Authorization": f"Bearer {self._token}",
        }

    async def user(self) -> UserSchema:
        """GET /user - authenticated profile."""
        self._require(self._token, "GITHUB_TOKEN")
        return UserSchema.model_validate(await self._get("/user"))

    async def repos(self) -> list[RepoSchema]:
        """GET /user/repos - owned, collaborator and org repos."""
        data = await self._get_pages("/user/repos", {"type": "all", "sort": "updated"}, REPO_PAGES)
        return [RepoSchema.model_validate(r) for r in data]

    async def events(self, login: str) -> list[EventSchema]:
        """GET /users/{login}/events - newest first."""
        data = await self._get_pages(f"/users/{login}/events", max_pages=EVENT_PAGES)
        return [EventSchema.model_validate(e) for e in data]

    async def commits(self, login: str, since: date) -> list[CommitSearchItem]:
        """GET /search/commits - commits authored by login since a date."""
        params = {
            "q": f"author:{login} committer-date:>={since.isoformat()}",
            "sort": "committer-date",
            "order": "desc",
        }
        data = await self._get_pages("/search/commits", params, COMMIT_PAGES, items_key="items")
        return [CommitSearchItem.model_validate(c) for c in data]

    async def contribution_calendar(self, login: str, start: date, end: date) -> ContributionCalendarSchema:
        """POST /graphql - contribution calendar between two days."""
        body = {
            "query": CALENDAR_QUERY,
            "variables": {
                "login": login,
                "from": f"{start.isoformat()}T00:00:00Z",
                "to": f"{end.isoformat()}T23:59:59Z",
            },
        }
        data = await self._post("/graphql", json=body)
        try:
            calendar = data["data"]["user"]["contributionsCollection"]["contributionCalendar"]
        except (KeyError, TypeError) as e:
            errors = data.get("errors") if isinstance(data, dict) else None
            raise MalformedUpstreamResponse(f"contribution calendar missing: {errors or e}") from e
        return ContributionCalendarSchema.model_validate(calendar)
