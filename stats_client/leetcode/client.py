"""LeetCode GraphQL client."""

from stats_client.base import BaseClient
from stats_client.errors import FailureKind, MalformedUpstreamResponse, UpstreamRejected

from .schemas import CalendarSchema, ContestSchema, UserProfileSchema

PROFILE_QUERY = """
query getUserProfile($username: String!) {
  matchedUser(username: $username) {
    username
    profile {
      realName aboutMe userAvatar location skillTags websites
      countryName company school starRating ranking
    }
    submitStats { acSubmissionNum { difficulty count submissions } }
  }
  allQuestionsCount { difficulty count }
}
"""

CONTEST_QUERY = """
query getUserContestInfo($username: String!) {
  userContestRanking(username: $username) {
    attendedContestsCount rating globalRanking topPercentage
  }
  userContestRankingHistory(username: $username) {
    attended rating ranking trendDirection problemsSolved totalProblems
    finishTimeInSeconds
    contest { title startTime }
  }
}
"""

CALENDAR_QUERY = """
query userProfileCalendar($username: String!) {
  matchedUser(username: $username) {
    userCalendar { streak totalActiveDays submissionCalendar }
  }
}
"""


class LeetCodeClient(BaseClient):
    """Client for the public LeetCode GraphQL endpoint."""

    base_url = "https://leetcode.com"

    def _headers(self) -> dict[str, str]:
        return {**super()._headers(), "Content-Type": "application/json"}

    async def _query(self, query: str, username: str) -> dict:
        """POST /graphql and unwrap ``data``."""
        self._require(username, "LEETCODE_USERNAME")
        resp = await self._post("/graphql", json={"query": query, "variables": {"username": username}})
        data = resp.get("data") if isinstance(resp, dict) else None
        if not data:
            errors = resp.get("errors") if isinstance(resp, dict) else None
            raise MalformedUpstreamResponse(f"GraphQL returned no data: {errors}")
        return data

    async def profile(self, username: str) -> UserProfileSchema:
        """Profile, solved counts and question totals."""
        data = await self._query(PROFILE_QUERY, username)
        if not data.get("matchedUser"):
            raise UpstreamRejected(f"LeetCode user {username} not found", FailureKind.NOT_FOUND)
        return UserProfileSchema.model_validate(data)

    async def contest(self, username: str) -> ContestSchema:
        """Contest rating and attended contest history."""
        return ContestSchema.model_validate(await self._query(CONTEST_QUERY, username))

    async def calendar(self, username: str) -> CalendarSchema:
        """Submission calendar for roughly the last year."""
        data = await self._query(CALENDAR_QUERY, username)
        user = data.get("matchedUser") or {}
        if not user.get("userCalendar"):
            raise MalformedUpstreamResponse(f"no submission calendar for {username}")
        return CalendarSchema.model_validate(user["userCalendar"])
