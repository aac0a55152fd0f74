"""Lanyard (Discord presence) client."""

from settings import PRESENCE_TIMEOUT
from stats_client.base import BaseClient
from stats_client.errors import MalformedUpstreamResponse

from .schemas import PresenceSchema


class LanyardClient(BaseClient):
    """Client for api.lanyard.rest."""

    base_url = "https://api.lanyard.rest/v1"
    timeout = PRESENCE_TIMEOUT

    async def presence(self, user_id: str) -> PresenceSchema:
        """GET /users/{id} - requires the user to be in the Lanyard guild."""
        self._require(user_id, "DISCORD_USER_ID")
        resp = await self._get(f"/users/{user_id}")
        if not isinstance(resp, dict) or not resp.get("success"):
            raise MalformedUpstreamResponse("Invalid response from Lanyard API")
        return PresenceSchema.model_validate(resp.get("data"))
