"""Spotify Web API client - token refresh and playback state."""

import base64

from settings import PRESENCE_TIMEOUT
from stats_client.base import BaseClient

from .schemas import CurrentlyPlayingSchema, TokenSchema

TOKEN_URL = "https://accounts.spotify.com/api/token"


class SpotifyClient(BaseClient):
    """Client for api.spotify.com and the accounts token endpoint."""

    base_url = "https://api.spotify.com/v1"
    timeout = PRESENCE_TIMEOUT

    async def refresh_access_token(self, client_id: str, client_secret: str, refresh_token: str) -> TokenSchema:
        """Exchange the long-lived refresh token for an access token."""
        self._require(client_id, "SPOTIFY_CLIENT_ID")
        self._require(client_secret, "SPOTIFY_CLIENT_SECRET")
        self._require(refresh_token, "SPOTIFY_REFRESH_TOKEN")
        credentials = base64.b64encode(f"{client_id}:{client_secret}".encode()).decode()
        data = await self._post(
            TOKEN_URL,
            data={"grant_type": "refresh_token", "refresh_token": refresh_token},
            headers={"Authorization": f"Basic {credentials}"},
        )
        return TokenSchema.model_validate(data)

    async def currently_playing(self, access_token: str) -> CurrentlyPlayingSchema | None:
        """GET /me/player/currently-playing; ``None`` when nothing is playing (204)."""
        resp = await self._request(
            "GET",
            "/me/player/currently-playing",
            headers={"Authorization": f"Bearer {access_token}"},
        )
        if resp.status_code == 204 or not resp.content:
            return None
        return CurrentlyPlayingSchema.model_validate(self._json(resp))
