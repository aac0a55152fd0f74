"""Discord presence and Spotify now-playing collectors."""

from app.models.common import Unavailable
from app.models.presence import DiscordStats, SpotifyStats
from app.services.base import BaseCollector
from app.services.presence.normalizer import MusicRaw, normalize_music, normalize_presence
from settings import SPOTIFY_TOKEN_TTL
from stats_client.errors import FailureKind
from stats_client.lanyard import LanyardClient
from stats_client.lanyard.schemas import PresenceSchema
from stats_client.result import Result, as_result
from stats_client.spotify import SpotifyClient
from stats_client.spotify.schemas import CurrentlyPlayingSchema


class DiscordCollector(BaseCollector):
    """Presence from Lanyard."""

    provider = "discord"
    cache_key = "stats:discord"
    hint = "Check if DISCORD_USER_ID is configured and you have joined the Lanyard Discord server"

    def __init__(self, cache, user_id: str | None, **kwargs):
        super().__init__(cache, **kwargs)
        self._user_id = user_id

    @property
    def configured(self) -> bool:
        return bool(self._user_id)

    async def fetch(self) -> Result[PresenceSchema]:
        async with LanyardClient(transport=self._transport) as client:
            return await as_result(client.presence(self._user_id))

    def normalize(self, raw: PresenceSchema) -> DiscordStats:
        return normalize_presence(raw)


class SpotifyCollector(BaseCollector):
    """Now playing, projected from the presence document.

    With Spotify API credentials the playing track is enriched from the
    currently-playing endpoint; that call is optional.
    """

    provider = "spotify"
    cache_key = "stats:spotify"
    token_key = "stats:spotify:token"
    hint = "Make sure you are listening to Spotify with Discord integration enabled"

    def __init__(
        self,
        cache,
        presence: DiscordCollector,
        client_id: str | None = None,
        client_secret: str | None = None,
        refresh_token: str | None = None,
        token_ttl: int = SPOTIFY_TOKEN_TTL,
        **kwargs,
    ):
        super().__init__(cache, **kwargs)
        self._presence = presence
        self._credentials = (client_id, client_secret, refresh_token)
        self._token_ttl = token_ttl

    @property
    def configured(self) -> bool:
        return self._presence.configured

    @property
    def api_configured(self) -> bool:
        return all(self._credentials)

    async def fetch(self) -> Result[MusicRaw]:
        presence = await self._presence.get()
        if isinstance(presence, Unavailable):
            return Result.fail(presence.reason, "presence document unavailable")

        raw = MusicRaw(presence=presence)
        if self.api_configured and presence.get("listening_to_spotify"):
            playback = await self._playback()
            if playback.ok:
                raw.playback = playback.value
            else:
                raw.unavailable.append("playback_details")
        return Result.success(raw)

    async def _playback(self) -> Result[CurrentlyPlayingSchema | None]:
        async with SpotifyClient(transport=self._transport) as client:
            token = await self._access_token(client)
            if not token.ok:
                return token
            playback = await as_result(client.currently_playing(token.value))
        if playback.failure == FailureKind.UNAUTHORIZED:
            await self._cache.delete(self.token_key)
        return playback

    async def _access_token(self, client: SpotifyClient) -> Result[str]:
        """Cached access token, refreshed when missing or expired."""
        cached = await self._cache.get(self.token_key)
        if cached:
            return Result.success(cached)

        token = await as_result(client.refresh_access_token(*self._credentials))
        if not token.ok:
            return token
        await self._cache.set(self.token_key, token.value.access_token, self._token_ttl)
        return Result.success(token.value.access_token)

    def normalize(self, raw: MusicRaw) -> SpotifyStats:
        return normalize_music(raw, int(self._now().timestamp() * 1000))
