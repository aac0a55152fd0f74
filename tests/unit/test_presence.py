"""Tests for Discord presence and the Spotify now-playing projection."""

from datetime import UTC, datetime

import httpx
import pytest

from app.models.common import Unavailable
from app.repositories import CacheStore, MemoryBackend
from app.services import DiscordCollector, SpotifyCollector
from app.services.presence.normalizer import MusicRaw, normalize_music, normalize_presence, track_from_presence
from stats_client.errors import FailureKind
from stats_client.lanyard.schemas import PresenceSchema
from stats_client.spotify.schemas import CurrentlyPlayingSchema

NOW = datetime(2024, 1, 10, 12, tzinfo=UTC)
NOW_MS = int(NOW.timestamp() * 1000)

SPOTIFY_BLOCK = {
    "track_id": "track1",
    "timestamps": {"start": NOW_MS - 30_000, "end": NOW_MS + 170_000},
    "song": "Song",
    "artist": "Artist A; Artist B",
    "album_art_url": "https://i.scdn.co/image/x",
    "album": "Album",
}

PRESENCE = {
    "discord_user": {"id": "42", "username": "me", "discriminator": "0", "avatar": None},
    "discord_status": "online",
    "active_on_discord_desktop": True,
    "listening_to_spotify": True,
    "spotify": SPOTIFY_BLOCK,
    "activities": None,
    "kv": None,
}

PLAYBACK = {
    "is_playing": True,
    "progress_ms": 31_000,
    "timestamp": NOW_MS,
    "context": {"type": "playlist", "external_urls": {"spotify": "https://open.spotify.com/playlist/p"}},
    "item": {
        "id": "track1",
        "name": "Song",
        "duration_ms": 200_000,
        "explicit": True,
        "popularity": 70,
        "external_urls": {"spotify": "https://open.spotify.com/track/track1"},
        "artists": [{"id": "a", "name": "Artist A"}, {"id": "b", "name": "Artist B"}],
        "album": {"id": "al", "name": "Album", "images": [{"url": "https://i.scdn.co/image/big"}]},
    },
}


def presence_doc(**overrides) -> dict:
    return normalize_presence(PresenceSchema.model_validate({**PRESENCE, **overrides})).to_dict()


def spotify_transport(token_status: int = 200, calls: list | None = None) -> httpx.MockTransport:
    def handler(request):
        if calls is not None:
            calls.append(request.url.path)
        if request.url.host == "accounts.spotify.com":
            return httpx.Response(token_status, json={"access_token": "tok", "expires_in": 3600})
        assert request.headers["authorization"] == "Bearer tok"
        return httpx.Response(200, json=PLAYBACK)

    return httpx.MockTransport(handler)


@pytest.fixture
def cache():
    return CacheStore(MemoryBackend())


class TestPresenceNormalizer:
    def test_nulls_become_empty(self):
        doc = presence_doc()
        assert doc["activities"] == []
        assert doc["kv"] == {}
        assert doc["spotify"]["song"] == "Song"

    def test_track_from_presence(self):
        track = track_from_presence(SPOTIFY_BLOCK, NOW_MS)
        assert [a.name for a in track.artists] == ["Artist A", "Artist B"]
        assert track.artist_names == "Artist A, Artist B"
        assert track.duration_ms == 200_000
        assert track.progress_ms == 30_000
        assert track.url == "https://open.spotify.com/track/track1"


class TestMusicProjection:
    def test_not_listening(self):
        doc = presence_doc(listening_to_spotify=False, spotify=None)
        music = normalize_music(MusicRaw(presence=doc), NOW_MS)
        assert music.is_playing is False
        assert music.current_track is None

    def test_presence_only(self):
        music = normalize_music(MusicRaw(presence=presence_doc()), NOW_MS)
        assert music.is_playing is True
        assert music.source == "presence"
        assert music.current_track.name == "Song"

    def test_other_track_not_merged(self):
        playback = CurrentlyPlayingSchema.model_validate({**PLAYBACK, "item": {**PLAYBACK["item"], "id": "other"}})
        music = normalize_music(MusicRaw(presence=presence_doc(), playback=playback), NOW_MS)
        assert music.source == "presence"
        assert music.current_track.id == "track1"


class TestDiscordCollector:
    async def test_refresh(self, cache):
        transport = httpx.MockTransport(lambda r: httpx.Response(200, json={"success": True, "data": PRESENCE}))
        collector = DiscordCollector(cache, "42", attempts=1, transport=transport)
        doc = await collector.refresh()
        assert doc["discord_status"] == "online"
        assert await cache.get("stats:discord") == doc

    async def test_lanyard_failure(self, cache):
        transport = httpx.MockTransport(lambda r: httpx.Response(200, json={"success": False}))
        result = await DiscordCollector(cache, "42", attempts=1, transport=transport).refresh()
        assert isinstance(result, Unavailable)
        assert result.reason == FailureKind.MALFORMED_RESPONSE


class TestSpotifyCollector:
    def collector(self, cache, transport=None, credentials=True, user_id="42", presence_transport=None):
        presence = DiscordCollector(cache, user_id, attempts=1, transport=presence_transport)
        creds = ("id", "secret", "refresh") if credentials else (None, None, None)
        return SpotifyCollector(cache, presence, *creds, attempts=1, clock=lambda: NOW, transport=transport)

    async def test_presence_only_without_credentials(self, cache):
        await cache.set("stats:discord", presence_doc(), 300)
        doc = await self.collector(cache, credentials=False).refresh()
        assert doc["source"] == "presence"
        assert doc["current_track"]["progress_ms"] == 30_000
        assert doc["unavailable"] == []

    async def test_enriched(self, cache):
        await cache.set("stats:discord", presence_doc(), 300)
        doc = await self.collector(cache, spotify_transport()).refresh()
        assert doc["source"] == "presence+spotify_api"
        assert doc["current_track"]["popularity"] == 70
        assert doc["current_track"]["album"]["album_art_url"] == "https://i.scdn.co/image/big"
        assert doc["context"]["type"] == "playlist"
        assert await cache.get("stats:spotify:token") == "tok"

    async def test_cached_token_reused(self, cache):
        await cache.set("stats:discord", presence_doc(), 300)
        await cache.set("stats:spotify:token", "tok", 3500)
        calls = []
        await self.collector(cache, spotify_transport(calls=calls)).refresh()
        assert calls == ["/v1/me/player/currently-playing"]

    async def test_enrichment_failure_degrades(self, cache):
        await cache.set("stats:discord", presence_doc(), 300)
        doc = await self.collector(cache, spotify_transport(token_status=400)).refresh()
        assert doc["source"] == "presence"
        assert doc["current_track"]["name"] == "Song"
        assert doc["unavailable"] == ["playback_details"]

    async def test_presence_not_configured(self, cache):
        result = await self.collector(cache, user_id=None).refresh()
        assert isinstance(result, Unavailable)
        assert result.reason == FailureKind.NOT_CONFIGURED

    async def test_presence_unavailable(self, cache):
        lanyard = httpx.MockTransport(lambda r: httpx.Response(404, json={"success": False}))
        result = await self.collector(cache, presence_transport=lanyard).refresh()
        assert isinstance(result, Unavailable)
        assert result.reason == FailureKind.NOT_FOUND
