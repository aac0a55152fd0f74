"""Presence and music normalizers.

The music document is derived from the presence document; the Spotify Web
API may only add details about the track presence already reports.
"""

from dataclasses import dataclass, field
from typing import Any

from app.models.common import utc_now_iso
from app.models.presence import (
    Activity,
    CurrentTrack,
    DiscordStats,
    DiscordUser,
    PlaybackContext,
    SpotifyPresence,
    SpotifyStats,
    TrackAlbum,
    TrackArtist,
)
from stats_client.lanyard.schemas import PresenceSchema
from stats_client.spotify.schemas import CurrentlyPlayingSchema

TRACK_URL = "https://open.spotify.com/track/{}"


def normalize_presence(data: PresenceSchema) -> DiscordStats:
    return DiscordStats(
        discord_user=DiscordUser(**data.discord_user.model_dump()),
        discord_status=data.discord_status,
        active_on_discord_mobile=data.active_on_discord_mobile,
        active_on_discord_desktop=data.active_on_discord_desktop,
        active_on_discord_web=data.active_on_discord_web,
        listening_to_spotify=data.listening_to_spotify,
        spotify=SpotifyPresence(**data.spotify.model_dump()) if data.spotify else None,
        activities=[Activity(**a.model_dump()) for a in data.activities],
        kv=data.kv,
        last_updated=utc_now_iso(),
    )


@dataclass
class MusicRaw:
    presence: dict[str, Any]
    playback: CurrentlyPlayingSchema | None = None
    unavailable: list[str] = field(default_factory=list)


def track_from_presence(spotify: dict[str, Any], now_ms: int) -> CurrentTrack:
    """Track as Discord reports it; Discord joins artists with ``"; "``."""
    timestamps = spotify.get("timestamps") or {}
    start, end = timestamps.get("start"), timestamps.get("end")
    artist = spotify.get("artist") or ""
    track_id = spotify.get("track_id")
    return CurrentTrack(
        id=track_id,
        name=spotify.get("song"),
        artists=[TrackArtist(name=a) for a in artist.split("; ") if a],
        artist_names=artist.replace("; ", ", "),
        album=TrackAlbum(name=spotify.get("album"), album_art_url=spotify.get("album_art_url")),
        duration_ms=end - start if start and end else None,
        progress_ms=max(now_ms - start, 0) if start else None,
        url=TRACK_URL.format(track_id) if track_id else None,
    )


def enrich_track(track: CurrentTrack, playback: CurrentlyPlayingSchema) -> CurrentTrack:
    """Fill in Web API details for the same track."""
    item = playback.item
    images = item.album.images
    return CurrentTrack(
        id=item.id,
        name=item.name,
        artists=[TrackArtist(name=a.name, id=a.id, url=a.external_urls.spotify) for a in item.artists],
        artist_names=", ".join(a.name for a in item.artists),
        album=TrackAlbum(
            name=item.album.name,
            id=item.album.id,
            url=item.album.external_urls.spotify,
            album_art_url=images[0].url if images else track.album.album_art_url,
        ),
        duration_ms=item.duration_ms,
        progress_ms=playback.progress_ms if playback.progress_ms is not None else track.progress_ms,
        url=item.external_urls.spotify or track.url,
        preview_url=item.preview_url,
        explicit=item.explicit,
        popularity=item.popularity,
    )


def normalize_music(raw: MusicRaw, now_ms: int) -> SpotifyStats:
    spotify = raw.presence.get("spotify")
    if not raw.presence.get("listening_to_spotify") or not spotify:
        return SpotifyStats(is_playing=False, unavailable=raw.unavailable, last_updated=utc_now_iso())

    track = track_from_presence(spotify, now_ms)
    playback = raw.playback
    if playback is None or playback.item is None or playback.item.id != track.id:
        return SpotifyStats(
            is_playing=True,
            current_track=track,
            timestamp=now_ms,
            unavailable=raw.unavailable,
            last_updated=utc_now_iso(),
        )

    context = None
    if playback.context:
        urls = playback.context.external_urls
        context = PlaybackContext(type=playback.context.type, url=urls.spotify if urls else None)

    return SpotifyStats(
        is_playing=playback.is_playing,
        source="presence+spotify_api",
        current_track=enrich_track(track, playback),
        timestamp=playback.timestamp or now_ms,
        context=context,
        unavailable=raw.unavailable,
        last_updated=utc_now_iso(),
    )
