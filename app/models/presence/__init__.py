"""Presence and music domain models."""

from app.models.presence.documents import (
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

__all__ = [
    "DiscordStats",
    "DiscordUser",
    "SpotifyPresence",
    "Activity",
    "SpotifyStats",
    "CurrentTrack",
    "TrackArtist",
    "TrackAlbum",
    "PlaybackContext",
]
