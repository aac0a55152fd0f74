"""Discord presence and Spotify now-playing documents."""

from typing import Any, Literal

from app.models.common import Document


class DiscordUser(Document):
    id: str
    username: str
    discriminator: str | None = None
    avatar: str | None = None
    bot: bool = False
    global_name: str | None = None


class SpotifyPresence(Document):
    track_id: str | None = None
    timestamps: dict[str, int] | None = None
    song: str | None = None
    artist: str | None = None
    album_art_url: str | None = None
    album: str | None = None


class Activity(Document):
    id: str | None = None
    name: str
    type: int = 0
    state: str | None = None
    details: str | None = None
    emoji: dict[str, Any] | None = None
    created_at: int | None = None
    timestamps: dict[str, int] | None = None
    application_id: str | None = None
    assets: dict[str, Any] | None = None


class DiscordStats(Document):
    discord_user: DiscordUser
    discord_status: str = "offline"
    active_on_discord_mobile: bool = False
    active_on_discord_desktop: bool = False
    active_on_discord_web: bool = False
    listening_to_spotify: bool = False
    spotify: SpotifyPresence | None = None
    activities: list[Activity] = []
    kv: dict[str, str] = {}
    last_updated: str


class TrackArtist(Document):
    name: str
    id: str | None = None
    url: str | None = None


class TrackAlbum(Document):
    name: str | None = None
    id: str | None = None
    url: str | None = None
    album_art_url: str | None = None


class CurrentTrack(Document):
    id: str | None = None
    name: str | None = None
    artists: list[TrackArtist] = []
    artist_names: str = ""
    album: TrackAlbum = TrackAlbum()
    duration_ms: int | None = None
    progress_ms: int | None = None
    url: str | None = None
    preview_url: str | None = None
    explicit: bool | None = None
    popularity: int | None = None


class PlaybackContext(Document):
    type: str | None = None
    url: str | None = None


class SpotifyStats(Document):
    is_playing: bool = False
    source: Literal["presence", "presence+spotify_api"] = "presence"
    current_track: CurrentTrack | None = None
    timestamp: int | None = None
    context: PlaybackContext | None = None
    unavailable: list[str] = []
    last_updated: str
