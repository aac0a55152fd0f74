"""Spotify Web API schemas."""

from pydantic import BaseModel


class ExternalUrls(BaseModel):
    spotify: str | None = None


class ImageSchema(BaseModel):
    url: str
    height: int | None = None
    width: int | None = None


class ArtistSchema(BaseModel):
    id: str | None = None
    name: str
    external_urls: ExternalUrls = ExternalUrls()


class AlbumSchema(BaseModel):
    id: str | None = None
    name: str
    external_urls: ExternalUrls = ExternalUrls()
    images: list[ImageSchema] = []


class TrackSchema(BaseModel):
    id: str | None = None
    name: str
    artists: list[ArtistSchema] = []
    album: AlbumSchema
    duration_ms: int = 0
    external_urls: ExternalUrls = ExternalUrls()
    preview_url: str | None = None
    explicit: bool = False
    popularity: int | None = None


class ContextSchema(BaseModel):
    type: str | None = None
    external_urls: ExternalUrls | None = None


class CurrentlyPlayingSchema(BaseModel):
    """GET /v1/me/player/currently-playing."""

    is_playing: bool = False
    progress_ms: int | None = None
    timestamp: int | None = None
    item: TrackSchema | None = None
    context: ContextSchema | None = None


class TokenSchema(BaseModel):
    """POST accounts.spotify.com/api/token."""

    access_token: str
    expires_in: int = 3600
