"""Lanyard presence schemas."""

from typing import Any

from pydantic import BaseModel, field_validator


class DiscordUserSchema(BaseModel):
    id: str
    username: str
    discriminator: str | None = None
    avatar: str | None = None
    bot: bool = False
    global_name: str | None = None


class SpotifyPresenceSchema(BaseModel):
    """Spotify block Discord exposes while a track is playing."""

    track_id: str | None = None
    timestamps: dict[str, int] | None = None
    song: str | None = None
    artist: str | None = None
    album_art_url: str | None = None
    album: str | None = None


class ActivitySchema(BaseModel):
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


class PresenceSchema(BaseModel):
    """``data`` of GET /v1/users/{id}."""

    discord_user: DiscordUserSchema
    discord_status: str = "offline"
    active_on_discord_mobile: bool = False
    active_on_discord_desktop: bool = False
    active_on_discord_web: bool = False
    listening_to_spotify: bool = False
    spotify: SpotifyPresenceSchema | None = None
    activities: list[ActivitySchema] = []
    kv: dict[str, str] = {}

    @field_validator("activities", "kv", mode="before")
    @classmethod
    def _none_empty(cls, v, info):
        if v is None:
            return [] if info.field_name == "activities" else {}
        return v
