"""Presence and music services."""

from app.services.presence.collector import DiscordCollector, SpotifyCollector

__all__ = ["DiscordCollector", "SpotifyCollector"]
