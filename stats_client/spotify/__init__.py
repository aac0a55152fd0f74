"""Spotify Web API client."""

from stats_client.spotify.client import SpotifyClient

__all__ = ["SpotifyClient"]
