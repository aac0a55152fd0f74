"""Lanyard presence client."""

from stats_client.lanyard.client import LanyardClient

__all__ = ["LanyardClient"]
