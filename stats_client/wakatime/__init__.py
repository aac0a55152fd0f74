"""WakaTime API client."""

from stats_client.wakatime.client import WakaTimeClient

__all__ = ["WakaTimeClient"]
