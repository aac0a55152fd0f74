"""WakaTime service."""

from app.services.wakatime.collector import WakaTimeCollector

__all__ = ["WakaTimeCollector"]
