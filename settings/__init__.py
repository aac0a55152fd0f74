"""Application settings."""

import os
from pathlib import Path


def _int(name: str, default: int) -> int:
    value = os.getenv(name)
    try:
        return int(value) if value else default
    except ValueError:
        return default


# Logging
LOG_DIR = Path(os.getenv("STATS_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Cache
REDIS_URL = os.getenv("REDIS_URL") or None
CACHE_TTL = _int("CACHE_TTL", 300)
SPOTIFY_TOKEN_TTL = 3500  # upstream tokens live for one hour

# API
USER_AGENT = "Personal-Stats-API/1.0"
API_TIMEOUT = _int("API_TIMEOUT", 15)
PRESENCE_TIMEOUT = 10
STATS_TIMEZONE = os.getenv("STATS_TIMEZONE", "UTC")

# Refresh
REFRESH_ATTEMPTS = _int("REFRESH_ATTEMPTS", 2)

# Credentials
GITHUB_TOKEN = os.getenv("GITHUB_TOKEN") or None
LEETCODE_USERNAME = os.getenv("LEETCODE_USERNAME") or None
WAKATIME_API_KEY = os.getenv("WAKATIME_API_KEY") or None
DISCORD_USER_ID = os.getenv("DISCORD_USER_ID") or None
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID") or None
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET") or None
SPOTIFY_REFRESH_TOKEN = os.getenv("SPOTIFY_REFRESH_TOKEN") or None

# Scheduler intervals (minutes)
INTERVAL_DISCORD = _int("INTERVAL_DISCORD", 2)
INTERVAL_SPOTIFY = _int("INTERVAL_SPOTIFY", 2)
INTERVAL_LEETCODE = _int("INTERVAL_LEETCODE", 60)
INTERVAL_WAKATIME = _int("INTERVAL_WAKATIME", 30)
INTERVAL_GITHUB = _int("INTERVAL_GITHUB", 30)

VERSION = "1.0.0"
