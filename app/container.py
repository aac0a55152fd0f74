"""Dependency Injection container - initialized at app startup."""

import settings
from app.repositories.cache import CacheStore, create_cache_store
from app.services import (
    BaseCollector,
    DiscordCollector,
    GitHubCollector,
    LeetCodeCollector,
    SpotifyCollector,
    WakaTimeCollector,
)


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, cache: CacheStore | None = None) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # One cache store for the whole process
        self.cache = cache or create_cache_store(settings.REDIS_URL)

        # Collectors (with injected cache)
        self.discord = DiscordCollector(self.cache, user_id=settings.DISCORD_USER_ID)
        self.spotify = SpotifyCollector(
            self.cache,
            presence=self.discord,
            client_id=settings.SPOTIFY_CLIENT_ID,
            client_secret=settings.SPOTIFY_CLIENT_SECRET,
            refresh_token=settings.SPOTIFY_REFRESH_TOKEN,
        )
        self.github = GitHubCollector(self.cache, token=settings.GITHUB_TOKEN)
        self.leetcode = LeetCodeCollector(self.cache, username=settings.LEETCODE_USERNAME)
        self.wakatime = WakaTimeCollector(self.cache, api_key=settings.WAKATIME_API_KEY)

        self._initialized = True

    @property
    def collectors(self) -> dict[str, BaseCollector]:
        return {
            "discord": self.discord,
            "spotify": self.spotify,
            "leetcode": self.leetcode,
            "wakatime": self.wakatime,
            "github": self.github,
        }

    async def close(self) -> None:
        """Release the cache connection. Call once at shutdown."""
        if not self._initialized:
            return
        await self.cache.close()
        self._initialized = False


# Global container instance
container = Container()
