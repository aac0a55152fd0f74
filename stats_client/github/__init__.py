"""GitHub API client."""

from stats_client.github.client import GitHubClient

__all__ = ["GitHubClient"]
