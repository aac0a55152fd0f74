"""GitHub service."""

from app.services.github.collector import GitHubCollector

__all__ = ["GitHubCollector"]
