"""GitHub domain models."""

from app.models.github.documents import (
    CommitHistory,
    ContributionSignals,
    EventActivity,
    GitHubStats,
    GitHubUser,
    RepoActivity,
    RepositoryMetrics,
    TopRepository,
)

__all__ = [
    "GitHubStats",
    "GitHubUser",
    "RepositoryMetrics",
    "TopRepository",
    "EventActivity",
    "RepoActivity",
    "ContributionSignals",
    "CommitHistory",
]
