"""GitHub API schemas - user, repos, events, commits, contribution calendar."""

from datetime import date, datetime

from pydantic import BaseModel, Field


class UserSchema(BaseModel):
    """Authenticated user (GET /user)."""

    login: str
    name: str | None = None
    avatar_url: str | None = None
    bio: str | None = None
    location: str | None = None
    blog: str | None = None
    company: str | None = None
    twitter_username: str | None = None
    public_repos: int = 0
    public_gists: int = 0
    followers: int = 0
    following: int = 0
    created_at: datetime | None = None
    html_url: str | None = None


class RepoSchema(BaseModel):
    """Repository visible to the token."""

    name: str
    full_name: str
    description: str | None = None
    html_url: str | None = None
    stargazers_count: int = 0
    forks_count: int = 0
    language: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    pushed_at: datetime | None = None
    fork: bool = False
    archived: bool = False
    topics: list[str] = []


class EventRepo(BaseModel):
    name: str


class EventSchema(BaseModel):
    """Public/private activity event (GET /users/{login}/events)."""

    id: str | None = None
    type: str
    created_at: datetime
    repo: EventRepo | None = None
    payload: dict = {}

    @property
    def repo_name(self) -> str | None:
        return self.repo.name if self.repo else None


class CommitAuthor(BaseModel):
    name: str | None = None
    date: datetime


class CommitDetail(BaseModel):
    message: str = ""
    author: CommitAuthor


class CommitRepo(BaseModel):
    full_name: str


class CommitSearchItem(BaseModel):
    """Item of GET /search/commits."""

    sha: str
    html_url: str | None = None
    commit: CommitDetail
    repository: CommitRepo | None = None


class ContributionDay(BaseModel):
    date: date
    contribution_count: int = Field(alias="contributionCount", default=0)

    class Config:
        populate_by_name = True


class ContributionWeek(BaseModel):
    contribution_days: list[ContributionDay] = Field(alias="contributionDays", default=[])

    class Config:
        populate_by_name = True


class ContributionCalendarSchema(BaseModel):
    """contributionsCollection.contributionCalendar (GraphQL)."""

    total_contributions: int = Field(alias="totalContributions", default=0)
    weeks: list[ContributionWeek] = []

    class Config:
        populate_by_name = True

    def days(self) -> list[ContributionDay]:
        return [d for w in self.weeks for d in w.contribution_days]
