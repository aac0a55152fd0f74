"""GitHub stats document."""

from app.models.common import DailyCount, DailySeries, Document, LanguageShare, TimeOfDayDistribution

COMMITS_NOTE = "Estimated from push events (may undercount commits pushed before token creation)"
STREAK_NOTE = "Calculated from recent events (up to 90 days, max 300 events)"
REPO_METRICS_NOTE = "Metrics include both public and private repos visible to the token"
RATE_LIMIT_NOTE = "GitHub API has rate limits. Authenticated: 5000 req/hr. Data may be cached."
COMMIT_SEARCH_NOTE = "From commit search (max 1000 commits, default branches only)"


class GitHubUser(Document):
    username: str
    name: str | None = None
    avatar_url: str | None = None
    bio: str | None = None
    location: str | None = None
    website: str | None = None
    company: str | None = None
    twitter_username: str | None = None
    public_repos: int = 0
    public_gists: int = 0
    followers: int = 0
    following: int = 0
    created_at: str | None = None
    profile_url: str | None = None


class RepositoryMetrics(Document):
    total_repos: int = 0
    owned_repos: int = 0
    forked_repos: int = 0
    total_stars: int = 0
    owned_stars: int = 0
    total_forks: int = 0
    archived_count: int = 0
    note: str = REPO_METRICS_NOTE


class TopRepository(Document):
    name: str
    full_name: str
    description: str | None = None
    url: str | None = None
    stars: int = 0
    forks: int = 0
    language: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    pushed_at: str | None = None
    is_fork: bool = False
    is_archived: bool = False
    topics: list[str] = []


class RepoActivity(Document):
    repo: str
    events: int


class EventActivity(Document):
    """Counters over the recent event window."""

    period_days: int
    commits_count: int = 0
    commits_note: str = COMMITS_NOTE
    push_events: int = 0
    pull_requests_opened: int = 0
    pull_requests_merged: int = 0
    issues_opened: int = 0
    total_events: int = 0
    daily_timeline: list[DailyCount] = []
    most_active_repos: list[RepoActivity] = []


class ContributionSignals(Document):
    current_streak: int = 0
    longest_streak_in_period: int = 0
    active_days_in_period: int = 0
    note: str = STREAK_NOTE
    last_activity: str | None = None
    last_activity_human: str | None = None


class CommitHistory(DailySeries):
    """Daily commits plus the time-of-day split."""

    time_of_day: TimeOfDayDistribution
    note: str = COMMIT_SEARCH_NOTE


class GitHubStats(Document):
    user: GitHubUser
    repository_metrics: RepositoryMetrics
    top_repositories: list[TopRepository] = []
    language_distribution: list[LanguageShare] = []
    activity_last_30_days: EventActivity
    contribution_signals: ContributionSignals
    commits_last_365_days: CommitHistory | None = None
    contributions_last_365_days: DailySeries | None = None
    unavailable: list[str] = []
    rate_limit_note: str = RATE_LIMIT_NOTE
    last_updated: str
