"""GitHub normalizer - raw REST/GraphQL payloads to ``GitHubStats``."""

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, tzinfo

from app.models.common import DailySeries, utc_now_iso
from app.models.github import (
    CommitHistory,
    ContributionSignals,
    EventActivity,
    GitHubStats,
    GitHubUser,
    RepoActivity,
    RepositoryMetrics,
    TopRepository,
)
from helpers import activity
from stats_client.github.schemas import (
    CommitSearchItem,
    ContributionCalendarSchema,
    EventSchema,
    RepoSchema,
    UserSchema,
)

ACTIVITY_DAYS = 30
HISTORY_DAYS = 365
TOP_REPOS = 10
TOP_ACTIVE_REPOS = 5


@dataclass
class GitHubRaw:
    """Everything one refresh fetched; optional parts may be ``None``."""

    user: UserSchema
    repos: list[RepoSchema]
    events: list[EventSchema]
    commits: list[CommitSearchItem] | None = None
    calendar: ContributionCalendarSchema | None = None
    unavailable: list[str] = field(default_factory=list)


def _iso(ts: datetime | None) -> str | None:
    return ts.isoformat().replace("+00:00", "Z") if ts else None


def normalize_user(user: UserSchema) -> GitHubUser:
    return GitHubUser(
        username=user.login,
        name=user.name,
        avatar_url=user.avatar_url,
        bio=user.bio,
        location=user.location,
        website=user.blog or None,
        company=user.company,
        twitter_username=user.twitter_username,
        public_repos=user.public_repos,
        public_gists=user.public_gists,
        followers=user.followers,
        following=user.following,
        created_at=_iso(user.created_at),
        profile_url=user.html_url,
    )


def repository_metrics(repos: Sequence[RepoSchema]) -> RepositoryMetrics:
    owned = [r for r in repos if not r.fork]
    return RepositoryMetrics(
        total_repos=len(repos),
        owned_repos=len(owned),
        forked_repos=len(repos) - len(owned),
        total_stars=sum(r.stargazers_count for r in repos),
        owned_stars=sum(r.stargazers_count for r in owned),
        total_forks=sum(r.forks_count for r in repos),
        archived_count=sum(1 for r in repos if r.archived),
    )


def top_repositories(repos: Sequence[RepoSchema], limit: int = TOP_REPOS) -> list[TopRepository]:
    """Most starred non-fork repositories."""
    owned = sorted((r for r in repos if not r.fork), key=lambda r: r.stargazers_count, reverse=True)
    return [
        TopRepository(
            name=r.name,
            full_name=r.full_name,
            description=r.description,
            url=r.html_url,
            stars=r.stargazers_count,
            forks=r.forks_count,
            language=r.language,
            created_at=_iso(r.created_at),
            updated_at=_iso(r.updated_at),
            pushed_at=_iso(r.pushed_at),
            is_fork=r.fork,
            is_archived=r.archived,
            topics=r.topics,
        )
        for r in owned[:limit]
    ]


def push_commit_count(event: EventSchema) -> int:
    """Commits carried by a push event.

    Only pushes visible to the events API count, so history from before the
    token existed is undercounted.
    """
    commits = event.payload.get("commits")
    if isinstance(commits, list):
        return len(commits)
    size = event.payload.get("size")
    return size if isinstance(size, int) else 0


def summarize_events(
    events: Sequence[EventSchema],
    today: date,
    tz: tzinfo,
    day_limit: int = ACTIVITY_DAYS,
) -> EventActivity:
    """Counters, dense timeline and busiest repos over the last ``day_limit`` days."""
    first_day = today - timedelta(days=day_limit - 1)
    recent = [e for e in events if first_day <= activity.local_day(e.created_at, tz) <= today]

    commits = push_events = prs_opened = prs_merged = issues_opened = 0
    repo_events: dict[str, int] = defaultdict(int)

    for event in recent:
        if event.repo_name:
            repo_events[event.repo_name] += 1

        action = event.payload.get("action")
        if event.type == "PushEvent":
            push_events += 1
            commits += push_commit_count(event)
        elif event.type == "PullRequestEvent":
            if action == "opened":
                prs_opened += 1
            elif action == "closed" and (event.payload.get("pull_request") or {}).get("merged"):
                prs_merged += 1
        elif event.type == "IssuesEvent" and action == "opened":
            issues_opened += 1

    busiest = sorted(repo_events.items(), key=lambda kv: (-kv[1], kv[0]))[:TOP_ACTIVE_REPOS]

    return EventActivity(
        period_days=day_limit,
        commits_count=commits,
        push_events=push_events,
        pull_requests_opened=prs_opened,
        pull_requests_merged=prs_merged,
        issues_opened=issues_opened,
        total_events=len(recent),
        daily_timeline=activity.dense_daily_window((e.created_at for e in recent), day_limit, today, tz),
        most_active_repos=[RepoActivity(repo=name, events=n) for name, n in busiest],
    )


def contribution_signals(events: Sequence[EventSchema], now: datetime, tz: tzinfo) -> ContributionSignals:
    """Streaks over every fetched event (the API keeps ~90 days)."""
    today = now.astimezone(tz).date()
    streak = activity.calculate_streak((activity.local_day(e.created_at, tz) for e in events), today)
    last = max((e.created_at for e in events), default=None)
    return ContributionSignals(
        **streak.model_dump(),
        last_activity=_iso(last),
        last_activity_human=activity.hours_ago(last, now),
    )


def commit_example(item: CommitSearchItem) -> dict:
    return {
        "sha": item.sha[:7],
        "repo": item.repository.full_name if item.repository else None,
        "message": item.commit.message.split("\n", 1)[0],
        "date": _iso(item.commit.author.date),
        "url": item.html_url,
    }


def commit_history(
    commits: Sequence[CommitSearchItem],
    today: date,
    tz: tzinfo,
    days: int = HISTORY_DAYS,
) -> CommitHistory:
    """Dense daily commit counts, streaks and time-of-day split."""
    first_day = today - timedelta(days=days - 1)
    in_window = [c for c in commits if first_day <= activity.local_day(c.commit.author.date, tz) <= today]
    series = activity.daily_series(
        activity.dense_daily_window((c.commit.author.date for c in in_window), days, today, tz),
        today,
    )
    return CommitHistory(
        **dict(series),
        time_of_day=activity.time_of_day_distribution(
            ((c.commit.author.date, commit_example(c)) for c in in_window), tz
        ),
    )


def contribution_history(calendar: ContributionCalendarSchema, today: date, days: int = HISTORY_DAYS) -> DailySeries:
    """Dense daily series from the contribution calendar."""
    counts = activity.dense_daily_counts(((d.date, d.contribution_count) for d in calendar.days()), days, today)
    return activity.daily_series(counts, today)


def normalize_github(raw: GitHubRaw, now: datetime, tz: tzinfo) -> GitHubStats:
    today = now.astimezone(tz).date()
    return GitHubStats(
        user=normalize_user(raw.user),
        repository_metrics=repository_metrics(raw.repos),
        top_repositories=top_repositories(raw.repos),
        language_distribution=activity.language_distribution(r.language for r in raw.repos),
        activity_last_30_days=summarize_events(raw.events, today, tz),
        contribution_signals=contribution_signals(raw.events, now, tz),
        commits_last_365_days=commit_history(raw.commits, today, tz) if raw.commits is not None else None,
        contributions_last_365_days=contribution_history(raw.calendar, today) if raw.calendar else None,
        unavailable=raw.unavailable,
        last_updated=utc_now_iso(),
    )
