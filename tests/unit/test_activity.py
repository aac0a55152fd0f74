"""Tests for time-series helpers."""

from datetime import UTC, date, datetime, timedelta, timezone

from helpers import activity
from stats_client.wakatime.schemas import DurationEntry

TODAY = date(2024, 1, 10)


def at(day: date, hour: int = 12, tz=UTC) -> datetime:
    return datetime(day.year, day.month, day.day, hour, tzinfo=tz)


class TestDenseWindow:
    def test_one_entry_per_day(self):
        days = activity.dense_daily_window([], 30, TODAY)
        assert len(days) == 30
        assert days[0].date == "2023-12-12"
        assert days[-1].date == "2024-01-10"
        assert all(d.count == 0 for d in days)

    def test_seven_day_scenario(self):
        events = [at(TODAY - timedelta(days=3)), at(TODAY - timedelta(days=5))]
        days = activity.dense_daily_window(events, 7, TODAY)
        assert [d.count for d in days] == [0, 1, 0, 1, 0, 0, 0]

        streak = activity.streak_from_daily(days, TODAY)
        assert streak.active_days_in_period == 2
        assert streak.longest_streak_in_period == 1
        assert streak.current_streak == 0

    def test_outside_window_ignored(self):
        days = activity.dense_daily_window([at(TODAY - timedelta(days=7)), at(TODAY + timedelta(days=1))], 7, TODAY)
        assert sum(d.count for d in days) == 0

    def test_reference_timezone(self):
        plus_two = timezone(timedelta(hours=2))
        late = datetime(2024, 1, 9, 23, 30, tzinfo=UTC)
        days = activity.dense_daily_window([late], 2, TODAY, plus_two)
        assert [d.count for d in days] == [0, 1]

    def test_counts_summed(self):
        days = activity.dense_daily_counts([(TODAY, 2), (TODAY, 3)], 1, TODAY)
        assert days[0].count == 5


class TestStreak:
    def test_empty(self):
        s = activity.calculate_streak([], TODAY)
        assert (s.current_streak, s.longest_streak_in_period, s.active_days_in_period) == (0, 0, 0)

    def test_ends_today(self):
        s = activity.calculate_streak([TODAY, TODAY - timedelta(days=1), TODAY - timedelta(days=2)], TODAY)
        assert s.current_streak == 3

    def test_ends_yesterday(self):
        s = activity.calculate_streak([TODAY - timedelta(days=1), TODAY - timedelta(days=2)], TODAY)
        assert s.current_streak == 2

    def test_broken(self):
        s = activity.calculate_streak([TODAY - timedelta(days=2), TODAY - timedelta(days=3)], TODAY)
        assert s.current_streak == 0
        assert s.longest_streak_in_period == 2

    def test_longest_run(self):
        active = [date(2024, 1, d) for d in (1, 2, 3, 5, 6)]
        s = activity.calculate_streak(active, TODAY)
        assert s.longest_streak_in_period == 3
        assert s.active_days_in_period == 5

    def test_longest_never_below_current(self):
        s = activity.calculate_streak([TODAY, TODAY - timedelta(days=1)], TODAY)
        assert s.longest_streak_in_period >= s.current_streak

    def test_longest_grows_monotonically(self):
        additions = [date(2024, 1, d) for d in (5, 9, 6, 1, 7, 2, 10, 8, 3, 4)]
        active, longest = [], 0
        for day in additions:
            active.append(day)
            s = activity.calculate_streak(active, TODAY)
            assert s.longest_streak_in_period >= longest
            longest = s.longest_streak_in_period
        assert longest == 10

    def test_series(self):
        days = activity.dense_daily_counts([(TODAY, 4), (TODAY - timedelta(days=1), 1)], 7, TODAY)
        series = activity.daily_series(days, TODAY)
        assert series.window_days == 7
        assert series.total == 5
        assert series.streak.current_streak == 2


class TestTimeOfDay:
    def test_buckets(self):
        commits = [(at(TODAY, h), {"h": h}) for h in (1, 7, 13, 13, 20)]
        result = activity.time_of_day_distribution(commits)
        assert result.total_commits == 5
        assert result.buckets["night"].count == 1
        assert result.buckets["morning"].count == 1
        assert result.buckets["daytime"].count == 2
        assert result.buckets["daytime"].percent == 40.0
        assert result.buckets["evening"].hours == "18-24"

    def test_examples_newest_first(self):
        commits = [(at(TODAY - timedelta(days=i), 2), {"i": i}) for i in range(7)]
        night = activity.time_of_day_distribution(commits).buckets["night"]
        assert night.count == 7
        assert [e["i"] for e in night.examples] == [0, 1, 2, 3, 4]

    def test_local_hour(self):
        plus_two = timezone(timedelta(hours=2))
        result = activity.time_of_day_distribution([(datetime(2024, 1, 9, 23, tzinfo=UTC), {})], plus_two)
        assert result.buckets["night"].count == 1
        assert result.buckets["evening"].count == 0

    def test_empty(self):
        result = activity.time_of_day_distribution([])
        assert result.total_commits == 0
        assert all(b.percent == 0.0 for b in result.buckets.values())


class TestMergeBreakdowns:
    def test_aggregate_passthrough(self):
        aggregate = [DurationEntry(name="Python", total_seconds=60, percent=100.0, text="1 min")]
        merged = activity.merge_breakdowns(aggregate)
        assert merged[0].name == "Python"
        assert merged[0].percent == 100.0
        assert merged[0].text == "1 min"

    def test_sums_and_recomputes_percent(self):
        day1 = [DurationEntry(name="Python", total_seconds=3600, percent=50), DurationEntry(name="Go", total_seconds=1800)]
        day2 = [DurationEntry(name="Python", total_seconds=1800, percent=100)]
        merged = activity.merge_breakdowns([], [day1, day2])
        assert [(e.name, e.total_seconds, e.percent) for e in merged] == [("Python", 5400, 75.0), ("Go", 1800, 25.0)]
        assert merged[0].digital == "1:30"

    def test_order_independent(self):
        d1 = [DurationEntry(name="a", total_seconds=10)]
        d2 = [DurationEntry(name="b", total_seconds=30), DurationEntry(name="a", total_seconds=5)]
        d3 = [DurationEntry(name="c", total_seconds=7)]
        assert activity.merge_breakdowns([], [d1, d2, d3]) == activity.merge_breakdowns([], [d3, d1, d2])

    def test_empty_daily_uses_aggregate(self):
        aggregate = [DurationEntry(name="Go", total_seconds=5, percent=100)]
        assert activity.merge_breakdowns(aggregate, [])[0].name == "Go"


class TestFormatting:
    def test_format_duration(self):
        assert activity.format_duration(3660) == ("1:01", "1 hr 1 min")
        assert activity.format_duration(7320) == ("2:02", "2 hrs 2 mins")
        assert activity.format_duration(90) == ("0:01", "1 min")

    def test_language_distribution(self):
        result = activity.language_distribution(["Python", "Go", "Python", None])
        assert [(r.name, r.count, r.percent) for r in result] == [("Python", 2, 66.7), ("Go", 1, 33.3)]

    def test_hours_ago(self):
        now = datetime(2024, 1, 10, 12, tzinfo=UTC)
        assert activity.hours_ago(datetime(2024, 1, 10, 7, tzinfo=UTC), now) == "5 hours ago"
        assert activity.hours_ago(None, now) is None
