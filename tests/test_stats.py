"""
Unit tests for productivity statistics aggregation.

These tests verify:
1. Empty input yields zeroed stats without raising
2. Only completed sessions with an actual duration feed metrics
3. Global averages use per-metric presence counts
4. Breakdowns by weekday, time of day, location and location type
5. Most-productive winners and their tie-break order
6. Rendering to plain data with display names

Usage:
    pytest tests/test_stats.py -v
"""
import pytest
from datetime import datetime

from focus_analytics import (
    DateRange,
    SessionStatus,
    TimeOfDay,
    Weekday,
    aggregate_stats,
    calculate_productivity_score,
)

# Mon 6 Jan 2025 .. Sun 12 Jan 2025
MONDAY = datetime(2025, 1, 6, 10, 0)
TUESDAY = datetime(2025, 1, 7, 10, 0)
WEDNESDAY = datetime(2025, 1, 8, 10, 0)
SUNDAY = datetime(2025, 1, 12, 10, 0)


class TestEmptyInput:
    """No sessions is not an error."""

    def test_empty_list(self):
        stats = aggregate_stats([])

        assert stats.total_sessions == 0
        assert stats.completed_sessions == 0
        assert stats.cancelled_sessions == 0
        assert stats.total_duration == 0
        assert stats.average_duration == 0.0
        assert stats.average_rating == 0.0
        assert stats.productivity_by_day == {}
        assert stats.productivity_by_time == {}
        assert stats.productivity_by_location == {}
        assert stats.productivity_by_location_type == {}
        assert stats.most_productive_day is None
        assert stats.most_productive_time is None
        assert stats.most_productive_location is None
        assert stats.most_productive_location_type is None

    def test_only_unfinished_sessions(self, session_factory):
        sessions = [
            session_factory(status=SessionStatus.PLANNED),
            session_factory(status=SessionStatus.ACTIVE),
            session_factory(status=SessionStatus.CANCELLED),
        ]
        stats = aggregate_stats(sessions)

        assert stats.total_sessions == 3
        assert stats.completed_sessions == 0
        assert stats.cancelled_sessions == 1
        assert stats.productivity_by_day == {}


class TestSessionGate:
    """Which sessions count toward which counters."""

    def test_counts(self, session_factory):
        sessions = [
            session_factory(rating=4),
            session_factory(rating=3, actual_duration=30),
            session_factory(status=SessionStatus.CANCELLED, rating=5),
            session_factory(status=SessionStatus.PLANNED),
            # Completed without an actual duration never reaches the metrics
            session_factory(actual_duration=None, rating=5),
        ]
        stats = aggregate_stats(sessions)

        assert stats.total_sessions == 5
        assert stats.completed_sessions == 2
        assert stats.cancelled_sessions == 1
        assert stats.total_duration == 90
        assert stats.average_duration == pytest.approx(45.0)
        assert stats.average_rating == pytest.approx(3.5)

    def test_cancelled_with_duration_is_not_completed(self, session_factory):
        session = session_factory(status=SessionStatus.CANCELLED, actual_duration=40, rating=5)
        stats = aggregate_stats([session])

        assert stats.completed_sessions == 0
        assert stats.cancelled_sessions == 1
        assert stats.total_duration == 0

    def test_weekday_counts_sum_to_completed(self, session_factory):
        sessions = [
            session_factory(start_time=MONDAY, rating=3),
            session_factory(start_time=MONDAY, rating=5),
            session_factory(start_time=TUESDAY, rating=2),
            session_factory(start_time=SUNDAY),
            session_factory(start_time=SUNDAY, status=SessionStatus.CANCELLED),
        ]
        stats = aggregate_stats(sessions)

        assert stats.completed_sessions == 4
        assert set(stats.productivity_by_day) == {Weekday.MONDAY, Weekday.TUESDAY, Weekday.SUNDAY}


class TestGlobalAverages:
    """Each metric averages over the sessions that reported it."""

    def test_independent_presence_counts(self, session_factory):
        sessions = [
            session_factory(rating=4, focus=8, energy=6, mood=7, distractions=2),
            session_factory(rating=2),
            session_factory(focus=4, distractions=0),
        ]
        stats = aggregate_stats(sessions)

        assert stats.average_rating == pytest.approx(3.0)
        assert stats.average_focus == pytest.approx(6.0)
        assert stats.average_energy == pytest.approx(6.0)
        assert stats.average_mood == pytest.approx(7.0)
        assert stats.average_distractions == pytest.approx(1.0)

    def test_zero_is_a_reported_value(self, session_factory):
        sessions = [
            session_factory(distractions=0),
            session_factory(distractions=4),
        ]
        stats = aggregate_stats(sessions)

        assert stats.average_distractions == pytest.approx(2.0)


class TestBreakdowns:
    """Average score per category."""

    def test_productivity_by_day(self, session_factory):
        monday_a = session_factory(start_time=MONDAY, rating=5)
        monday_b = session_factory(start_time=MONDAY, rating=3)
        tuesday = session_factory(start_time=TUESDAY, rating=2)
        stats = aggregate_stats([monday_a, monday_b, tuesday])

        expected_monday = (
            calculate_productivity_score(monday_a) + calculate_productivity_score(monday_b)
        ) / 2
        assert stats.productivity_by_day[Weekday.MONDAY] == pytest.approx(expected_monday)
        assert stats.productivity_by_day[Weekday.TUESDAY] == pytest.approx(1.0)
        assert stats.most_productive_day == Weekday.MONDAY

    def test_productivity_by_time(self, session_factory):
        sessions = [
            session_factory(start_time=datetime(2025, 1, 6, 6, 30), rating=2),
            session_factory(start_time=datetime(2025, 1, 6, 22, 0), rating=5),
            session_factory(start_time=datetime(2025, 1, 7, 2, 0), rating=3),
        ]
        stats = aggregate_stats(sessions)

        assert stats.productivity_by_time == {
            TimeOfDay.EARLY_MORNING: pytest.approx(1.0),
            TimeOfDay.NIGHT: pytest.approx(3.0),
        }
        assert stats.most_productive_time == TimeOfDay.NIGHT

    def test_productivity_by_location_and_type(self, session_factory):
        sessions = [
            session_factory(location="Central Library", location_type="library", rating=5),
            session_factory(location="Campus Hall", location_type="library", rating=3),
            session_factory(location="Blue Bottle", location_type="coffee shop", rating=2),
            session_factory(location="Home Office", rating=4),
            session_factory(rating=5),
        ]
        stats = aggregate_stats(sessions)

        assert stats.productivity_by_location == {
            "Central Library": pytest.approx(4.0),
            "Campus Hall": pytest.approx(2.0),
            "Blue Bottle": pytest.approx(1.0),
            "Home Office": pytest.approx(3.0),
        }
        # Home Office has no type and is not bucketed as unknown
        assert stats.productivity_by_location_type == {
            "library": pytest.approx(3.0),
            "coffee shop": pytest.approx(1.0),
        }
        assert stats.most_productive_location == "Central Library"
        assert stats.most_productive_location_type == "library"

    def test_location_names_match_exactly(self, session_factory):
        sessions = [
            session_factory(location="Library", rating=3),
            session_factory(location="library", rating=3),
        ]
        stats = aggregate_stats(sessions)

        assert list(stats.productivity_by_location) == ["Library", "library"]

    def test_most_used_location(self, session_factory):
        sessions = [
            session_factory(location="Blue Bottle", rating=1),
            session_factory(location="Home Office", rating=5),
            session_factory(location="Blue Bottle", rating=1),
        ]
        stats = aggregate_stats(sessions)

        assert stats.most_used_location == "Blue Bottle"
        assert stats.most_productive_location == "Home Office"


class TestTieBreaks:
    """Equal averages keep the first category in iteration order."""

    def test_weekday_tie_goes_to_earlier_weekday(self, session_factory):
        """Input order does not matter for fixed domains: Sunday beats Wednesday."""
        sessions = [
            session_factory(start_time=WEDNESDAY, rating=4),
            session_factory(start_time=SUNDAY, rating=4),
        ]
        stats = aggregate_stats(sessions)

        assert stats.productivity_by_day[Weekday.WEDNESDAY] == stats.productivity_by_day[Weekday.SUNDAY]
        assert stats.most_productive_day == Weekday.SUNDAY

    def test_time_of_day_tie_goes_to_earlier_bucket(self, session_factory):
        sessions = [
            session_factory(start_time=datetime(2025, 1, 6, 18, 0), rating=4),
            session_factory(start_time=datetime(2025, 1, 6, 10, 0), rating=4),
        ]
        stats = aggregate_stats(sessions)

        assert stats.most_productive_time == TimeOfDay.LATE_MORNING

    def test_location_tie_goes_to_first_seen(self, session_factory):
        sessions = [
            session_factory(location="Blue Bottle", location_type="coffee shop", rating=4),
            session_factory(location="Central Library", location_type="library", rating=4),
        ]
        stats = aggregate_stats(sessions)
        assert stats.most_productive_location == "Blue Bottle"
        assert stats.most_productive_location_type == "coffee shop"

        stats = aggregate_stats(list(reversed(sessions)))
        assert stats.most_productive_location == "Central Library"
        assert stats.most_productive_location_type == "library"

    def test_all_zero_scores_pick_first_counted_category(self, session_factory):
        """Unrated sessions score 0; the winner is still a day that had sessions."""
        sessions = [
            session_factory(start_time=TUESDAY),
            session_factory(start_time=WEDNESDAY),
        ]
        stats = aggregate_stats(sessions)

        assert stats.productivity_by_day == {Weekday.TUESDAY: 0.0, Weekday.WEDNESDAY: 0.0}
        assert stats.most_productive_day == Weekday.TUESDAY


class TestToDict:
    """Plain-data rendering."""

    def test_display_names_and_date_range(self, session_factory):
        date_range = DateRange(start=datetime(2025, 1, 6), end=datetime(2025, 1, 12, 23, 59, 59))
        sessions = [session_factory(start_time=datetime(2025, 1, 6, 7, 0), rating=4, location="Home")]
        result = aggregate_stats(sessions, date_range).to_dict()

        assert result["productivity_by_day"] == {"Monday": pytest.approx(3.0)}
        assert result["most_productive_day"] == "Monday"
        assert result["productivity_by_time"] == {"Early Morning (5:00-8:59)": pytest.approx(3.0)}
        assert result["most_productive_time"] == "Early Morning (5:00-8:59)"
        assert result["most_productive_location"] == "Home"
        assert result["date_range"] == {
            "start_date": "2025-01-06T00:00:00",
            "end_date": "2025-01-12T23:59:59",
        }

    def test_empty_stats_render_none_winners(self):
        result = aggregate_stats([]).to_dict()

        assert result["most_productive_day"] is None
        assert result["most_productive_time"] is None
        assert result["date_range"] is None
