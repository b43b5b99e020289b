"""
Productivity statistics aggregation.

Summarizes a user's sessions in a date range along four dimensions
(weekday, time of day, location, location type) and picks the most
productive category of each. Only completed sessions with an actual
duration feed the metrics; cancelled sessions are only counted.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, Optional, Tuple

from .models import DateRange, FocusSession, MetricCounter, SessionStatus
from .scoring import calculate_productivity_score
from .time_of_day import TimeOfDay, Weekday, classify_time_of_day, weekday_of

logger = logging.getLogger(__name__)


@dataclass
class ProductivityStats:
    """Productivity analytics for one user over one date range."""

    total_sessions: int = 0
    completed_sessions: int = 0
    cancelled_sessions: int = 0
    total_duration: int = 0  # minutes
    average_duration: float = 0.0

    average_rating: float = 0.0
    average_focus: float = 0.0
    average_energy: float = 0.0
    average_mood: float = 0.0
    average_distractions: float = 0.0

    productivity_by_day: Dict[Weekday, float] = field(default_factory=dict)
    most_productive_day: Optional[Weekday] = None

    productivity_by_time: Dict[TimeOfDay, float] = field(default_factory=dict)
    most_productive_time: Optional[TimeOfDay] = None

    productivity_by_location: Dict[str, float] = field(default_factory=dict)
    most_productive_location: Optional[str] = None

    productivity_by_location_type: Dict[str, float] = field(default_factory=dict)
    most_productive_location_type: Optional[str] = None

    most_used_location: Optional[str] = None

    date_range: Optional[DateRange] = None

    def to_dict(self) -> dict:
        """Convert to dictionary, rendering weekdays and day-parts by display name."""
        return {
            "total_sessions": self.total_sessions,
            "completed_sessions": self.completed_sessions,
            "cancelled_sessions": self.cancelled_sessions,
            "total_duration": self.total_duration,
            "average_duration": self.average_duration,
            "average_rating": self.average_rating,
            "average_focus": self.average_focus,
            "average_energy": self.average_energy,
            "average_mood": self.average_mood,
            "average_distractions": self.average_distractions,
            "productivity_by_day": {
                day.display_name: score for day, score in self.productivity_by_day.items()
            },
            "most_productive_day": (
                self.most_productive_day.display_name if self.most_productive_day is not None else None
            ),
            "productivity_by_time": {
                tod.display_name: score for tod, score in self.productivity_by_time.items()
            },
            "most_productive_time": (
                self.most_productive_time.display_name if self.most_productive_time is not None else None
            ),
            "productivity_by_location": dict(self.productivity_by_location),
            "most_productive_location": self.most_productive_location,
            "productivity_by_location_type": dict(self.productivity_by_location_type),
            "most_productive_location_type": self.most_productive_location_type,
            "most_used_location": self.most_used_location,
            "date_range": (
                {
                    "start_date": self.date_range.start.isoformat(),
                    "end_date": self.date_range.end.isoformat(),
                }
                if self.date_range
                else None
            ),
        }


class _MetricTotals:
    """Global sum of one metric with its own presence count."""

    __slots__ = ("total", "count")

    def __init__(self):
        self.total = 0
        self.count = 0

    def add(self, value: Optional[int]) -> None:
        if value is not None:
            self.total += value
            self.count += 1

    @property
    def average(self) -> float:
        return self.total / self.count if self.count else 0.0


def _productivity_by_category(
    counters: Dict[Hashable, MetricCounter],
) -> Tuple[Dict[Hashable, float], Optional[Hashable]]:
    """
    Average score per category and the category with the highest average.

    Categories without sessions are left out. Iteration follows the
    counters' insertion order and only a strictly greater average
    replaces the current winner, so the first category to reach the
    maximum wins ties.
    """
    averages = {}
    best_category = None
    best_score = 0.0

    for category, counter in counters.items():
        if counter.count == 0:
            continue
        avg_score = counter.average_score
        averages[category] = avg_score
        if best_category is None or avg_score > best_score:
            best_category = category
            best_score = avg_score

    return averages, best_category


def _most_used(counters: Dict[str, MetricCounter]) -> Optional[str]:
    """Category with the most sessions, first seen wins ties."""
    best_category = None
    best_count = 0
    for category, counter in counters.items():
        if counter.count > best_count:
            best_category = category
            best_count = counter.count
    return best_category


def aggregate_stats(
    sessions: Iterable[FocusSession],
    date_range: Optional[DateRange] = None,
) -> ProductivityStats:
    """
    Aggregate productivity statistics for a list of sessions.

    The caller has already restricted ``sessions`` to ``date_range``;
    it is carried through to the result but not re-applied here.

    Args:
        sessions: One user's sessions in the reporting window
        date_range: The reporting window, echoed in the result

    Returns:
        ProductivityStats; an empty input gives zero counts and empty maps.
    """
    sessions = list(sessions)
    stats = ProductivityStats(total_sessions=len(sessions), date_range=date_range)

    # Fixed domains are seeded in display order, open domains grow on first sight
    day_counters: Dict[Weekday, MetricCounter] = {day: MetricCounter() for day in Weekday}
    time_counters: Dict[TimeOfDay, MetricCounter] = {tod: MetricCounter() for tod in TimeOfDay}
    location_counters: Dict[str, MetricCounter] = {}
    location_type_counters: Dict[str, MetricCounter] = {}

    rating = _MetricTotals()
    focus = _MetricTotals()
    energy = _MetricTotals()
    mood = _MetricTotals()
    distractions = _MetricTotals()

    for session in sessions:
        if not session.is_completed:
            if session.status == SessionStatus.CANCELLED:
                stats.cancelled_sessions += 1
            continue

        stats.completed_sessions += 1
        stats.total_duration += session.actual_duration

        score = calculate_productivity_score(session)

        day_counters[weekday_of(session.start_time)].add(session, score)
        time_counters[classify_time_of_day(session.start_time)].add(session, score)

        if session.location is not None:
            location_counters.setdefault(session.location.name, MetricCounter()).add(session, score)
            if session.location.type:
                location_type_counters.setdefault(session.location.type, MetricCounter()).add(
                    session, score
                )

        rating.add(session.rating)
        focus.add(session.focus)
        energy.add(session.energy)
        mood.add(session.mood)
        distractions.add(session.distractions)

    stats.average_rating = rating.average
    stats.average_focus = focus.average
    stats.average_energy = energy.average
    stats.average_mood = mood.average
    stats.average_distractions = distractions.average

    if stats.completed_sessions > 0:
        stats.average_duration = stats.total_duration / stats.completed_sessions

    stats.productivity_by_day, stats.most_productive_day = _productivity_by_category(day_counters)
    stats.productivity_by_time, stats.most_productive_time = _productivity_by_category(time_counters)
    stats.productivity_by_location, stats.most_productive_location = _productivity_by_category(
        location_counters
    )
    stats.productivity_by_location_type, stats.most_productive_location_type = (
        _productivity_by_category(location_type_counters)
    )
    stats.most_used_location = _most_used(location_counters)

    logger.debug(
        f"[STATS] {stats.total_sessions} sessions, {stats.completed_sessions} completed, "
        f"{stats.cancelled_sessions} cancelled, {stats.total_duration} min"
    )

    return stats
