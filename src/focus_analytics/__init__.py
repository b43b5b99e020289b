"""
Focus Analytics Module.

Scores focus sessions and derives productivity statistics and trend
series from a user's completed sessions.
"""

from .models import (
    DateRange,
    FocusSession,
    LocationDetails,
    MetricCounter,
    SessionStatus,
)
from .periods import TrendPeriod, default_trend_range, parse_period
from .scoring import calculate_productivity_score
from .stats import ProductivityStats, aggregate_stats
from .time_of_day import TimeOfDay, Weekday, classify_time_of_day, weekday_of
from .trends import ProductivityTrends, build_trends

__all__ = [
    "DateRange",
    "FocusSession",
    "LocationDetails",
    "MetricCounter",
    "SessionStatus",
    "TrendPeriod",
    "default_trend_range",
    "parse_period",
    "calculate_productivity_score",
    "ProductivityStats",
    "aggregate_stats",
    "TimeOfDay",
    "Weekday",
    "classify_time_of_day",
    "weekday_of",
    "ProductivityTrends",
    "build_trends",
]
