"""
Calendar classification helpers for focus sessions.

Maps a session's start time to the fixed categories used by the
productivity breakdowns:
- TimeOfDay: five day-part buckets
- Weekday: Sunday-first weekday enumeration
"""

from datetime import datetime
from enum import Enum, IntEnum


class TimeOfDay(str, Enum):
    """Day-part bucket of a timestamp."""

    EARLY_MORNING = "early_morning"  # 5:00-8:59
    LATE_MORNING = "late_morning"  # 9:00-11:59
    AFTERNOON = "afternoon"  # 12:00-16:59
    EVENING = "evening"  # 17:00-20:59
    NIGHT = "night"  # 21:00-4:59

    @property
    def display_name(self) -> str:
        return TIME_OF_DAY_DISPLAY_NAMES[self]


TIME_OF_DAY_DISPLAY_NAMES = {
    TimeOfDay.EARLY_MORNING: "Early Morning (5:00-8:59)",
    TimeOfDay.LATE_MORNING: "Late Morning (9:00-11:59)",
    TimeOfDay.AFTERNOON: "Afternoon (12:00-16:59)",
    TimeOfDay.EVENING: "Evening (17:00-20:59)",
    TimeOfDay.NIGHT: "Night (21:00-4:59)",
}


class Weekday(IntEnum):
    """Day of week, Sunday first."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def display_name(self) -> str:
        return self.name.title()


def classify_time_of_day(timestamp: datetime) -> TimeOfDay:
    """Return the day-part bucket containing the timestamp's hour."""
    hour = timestamp.hour

    if 5 <= hour < 9:
        return TimeOfDay.EARLY_MORNING
    if 9 <= hour < 12:
        return TimeOfDay.LATE_MORNING
    if 12 <= hour < 17:
        return TimeOfDay.AFTERNOON
    if 17 <= hour < 21:
        return TimeOfDay.EVENING
    return TimeOfDay.NIGHT


def weekday_of(timestamp: datetime) -> Weekday:
    """Return the Sunday-first weekday of a timestamp."""
    # datetime.weekday() is Monday=0
    return Weekday((timestamp.weekday() + 1) % 7)
