"""
Calendar period helpers for trend bucketing.

Every trend bucket is keyed by the start of its calendar period.
The functions here are pure: truncating a timestamp to its period,
stepping to the next period, enumerating a contiguous run of periods,
and formatting the display label of a period.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import List, Optional

from .models import DateRange


class TrendPeriod(str, Enum):
    """Granularity of a trend series."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


DEFAULT_PERIOD = TrendPeriod.WEEKLY


def parse_period(value: Optional[str]) -> TrendPeriod:
    """Parse a period identifier, falling back to weekly when unrecognized."""
    if isinstance(value, TrendPeriod):
        return value
    try:
        return TrendPeriod(str(value).strip().lower())
    except ValueError:
        return DEFAULT_PERIOD


def truncate_to_day(timestamp: datetime) -> datetime:
    """Midnight of the timestamp's calendar day."""
    return timestamp.replace(hour=0, minute=0, second=0, microsecond=0)


def truncate_to_week(timestamp: datetime) -> datetime:
    """Monday 00:00 of the ISO week containing the timestamp."""
    # weekday() is Monday=0, so Sunday steps back six days
    return truncate_to_day(timestamp) - timedelta(days=timestamp.weekday())


def truncate_to_month(timestamp: datetime) -> datetime:
    """The 1st of the timestamp's month at 00:00."""
    return truncate_to_day(timestamp).replace(day=1)


def truncate(timestamp: datetime, period: TrendPeriod) -> datetime:
    """Start of the period containing the timestamp."""
    if period == TrendPeriod.DAILY:
        return truncate_to_day(timestamp)
    if period == TrendPeriod.MONTHLY:
        return truncate_to_month(timestamp)
    return truncate_to_week(timestamp)


def next_period_start(period_start: datetime, period: TrendPeriod) -> datetime:
    """Start of the period following a truncated period start."""
    if period == TrendPeriod.DAILY:
        return period_start + timedelta(days=1)
    if period == TrendPeriod.MONTHLY:
        if period_start.month == 12:
            return period_start.replace(year=period_start.year + 1, month=1)
        return period_start.replace(month=period_start.month + 1)
    return period_start + timedelta(days=7)


def period_starts(date_range: DateRange, period: TrendPeriod) -> List[datetime]:
    """
    Enumerate every period start covering a date range.

    Starts at the period containing date_range.start and ends with the
    period containing date_range.end, inclusive, with no gaps. An
    inverted range yields an empty list.
    """
    current = truncate(date_range.start, period)
    last = truncate(date_range.end, period)

    starts = []
    while current <= last:
        starts.append(current)
        current = next_period_start(current, period)
    return starts


def format_period_label(period_start: datetime, period: TrendPeriod) -> str:
    """
    Human-readable label for a period.

    Examples:
        daily   -> "Jan 02"
        weekly  -> "Jan 6-12", or "Jan 27-Feb 02" across a month boundary
        monthly -> "Jan 2025"
    """
    if period == TrendPeriod.DAILY:
        return period_start.strftime("%b %d")
    if period == TrendPeriod.MONTHLY:
        return period_start.strftime("%b %Y")

    week_end = period_start + timedelta(days=6)
    if period_start.month == week_end.month:
        return f"{period_start.strftime('%b')} {period_start.day}-{week_end.day}"
    return f"{period_start.strftime('%b %d')}-{week_end.strftime('%b %d')}"


def default_trend_range(period: TrendPeriod, now: Optional[datetime] = None) -> DateRange:
    """
    Default look-back window for a trend request.

    Last 30 days for daily trends, last 12 weeks for weekly trends and
    the last year for monthly trends, all ending at ``now``.
    """
    end = now or datetime.now()

    if period == TrendPeriod.DAILY:
        start = end - timedelta(days=30)
    elif period == TrendPeriod.MONTHLY:
        start = _years_before(end, 1)
    else:
        start = end - timedelta(weeks=12)

    return DateRange(start=start, end=end)


def _years_before(timestamp: datetime, years: int) -> datetime:
    try:
        return timestamp.replace(year=timestamp.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year rolls forward like a calendar add
        return timestamp.replace(year=timestamp.year - years, month=3, day=1)
