"""
Productivity trend series.

Buckets completed sessions into contiguous calendar periods (days,
ISO weeks or months) and reduces each bucket to one point per series.
Periods without sessions are kept and zero-filled so the series has
no gaps.
"""

import logging
import statistics
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Union

from .models import DateRange, FocusSession
from .periods import (
    TrendPeriod,
    default_trend_range,
    format_period_label,
    parse_period,
    period_starts,
    truncate,
)
from .scoring import calculate_productivity_score

logger = logging.getLogger(__name__)


@dataclass
class ProductivityTrends:
    """Ordered per-period series, one entry per period."""

    period: TrendPeriod
    dates: List[str] = field(default_factory=list)
    durations: List[int] = field(default_factory=list)  # minutes
    ratings: List[float] = field(default_factory=list)
    focus: List[float] = field(default_factory=list)
    energy: List[float] = field(default_factory=list)
    mood: List[float] = field(default_factory=list)
    productivity: List[float] = field(default_factory=list)

    def average_productivity(self) -> float:
        """Mean productivity over periods that have a score."""
        scored = [p for p in self.productivity if p > 0]
        if not scored:
            return 0.0
        return statistics.mean(scored)

    def is_improving(self) -> bool:
        """True when the later half of scored periods beats the earlier half."""
        scored = [p for p in self.productivity if p > 0]
        if len(scored) < 2:
            return False
        half = len(scored) // 2
        return statistics.mean(scored[-half:]) > statistics.mean(scored[:half])

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "period": self.period.value,
            "dates": list(self.dates),
            "durations": list(self.durations),
            "ratings": list(self.ratings),
            "focus": list(self.focus),
            "energy": list(self.energy),
            "mood": list(self.mood),
            "productivity": list(self.productivity),
        }


@dataclass
class PeriodBucket:
    """Accumulated metrics for one calendar period."""

    period_start: datetime
    session_count: int = 0
    total_duration: int = 0
    total_rating: int = 0
    rating_count: int = 0
    total_focus: int = 0
    focus_count: int = 0
    total_energy: int = 0
    energy_count: int = 0
    total_mood: int = 0
    mood_count: int = 0
    total_productivity: float = 0.0
    productivity_count: int = 0

    def add(self, session: FocusSession) -> None:
        self.session_count += 1
        self.total_duration += session.actual_duration

        if session.rating is not None:
            self.total_rating += session.rating
            self.rating_count += 1
        if session.focus is not None:
            self.total_focus += session.focus
            self.focus_count += 1
        if session.energy is not None:
            self.total_energy += session.energy
            self.energy_count += 1
        if session.mood is not None:
            self.total_mood += session.mood
            self.mood_count += 1

        # Unscorable sessions (no rating) come back as 0 and are left out
        score = calculate_productivity_score(session)
        if score > 0:
            self.total_productivity += score
            self.productivity_count += 1

    @staticmethod
    def _mean(total: float, count: int) -> float:
        return total / count if count else 0.0

    @property
    def average_rating(self) -> float:
        return self._mean(self.total_rating, self.rating_count)

    @property
    def average_focus(self) -> float:
        return self._mean(self.total_focus, self.focus_count)

    @property
    def average_energy(self) -> float:
        return self._mean(self.total_energy, self.energy_count)

    @property
    def average_mood(self) -> float:
        return self._mean(self.total_mood, self.mood_count)

    @property
    def average_productivity(self) -> float:
        return self._mean(self.total_productivity, self.productivity_count)


def build_trends(
    sessions: Iterable[FocusSession],
    period: Union[TrendPeriod, str, None] = TrendPeriod.WEEKLY,
    date_range: Optional[DateRange] = None,
) -> ProductivityTrends:
    """
    Build productivity trend series for a list of sessions.

    Args:
        sessions: One user's sessions; only completed ones with an actual
            duration are counted
        period: daily, weekly or monthly; anything else means weekly
        date_range: Window to cover; defaults to the period's look-back
            window ending now

    Returns:
        ProductivityTrends with one chronologically ordered entry per
        period in the range, zero-filled where no session landed.
    """
    period = parse_period(period)
    if date_range is None:
        date_range = default_trend_range(period)

    # Seed every bucket before looking at sessions so empty periods survive
    buckets: Dict[datetime, PeriodBucket] = {
        start: PeriodBucket(period_start=start) for start in period_starts(date_range, period)
    }

    dropped = 0
    for session in sessions:
        if not session.is_completed:
            continue
        bucket = buckets.get(truncate(session.start_time, period))
        if bucket is None:
            dropped += 1
            continue
        bucket.add(session)

    if dropped:
        logger.debug(f"[TRENDS] Dropped {dropped} session(s) outside the {period.value} range")

    trends = ProductivityTrends(period=period)
    for bucket in sorted(buckets.values(), key=lambda b: b.period_start):
        trends.dates.append(format_period_label(bucket.period_start, period))
        trends.durations.append(bucket.total_duration)
        trends.ratings.append(bucket.average_rating)
        trends.focus.append(bucket.average_focus)
        trends.energy.append(bucket.average_energy)
        trends.mood.append(bucket.average_mood)
        trends.productivity.append(bucket.average_productivity)

    logger.debug(f"[TRENDS] Built {len(trends.dates)} {period.value} period(s)")

    return trends
