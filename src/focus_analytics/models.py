"""
Data models for the focus analytics engine.

This module defines the records the engine consumes and the small
accumulator it threads through an aggregation pass:
- FocusSession: one focus block with optional self-reported metrics
- LocationDetails: where a session took place
- DateRange: inclusive reporting window
- MetricCounter: running sums for one category value
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple


class SessionStatus(str, Enum):
    """Lifecycle status of a focus session."""

    PLANNED = "planned"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class LocationDetails:
    """Place a session was held at."""

    name: str
    address: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    type: str = ""  # coffee shop, library, etc.

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "address": self.address,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "type": self.type,
        }


@dataclass(frozen=True)
class FocusSession:
    """
    A single focus session as handed to the engine.

    Optional metrics are None when the user did not report them;
    None is never the same thing as zero.
    """

    session_id: str
    user_id: str
    start_time: datetime
    duration: int  # planned minutes
    status: SessionStatus = SessionStatus.PLANNED
    actual_duration: Optional[int] = None  # minutes, set once completed
    title: str = ""
    description: str = ""
    end_time: Optional[datetime] = None
    location: Optional[LocationDetails] = None
    tags: Tuple[str, ...] = ()
    notes: str = ""
    rating: Optional[int] = None  # 1-5
    focus: Optional[int] = None  # 1-10
    energy: Optional[int] = None  # 1-10
    mood: Optional[int] = None  # 1-10
    distractions: Optional[int] = None  # >= 0

    @property
    def is_completed(self) -> bool:
        """True when the session may contribute to analytics."""
        return self.status == SessionStatus.COMPLETED and self.actual_duration is not None

    @classmethod
    def from_dict(cls, data: dict) -> "FocusSession":
        """Build a session from plain data (ISO timestamps, nested location)."""

        def to_datetime(value):
            if value is None or isinstance(value, datetime):
                return value
            return datetime.fromisoformat(value)

        location = data.get("location")
        if isinstance(location, dict):
            location = LocationDetails(**location)

        return cls(
            session_id=str(data["session_id"]),
            user_id=str(data["user_id"]),
            start_time=to_datetime(data["start_time"]),
            duration=int(data["duration"]),
            status=SessionStatus(data.get("status", SessionStatus.PLANNED)),
            actual_duration=data.get("actual_duration"),
            title=data.get("title", ""),
            description=data.get("description", ""),
            end_time=to_datetime(data.get("end_time")),
            location=location,
            tags=tuple(data.get("tags") or ()),
            notes=data.get("notes", ""),
            rating=data.get("rating"),
            focus=data.get("focus"),
            energy=data.get("energy"),
            mood=data.get("mood"),
            distractions=data.get("distractions"),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "session_id": self.session_id,
            "user_id": self.user_id,
            "title": self.title,
            "description": self.description,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat() if self.end_time else None,
            "duration": self.duration,
            "actual_duration": self.actual_duration,
            "status": self.status.value,
            "location": self.location.to_dict() if self.location else None,
            "tags": list(self.tags),
            "notes": self.notes,
            "rating": self.rating,
            "focus": self.focus,
            "energy": self.energy,
            "mood": self.mood,
            "distractions": self.distractions,
        }


@dataclass(frozen=True)
class DateRange:
    """Inclusive reporting window."""

    start: datetime
    end: datetime


@dataclass
class MetricCounter:
    """Running totals for one category value (a weekday, a location, ...)."""

    count: int = 0
    total_score: float = 0.0
    total_duration: int = 0
    total_rating: int = 0
    total_focus: int = 0
    total_energy: int = 0
    total_mood: int = 0
    total_distractions: int = 0

    @property
    def average_score(self) -> float:
        if self.count == 0:
            return 0.0
        return self.total_score / self.count

    def add(self, session: FocusSession, score: float) -> None:
        """Accumulate one qualifying session."""
        self.count += 1
        self.total_score += score
        self.total_duration += session.actual_duration
        if session.rating is not None:
            self.total_rating += session.rating
        if session.focus is not None:
            self.total_focus += session.focus
        if session.energy is not None:
            self.total_energy += session.energy
        if session.mood is not None:
            self.total_mood += session.mood
        if session.distractions is not None:
            self.total_distractions += session.distractions
