"""Focus session API routes."""
import logging
import sqlite3
from datetime import datetime, timedelta
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from focus_analytics import (
    DateRange,
    FocusSession,
    LocationDetails,
    SessionStatus,
    calculate_productivity_score,
)

from ..models.session import FocusSessionResponse, LocationDetailsResponse, SessionsListResponse
from ..database import db_manager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/focus", tags=["Focus Sessions"])

DATE_FORMAT = "%Y-%m-%d"


def _to_optional_int(val) -> Optional[int]:
    """Convert a TEXT column to int, keeping blanks as None (handles '45.0')."""
    if val is None or str(val).strip() in ("", "None", "null"):
        return None
    return int(float(val))


def _to_optional_datetime(val) -> Optional[datetime]:
    if not val:
        return None
    return datetime.fromisoformat(val)


def _row_to_session(row) -> FocusSession:
    """Convert SQLite row to a FocusSession for the analytics engine."""
    location = None
    if row["location_name"]:
        location = LocationDetails(
            name=row["location_name"],
            address=row["location_address"] or "",
            type=row["location_type"] or "",
        )

    tags = tuple(tag.strip() for tag in (row["tags"] or "").split(",") if tag.strip())

    return FocusSession(
        session_id=row["session_id"],
        user_id=row["user_id"],
        title=row["title"] or "",
        description=row["description"] or "",
        start_time=datetime.fromisoformat(row["start_time"]),
        end_time=_to_optional_datetime(row["end_time"]),
        duration=_to_optional_int(row["duration"]) or 0,
        actual_duration=_to_optional_int(row["actual_duration"]),
        status=SessionStatus(row["status"]),
        location=location,
        tags=tags,
        notes=row["notes"] or "",
        rating=_to_optional_int(row["rating"]),
        focus=_to_optional_int(row["focus"]),
        energy=_to_optional_int(row["energy"]),
        mood=_to_optional_int(row["mood"]),
        distractions=_to_optional_int(row["distractions"]),
    )


def _session_to_response(session: FocusSession) -> FocusSessionResponse:
    """Convert a FocusSession to its API model, scoring completed sessions."""
    score = None
    if session.status == SessionStatus.COMPLETED:
        score = calculate_productivity_score(session)

    location = None
    if session.location is not None:
        location = LocationDetailsResponse.model_validate(session.location)

    return FocusSessionResponse(
        session_id=session.session_id,
        user_id=session.user_id,
        title=session.title,
        description=session.description,
        start_time=session.start_time,
        end_time=session.end_time,
        duration=session.duration,
        actual_duration=session.actual_duration,
        status=session.status.value,
        location_details=location,
        tags=list(session.tags),
        notes=session.notes,
        rating=session.rating,
        focus=session.focus,
        energy=session.energy,
        mood=session.mood,
        distractions=session.distractions,
        productivity_score=score,
    )


def parse_date_range(
    start_date: Optional[str],
    end_date: Optional[str],
    default_days: Optional[int] = None,
) -> Optional[DateRange]:
    """
    Parse YYYY-MM-DD query dates into an inclusive DateRange.

    The end date is extended to 23:59:59 so the whole day counts. When
    either date is missing the last ``default_days`` days are used, or
    no range at all if ``default_days`` is None.
    """
    if not start_date or not end_date:
        if default_days is None:
            return None
        end = datetime.now()
        return DateRange(start=end - timedelta(days=default_days), end=end)

    try:
        start = datetime.strptime(start_date, DATE_FORMAT)
        end = datetime.strptime(end_date, DATE_FORMAT)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid date '{start_date}' / '{end_date}'. Use YYYY-MM-DD.",
        )

    if start > end:
        raise HTTPException(status_code=400, detail="start_date must not be after end_date")

    end = end + timedelta(days=1) - timedelta(seconds=1)
    return DateRange(start=start, end=end)


def fetch_user_sessions(
    user_id: str,
    date_range: Optional[DateRange] = None,
    limit: Optional[int] = None,
    offset: int = 0,
) -> list[FocusSession]:
    """Load a user's active sessions, newest first, optionally within a date range."""
    query = "SELECT * FROM focus_sessions WHERE user_id = ? AND active = '1'"
    params: list = [user_id]

    if date_range is not None:
        query += " AND start_time >= ? AND start_time <= ?"
        params += [
            date_range.start.isoformat(timespec="seconds"),
            date_range.end.isoformat(timespec="seconds"),
        ]

    query += " ORDER BY start_time DESC"
    if limit is not None:
        query += " LIMIT ? OFFSET ?"
        params += [limit, offset]

    try:
        with db_manager.get_sessions_conn() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            rows = cursor.fetchall()
    except sqlite3.Error as e:
        logger.error(f"[DB] Failed to load sessions for {user_id}: {e}")
        raise HTTPException(status_code=503, detail="Session store unavailable")

    logger.debug(f"[DB] Loaded {len(rows)} session(s) for {user_id}")
    return [_row_to_session(row) for row in rows]


@router.get("/sessions", response_model=SessionsListResponse)
async def get_user_sessions(
    user_id: str = Query(..., min_length=1, description="Owner of the sessions"),
    start_date: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    end_date: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
):
    """
    List a user's sessions, newest first.

    With a date range every session in the range is returned and
    limit/offset come back as null; without one the list is paginated.
    """
    date_range = parse_date_range(start_date, end_date)
    if date_range is not None:
        sessions = fetch_user_sessions(user_id, date_range)
        limit = offset = None
    else:
        sessions = fetch_user_sessions(user_id, limit=limit, offset=offset)

    responses = [_session_to_response(session) for session in sessions]
    return SessionsListResponse(
        sessions=responses,
        total=len(responses),
        limit=limit,
        offset=offset,
    )
