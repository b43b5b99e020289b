"""Productivity statistics API routes."""
from typing import Optional

from fastapi import APIRouter, Query

from focus_analytics import aggregate_stats

from ..config import get_settings
from ..models.stats import DateRangeResponse, ProductivityStatsResponse
from .sessions import fetch_user_sessions, parse_date_range

router = APIRouter(prefix="/api/focus", tags=["Productivity Stats"])


@router.get("/stats", response_model=ProductivityStatsResponse, response_model_by_alias=True)
async def get_productivity_stats(
    user_id: str = Query(..., min_length=1, description="Owner of the sessions"),
    start_date: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    end_date: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
):
    """
    Get productivity statistics for a user.

    Breaks completed sessions down by weekday, time of day, location and
    location type. Defaults to the last 30 days when no dates are given.
    """
    date_range = parse_date_range(start_date, end_date, get_settings().default_stats_days)
    sessions = fetch_user_sessions(user_id, date_range)

    stats = aggregate_stats(sessions, date_range).to_dict()
    stats["date_range"] = DateRangeResponse(start_date=date_range.start, end_date=date_range.end)

    return ProductivityStatsResponse(**stats)
