"""Productivity trend API routes."""
from typing import Optional

from fastapi import APIRouter, Query

from focus_analytics import build_trends, default_trend_range, parse_period

from ..models.trends import ProductivityTrendsResponse
from .sessions import fetch_user_sessions, parse_date_range

router = APIRouter(prefix="/api/focus", tags=["Productivity Trends"])


@router.get("/trends", response_model=ProductivityTrendsResponse, response_model_by_alias=True)
async def get_productivity_trends(
    user_id: str = Query(..., min_length=1, description="Owner of the sessions"),
    period: Optional[str] = Query(default="weekly", description="daily, weekly or monthly"),
    start_date: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    end_date: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
):
    """
    Get productivity trends for a user.

    Unknown periods fall back to weekly. Without dates the window is the
    last 30 days (daily), 12 weeks (weekly) or 12 months (monthly).
    """
    trend_period = parse_period(period)
    date_range = parse_date_range(start_date, end_date) or default_trend_range(trend_period)
    sessions = fetch_user_sessions(user_id, date_range)

    trends = build_trends(sessions, trend_period, date_range)

    return ProductivityTrendsResponse(
        **trends.to_dict(),
        average_productivity=trends.average_productivity(),
        is_improving=trends.is_improving(),
    )
