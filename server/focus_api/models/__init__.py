"""Pydantic models for focus analytics API responses."""
from .session import FocusSessionResponse, LocationDetailsResponse, SessionsListResponse
from .stats import DateRangeResponse, ProductivityStatsResponse
from .trends import ProductivityTrendsResponse

__all__ = [
    "FocusSessionResponse",
    "LocationDetailsResponse",
    "SessionsListResponse",
    "DateRangeResponse",
    "ProductivityStatsResponse",
    "ProductivityTrendsResponse",
]
