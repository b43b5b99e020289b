"""API route modules."""
from .sessions import router as sessions_router
from .stats import router as stats_router
from .trends import router as trends_router

__all__ = [
    "sessions_router",
    "stats_router",
    "trends_router",
]
