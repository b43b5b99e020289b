"""Productivity statistics models."""
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class DateRangeResponse(BaseModel):
    """Inclusive window a statistic covers."""

    model_config = ConfigDict(populate_by_name=True)

    start_date: datetime = Field(alias="startDate")
    end_date: datetime = Field(alias="endDate")


class ProductivityStatsResponse(BaseModel):
    """Productivity analytics for one user over a date range."""

    model_config = ConfigDict(populate_by_name=True)

    total_sessions: int = Field(alias="totalSessions")
    completed_sessions: int = Field(alias="completedSessions")
    cancelled_sessions: int = Field(alias="cancelledSessions")
    total_duration: int = Field(alias="totalDuration")
    average_duration: float = Field(alias="averageDuration")

    average_rating: float = Field(alias="averageRating")
    average_focus: float = Field(alias="averageFocus")
    average_energy: float = Field(alias="averageEnergy")
    average_mood: float = Field(alias="averageMood")
    average_distractions: float = Field(alias="averageDistractions")

    productivity_by_day: dict[str, float] = Field(alias="productivityByDay")
    most_productive_day: Optional[str] = Field(default=None, alias="mostProductiveDay")

    productivity_by_time: dict[str, float] = Field(alias="productivityByTime")
    most_productive_time: Optional[str] = Field(default=None, alias="mostProductiveTime")

    productivity_by_location: dict[str, float] = Field(alias="productivityByLocation")
    most_productive_location: Optional[str] = Field(
        default=None, alias="mostProductiveLocation"
    )

    productivity_by_location_type: dict[str, float] = Field(
        alias="productivityByLocationType"
    )
    most_productive_location_type: Optional[str] = Field(
        default=None, alias="mostProductiveLocationType"
    )

    most_used_location: Optional[str] = Field(default=None, alias="mostUsedLocation")

    date_range: DateRangeResponse = Field(alias="dateRange")
