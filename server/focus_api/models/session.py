"""Focus session data models."""
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, Literal

SessionStatusName = Literal["planned", "active", "completed", "cancelled"]


class LocationDetailsResponse(BaseModel):
    """Where a session took place."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    name: str
    address: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    type: str = ""


class FocusSessionResponse(BaseModel):
    """A focus session with its productivity score once completed."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    session_id: str = Field(alias="id")
    user_id: str = Field(alias="userId")
    title: str
    description: str = ""
    start_time: datetime = Field(alias="startTime")
    end_time: Optional[datetime] = Field(default=None, alias="endTime")
    duration: int
    actual_duration: Optional[int] = Field(default=None, alias="actualDuration")
    status: SessionStatusName
    location_details: Optional[LocationDetailsResponse] = Field(
        default=None, alias="locationDetails"
    )
    tags: list[str] = []
    notes: str = ""
    rating: Optional[int] = None
    focus: Optional[int] = None
    energy: Optional[int] = None
    mood: Optional[int] = None
    distractions: Optional[int] = None
    productivity_score: Optional[float] = Field(default=None, alias="productivityScore")


class SessionsListResponse(BaseModel):
    """Page of a user's sessions."""

    model_config = ConfigDict(populate_by_name=True)

    sessions: list[FocusSessionResponse]
    total: int
    limit: Optional[int] = None
    offset: Optional[int] = None
