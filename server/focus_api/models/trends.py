"""Productivity trend models."""
from pydantic import BaseModel, Field, ConfigDict
from typing import Literal

PeriodName = Literal["daily", "weekly", "monthly"]


class ProductivityTrendsResponse(BaseModel):
    """Per-period productivity series, oldest period first."""

    model_config = ConfigDict(populate_by_name=True)

    period: PeriodName
    dates: list[str]
    durations: list[int]
    ratings: list[float]
    focus: list[float]
    energy: list[float]
    mood: list[float]
    productivity: list[float]
    average_productivity: float = Field(alias="averageProductivity")
    is_improving: bool = Field(alias="isImproving")
