from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.config import settings
from app.core.time_utils import now_local


class GoalMetric(str, Enum):
    classes = "classes"
    hours = "hours"


class GoalCadence(str, Enum):
    weekly = "weekly"
    monthly = "monthly"
    annually = "annually"


class ProgressStatus(str, Enum):
    ahead = "Ahead of goal"
    on_track = "On track"
    behind = "Behind goal"


class GoalSettings(BaseModel):
    """A saved goal as handed to the progress engine."""

    metric: GoalMetric = GoalMetric.classes
    target: float
    cadence: GoalCadence = GoalCadence.weekly
    # Goals only apply to the year they were saved in
    year: int = Field(default_factory=lambda: now_local(settings.timezone).year)

    model_config = ConfigDict(from_attributes=True)

    @field_validator("metric", mode="before")
    @classmethod
    def _metric(cls, v):
        return GoalMetric.hours if v == "hours" else GoalMetric.classes

    @field_validator("cadence", mode="before")
    @classmethod
    def _cadence(cls, v):
        return v if v in [c.value for c in GoalCadence] else GoalCadence.weekly


class GoalUpsert(BaseModel):
    metric: Optional[str] = None
    target: float
    cadence: Optional[str] = None
    # Accepted for compatibility, always replaced by the current year
    year: Optional[int] = None

    model_config = ConfigDict(extra="ignore")


class GoalRead(BaseModel):
    year: int
    metric: GoalMetric
    target: Optional[float] = None
    cadence: Optional[GoalCadence] = None
    annual_target: Optional[float] = None
    updated_at: Optional[datetime] = None
