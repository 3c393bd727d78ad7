from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.normalize import join_tags, normalize_performance, parse_hours
from app.core.time_utils import parse_session_date


class Performance(str, Enum):
    none = "NONE"
    poor = "POOR"
    average = "AVERAGE"
    excellent = "EXCELLENT"


# Defaults applied when a text field is missing or null
_TEXT_DEFAULTS = {
    "class_type": "Class",
    "instructor": "",
    "technique": "",
    "description": "",
    "style": "unknown",
}


class SessionCreate(BaseModel):
    """Schema for logging a new class or drilling session.

    Field names are accepted in camelCase (as the web form sends them) or
    snake_case. Loose input is normalized here; see app.core.normalize.
    """

    date: datetime
    class_type: str = Field("Class", alias="classType")
    instructor: str = ""
    technique: str = ""  # comma-separated tags
    description: str = ""
    hours: float = 0
    style: str = "unknown"  # gi | nogi
    url: Optional[str] = None
    performance: Performance = Performance.none
    performance_notes: Optional[str] = Field(None, alias="performanceNotes")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("date", mode="before")
    @classmethod
    def _date(cls, v):
        if v is None or str(v).strip() == "":
            raise ValueError("Date is required")
        parsed = parse_session_date(v)
        if parsed is None:
            raise ValueError("Invalid date")
        return parsed

    @field_validator(*_TEXT_DEFAULTS, mode="before")
    @classmethod
    def _text(cls, v, info):
        if v is None:
            return _TEXT_DEFAULTS[info.field_name]
        if isinstance(v, (list, tuple)):
            return join_tags(v)
        return str(v).strip()

    @field_validator("hours", mode="before")
    @classmethod
    def _hours(cls, v):
        if v is None or (isinstance(v, str) and v.strip() == ""):
            return 0
        n = parse_hours(v)
        if n is None:
            raise ValueError("Hours must be a number")
        if n < 0:
            raise ValueError("Hours must be >= 0")
        return n

    @field_validator("performance", mode="before")
    @classmethod
    def _performance(cls, v):
        return normalize_performance(v)

    @field_validator("url", "performance_notes", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if v is None:
            return None
        s = str(v).strip()
        return s or None


class SessionUpdate(BaseModel):
    """Partial update; every field optional and loosely typed.

    Values are normalized by app.core.normalize.build_update, which drops
    what it cannot use instead of rejecting the request.
    """

    date: Any = None
    class_type: Any = Field(None, alias="classType")
    instructor: Any = None
    technique: Any = None
    description: Any = None
    hours: Any = None
    style: Any = None
    url: Any = None
    performance: Any = None
    performance_notes: Any = Field(None, alias="performanceNotes")
    # Tolerate common extras a client might include
    id: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SessionRead(BaseModel):
    """Schema returned to the frontend when reading a session."""

    id: int
    date: datetime
    class_type: str
    instructor: str
    technique: str
    description: str
    hours: Optional[float] = None
    style: str
    url: Optional[str] = None
    performance: Performance
    performance_notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

