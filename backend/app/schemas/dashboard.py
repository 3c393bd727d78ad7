from typing import Optional

from pydantic import BaseModel

from app.schemas.goal import ProgressStatus
from app.schemas.session import SessionRead


class MonthBucket(BaseModel):
    month: int  # 1-12
    label: str
    classes: int
    hours: float


class GoalDetail(BaseModel):
    """Numbers behind the goal badge tooltip."""

    status: ProgressStatus
    unit: str
    target: float  # annualized
    ytd: float
    projected: float
    expected: float
    needed: float
    message: str


class DashboardRead(BaseModel):
    # Applied filters; year is "all" or a calendar year
    year: int | str
    months: list[int]
    query: str

    years: list[int]
    available_months: list[int]
    month_summary: str

    total_classes: int
    total_hours: float
    total_hours_label: str
    years_count: Optional[int] = None

    by_month: list[MonthBucket]
    by_class_type: dict[str, int]

    # Hidden when no goal is saved or the view spans several years
    goal: Optional[ProgressStatus] = None
    goal_detail: Optional[GoalDetail] = None

    sessions: list[SessionRead]
