import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.goals import load_goal, to_settings
from app.core import filtering
from app.core.config import settings
from app.core.progress import parse_metric
from app.core.time_utils import now_local
from app.db import get_db
from app.models.training_session import TrainingSession
from app.schemas.dashboard import DashboardRead
from app.schemas.session import SessionRead

router = APIRouter(prefix="/dashboard", tags=["dashboard"])
logger = logging.getLogger(__name__)


def _selected_year(raw: Optional[str], years: list[int], reference) -> Optional[int]:
    """None means "all years"."""
    if raw is None or raw.strip() == "":
        return filtering.default_year(years, reference)
    if raw.strip().lower() == "all":
        return None
    try:
        return int(raw)
    except ValueError:
        raise HTTPException(status_code=422, detail="year must be a number or 'all'") from None


@router.get("", response_model=DashboardRead)
def get_dashboard(
    year: Optional[str] = Query(None),
    month: list[int] = Query([]),
    q: str = Query(""),
    metric: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    Totals, breakdowns and the goal badge for the filtered session list.

      GET /dashboard?year=2025&month=3&month=4&q=guard&metric=hours
    """
    if any(m < 1 or m > 12 for m in month):
        raise HTTPException(status_code=422, detail="month must be 1-12")

    ref = now_local(settings.timezone)
    sessions = db.query(TrainingSession).order_by(TrainingSession.date.desc()).all()

    years = filtering.available_years(sessions, ref)
    selected = _selected_year(year, years, ref)
    months = sorted(set(month))

    filtered = filtering.filter_sessions(sessions, ref, year=selected, months=months, query=q)
    hours = filtering.total_hours(filtered)
    span = filtering.years_count(filtered, ref) if selected is None else None

    # Goal progress is always current-year and ignores the filters
    goal_metric = metric or settings.default_goal_metric
    row = load_goal(db, ref.year, parse_metric(goal_metric) if goal_metric else None)
    detail = None
    if row is not None and not (span and span > 1):
        detail = filtering.goal_detail(to_settings(row), sessions, ref)
        logger.debug("Goal badge %s: %s", row.metric, detail["status"])

    return DashboardRead(
        year=selected if selected is not None else "all",
        months=months,
        query=q,
        years=years,
        available_months=filtering.available_months(sessions, selected, ref),
        month_summary=filtering.month_summary(months),
        total_classes=len(filtered),
        total_hours=hours,
        total_hours_label=filtering.format_hours(hours),
        years_count=span,
        by_month=filtering.monthly_breakdown(filtered, selected, ref),
        by_class_type=filtering.class_type_breakdown(filtered),
        goal=detail["status"] if detail else None,
        goal_detail=detail,
        sessions=[SessionRead.model_validate(s) for s in filtered],
    )
