import logging
import math
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.progress import annual_target, parse_cadence, parse_metric
from app.core.time_utils import now_local
from app.db import get_db
from app.models.goal import Goal
from app.schemas.goal import GoalMetric, GoalRead, GoalSettings, GoalUpsert


router = APIRouter(prefix="/goals", tags=["goals"])
logger = logging.getLogger(__name__)


def current_year() -> int:
    return now_local(settings.timezone).year


def to_settings(row: Goal) -> GoalSettings:
    """Stored row -> value object the progress engine consumes."""
    return GoalSettings(
        metric=row.metric,
        target=float(row.target),
        cadence=row.cadence,
        year=row.year,
    )


def load_goal(db: Session, year: int, metric: Optional[GoalMetric] = None) -> Optional[Goal]:
    """Goal for (year, metric); without a metric, the most recently saved one."""
    query = db.query(Goal).filter(Goal.year == year)
    if metric is not None:
        return query.filter(Goal.metric == metric.value).first()
    return query.order_by(Goal.updated_at.desc()).first()


def _read(year: int, metric: GoalMetric, row: Optional[Goal]) -> GoalRead:
    if row is None:
        return GoalRead(year=year, metric=metric)
    goal = to_settings(row)
    return GoalRead(
        year=row.year,
        metric=goal.metric,
        target=goal.target,
        cadence=goal.cadence,
        annual_target=annual_target(goal),
        updated_at=row.updated_at,
    )


@router.get("", response_model=GoalRead)
def get_goal(
    year: Optional[int] = Query(None),
    metric: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    yr = year if year is not None else current_year()
    m = parse_metric(metric)
    return _read(yr, m, load_goal(db, yr, m))


@router.put("", response_model=GoalRead)
def upsert_goal(payload: GoalUpsert, db: Session = Depends(get_db)):
    # Goals always apply to the current year, whatever the client sent
    yr = current_year()
    m = parse_metric(payload.metric)
    cadence = parse_cadence(payload.cadence)

    if not math.isfinite(payload.target) or payload.target <= 0:
        raise HTTPException(status_code=422, detail="target must be > 0")

    row = load_goal(db, yr, m)
    if not row:
        row = Goal(year=yr, metric=m.value)
        db.add(row)
    # Whole-row overwrite, last write wins
    row.target = payload.target
    row.cadence = cadence.value
    row.updated_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(row)

    logger.info("Saved %s goal for %s: %s %s", m.value, yr, payload.target, cadence.value)
    return _read(yr, m, row)
