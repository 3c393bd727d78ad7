"""Goal progress engine.

Pure functions that turn logged sessions plus a goal into a year-end
projection and a pacing label. Nothing here touches the database or
settings: callers load the goal and sessions and pass them in, along with
the reference instant ("now") when they need a specific timezone.

Bad input never raises. Unparseable dates contribute nothing, non-finite
hours count as 0 and an unknown cadence is treated as weekly.
"""

import math
from collections.abc import Iterable, Mapping
from datetime import datetime

from app.core.constants import (
    MIN_ELAPSED_FRACTION,
    MONTHS_PER_YEAR,
    PACE_TOLERANCE,
    WEEKS_PER_YEAR,
)
from app.core.time_utils import elapsed_year_fraction, parse_session_date, to_local_datetime
from app.schemas.goal import GoalCadence, GoalMetric, ProgressStatus


def field_of(record, name: str):
    # Sessions arrive as ORM rows, schemas or plain dicts
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def parse_metric(value) -> GoalMetric:
    """'hours' selects hours, anything else counts classes."""
    if isinstance(value, GoalMetric):
        return value
    return GoalMetric.hours if value == GoalMetric.hours.value else GoalMetric.classes


def parse_cadence(value) -> GoalCadence:
    """Unknown or missing cadence falls back to weekly."""
    if isinstance(value, GoalCadence):
        return value
    try:
        return GoalCadence(value)
    except ValueError:
        return GoalCadence.weekly


def finite_number(value) -> float:
    """Hours or target as a float; missing, unparseable or non-finite -> 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        n = float(value)
    except (TypeError, ValueError):
        return 0.0
    return n if math.isfinite(n) else 0.0


def local_session_date(record, reference: datetime | None = None) -> datetime | None:
    """Session date as local wall time, or None if it is missing/invalid.

    Aware dates are converted into the reference's timezone (system tz when
    the reference is naive or absent) before the calendar fields are read.
    """
    dt = parse_session_date(field_of(record, "date"))
    if dt is None:
        return None
    tz = reference.tzinfo if reference is not None else None
    return to_local_datetime(dt, tz)


def annual_target(goal) -> float:
    """Normalize a goal's per-cadence target to a full-year figure."""
    cadence = parse_cadence(field_of(goal, "cadence"))
    target = finite_number(field_of(goal, "target"))
    if cadence == GoalCadence.monthly:
        return target * MONTHS_PER_YEAR
    if cadence == GoalCadence.annually:
        return target
    return target * WEEKS_PER_YEAR


def year_to_date(
    sessions: Iterable,
    metric,
    reference_date: datetime | None = None,
) -> float:
    """Count or sum of hours for sessions in the reference date's calendar year."""
    ref = reference_date or datetime.now()
    hours = parse_metric(metric) == GoalMetric.hours

    total = 0.0
    for s in sessions:
        local = local_session_date(s, ref)
        if local is None or local.year != ref.year:
            continue
        total += finite_number(field_of(s, "hours")) if hours else 1
    return total if hours else int(total)


def project_annual(actual: float, reference_date: datetime | None = None) -> float:
    """Linear end-of-year projection of year-to-date progress.

    The elapsed fraction is floored at 1/365 so Jan 1st stays finite.
    With actual == 0 the projection is exactly 0.
    """
    ref = reference_date or datetime.now()
    fraction = max(elapsed_year_fraction(ref), MIN_ELAPSED_FRACTION)
    return actual / fraction


def expected_to_date(annual: float, reference_date: datetime | None = None) -> float:
    """Where an even pace toward `annual` would be by the reference date."""
    ref = reference_date or datetime.now()
    return annual * min(1.0, max(0.0, elapsed_year_fraction(ref)))


def classify(
    actual: float,
    annual_target: float,
    reference_date: datetime | None = None,
) -> ProgressStatus:
    # No guard for target <= 0; goal saves reject non-positive targets.
    projected = project_annual(actual, reference_date)
    if projected >= annual_target * (1 + PACE_TOLERANCE):
        return ProgressStatus.ahead
    if projected <= annual_target * (1 - PACE_TOLERANCE):
        return ProgressStatus.behind
    return ProgressStatus.on_track
