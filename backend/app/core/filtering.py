"""Dashboard filters and aggregates over an in-memory list of sessions.

All year/month values are local calendar values (see
progress.local_session_date). Months are 1-12.
"""

import math
from collections import Counter
from datetime import datetime

from app.core.constants import MONTH_LABELS
from app.core.normalize import split_tags
from app.core.progress import (
    annual_target,
    classify,
    expected_to_date,
    field_of,
    finite_number,
    local_session_date,
    parse_metric,
    project_annual,
    year_to_date,
)


def available_years(sessions, reference: datetime) -> list[int]:
    years = set()
    for s in sessions:
        local = local_session_date(s, reference)
        if local is not None:
            years.add(local.year)
    return sorted(years)


def default_year(years: list[int], reference: datetime) -> int:
    """Current year if it has data, else the latest year that does."""
    if reference.year in years or not years:
        return reference.year
    return years[-1]


def available_months(sessions, year: int | None, reference: datetime) -> list[int]:
    if year is None:
        return []
    months = set()
    for s in sessions:
        local = local_session_date(s, reference)
        if local is not None and local.year == year:
            months.add(local.month)
    return sorted(months)


def filter_sessions(
    sessions,
    reference: datetime,
    year: int | None = None,
    months: list[int] | None = None,
    query: str = "",
) -> list:
    """Apply the dashboard filters.

    year=None means all years; an empty `months` means all months; `query`
    is matched case-insensitively against description and technique.
    """
    q = (query or "").lower()
    out = []
    for s in sessions:
        if year is not None or months:
            local = local_session_date(s, reference)
            if local is None:
                continue
            if year is not None and local.year != year:
                continue
            if months and local.month not in months:
                continue
        if q:
            desc = str(field_of(s, "description") or "").lower()
            tech = str(field_of(s, "technique") or "").lower()
            if q not in desc and q not in tech:
                continue
        out.append(s)
    return out


def month_summary(months: list[int]) -> str:
    labels = [MONTH_LABELS[m - 1] for m in sorted(months)]
    if not labels:
        return "All months"
    if len(labels) == 1:
        return labels[0]
    if len(labels) == 2:
        return f"{labels[0]}, {labels[1]}"
    return f"{labels[0]}, {labels[1]} + {len(labels) - 2}"


def total_hours(sessions) -> float:
    return sum(finite_number(field_of(s, "hours")) for s in sessions)


def years_count(sessions, reference: datetime) -> int:
    return len(available_years(sessions, reference))


def format_hours(n: float) -> str:
    """12.5 -> '12.50', 3.0 -> '3'"""
    s = f"{n:.2f}"
    return s[:-3] if s.endswith(".00") else s


def monthly_breakdown(sessions, year: int | None, reference: datetime) -> list[dict]:
    """Count and hours per calendar month; year=None folds all years together."""
    buckets = [
        {"month": i + 1, "label": label, "classes": 0, "hours": 0.0}
        for i, label in enumerate(MONTH_LABELS)
    ]
    for s in sessions:
        local = local_session_date(s, reference)
        if local is None or (year is not None and local.year != year):
            continue
        b = buckets[local.month - 1]
        b["classes"] += 1
        b["hours"] += finite_number(field_of(s, "hours"))
    return buckets


def class_type_breakdown(sessions) -> dict[str, int]:
    """Count sessions per class type label ('Fundamentals, Open Mat' counts for both)."""
    counts: Counter = Counter()
    for s in sessions:
        labels = split_tags(field_of(s, "class_type")) or ["Class"]
        counts.update(labels)
    return dict(sorted(counts.items()))


def goal_detail(goal, sessions, reference: datetime) -> dict:
    """Badge and tooltip numbers for a goal, always against the current year."""
    metric = parse_metric(field_of(goal, "metric"))
    annual = annual_target(goal)
    ytd = year_to_date(sessions, metric, reference)
    projected = project_annual(ytd, reference)
    needed = max(0.0, annual - ytd)
    shown_ytd = format_hours(ytd) if isinstance(ytd, float) else ytd
    message = (
        f"Need {math.ceil(needed)} more {metric.value} to reach "
        f"{format_hours(annual)} this year "
        f"(YTD {shown_ytd}, proj {round(projected)})."
    )
    return {
        "status": classify(ytd, annual, reference),
        "unit": metric.value,
        "target": annual,
        "ytd": ytd,
        "projected": projected,
        "expected": expected_to_date(annual, reference),
        "needed": needed,
        "message": message,
    }
