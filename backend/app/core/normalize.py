"""Normalizers for loosely typed session input.

The web form and older clients send strings, numbers, nulls and emoji for
the same fields. These helpers map that input onto the stored row schema.
"""

import logging
import math

from app.core.constants import PERFORMANCE_ALIASES
from app.core.time_utils import parse_session_date

logger = logging.getLogger(__name__)

PERFORMANCE_VALUES = ("NONE", "POOR", "AVERAGE", "EXCELLENT")

# Text columns that are stringified and trimmed on update
_TEXT_FIELDS = ("class_type", "instructor", "technique", "description", "style")


def normalize_performance(value) -> str:
    """Map tolerant performance input onto NONE/POOR/AVERAGE/EXCELLENT.

    Examples: 'great' -> 'EXCELLENT', 'ok' -> 'AVERAGE', None -> 'NONE'.
    """
    if not isinstance(value, str):
        return "NONE"
    s = value.strip().lower()
    if s.upper() in PERFORMANCE_VALUES:
        return s.upper()
    return PERFORMANCE_ALIASES.get(s, "NONE")


def parse_hours(value) -> float | None:
    """Parse an hours value; None when it is not a finite number."""
    if isinstance(value, bool):
        return None
    try:
        n = float(value)
    except (TypeError, ValueError):
        return None
    return n if math.isfinite(n) else None


def split_tags(value) -> list[str]:
    """'Guard, Passing,' -> ['Guard', 'Passing']"""
    if not value:
        return []
    return [s.strip() for s in str(value).split(",") if s.strip()]


def join_tags(tags) -> str:
    return ", ".join(str(t).strip() for t in tags if str(t).strip())


def build_update(data: dict) -> dict:
    """Build a partial column update from arbitrary client input.

    Only keys present in `data` are considered. Values that cannot be used
    are dropped (date) or nulled (hours) rather than rejected.
    """
    out: dict = {}

    if "date" in data:
        parsed = parse_session_date(data["date"])
        if parsed is not None:
            out["date"] = parsed
        else:
            logger.debug("Ignoring unparseable date %r", data["date"])

    for key in _TEXT_FIELDS:
        if key in data:
            val = data[key]
            if isinstance(val, (list, tuple)):
                out[key] = join_tags(val)
            else:
                out[key] = ("" if val is None else str(val)).strip()

    if "hours" in data:
        val = data["hours"]
        if val is None or (isinstance(val, str) and val.strip() == ""):
            out["hours"] = 0.0
        else:
            out["hours"] = parse_hours(val)

    for key in ("url", "performance_notes"):
        if key in data:
            txt = "" if data[key] is None else str(data[key]).strip()
            out[key] = txt or None

    if "performance" in data:
        out["performance"] = normalize_performance(data["performance"])

    return out
