#!/usr/bin/env python3
"""
Clean up logged sessions in place.

  - Instructor aliases: "kieran", " Kieran " -> "Kieran Davern"
    (exact match after trim/lowercase, so "Kieran OD" is left alone).
  - Untyped ~1h no-gi sessions (class_type "" or "Regular Class") are
    retyped by weekday: Saturday -> Fundamentals, Tue/Thu -> Advanced.

Usage:
  python backend/scripts/fix_sessions.py --dry-run
  python backend/scripts/fix_sessions.py
"""

from __future__ import annotations

import argparse
import logging

from app.core.constants import INSTRUCTOR_ALIASES
from app.core.progress import finite_number
from app.db import SessionLocal
from app.models.training_session import TrainingSession

logger = logging.getLogger(__name__)

UNTYPED = ("", "Regular Class")
# Monday = 0 ... Sunday = 6
WEEKDAY_TYPES = {5: "Fundamentals", 1: "Advanced", 3: "Advanced"}


def instructor_fixes(rows) -> dict[int, str]:
    """id -> canonical instructor name for rows using a known alias."""
    fixes = {}
    for r in rows:
        canonical = INSTRUCTOR_ALIASES.get((r.instructor or "").strip().lower())
        if canonical and r.instructor != canonical:
            fixes[r.id] = canonical
    return fixes


def retype_fixes(rows) -> dict[int, str]:
    """id -> class_type for untyped one-hour no-gi sessions."""
    fixes = {}
    for r in rows:
        if r.style != "nogi" or (r.class_type or "") not in UNTYPED:
            continue
        if not 0.95 <= finite_number(r.hours) <= 1.05:
            continue
        new_type = WEEKDAY_TYPES.get(r.date.weekday())
        if new_type:
            fixes[r.id] = new_type
    return fixes


def main() -> None:
    ap = argparse.ArgumentParser(description="Normalize instructors and retype untyped sessions")
    ap.add_argument("--dry-run", action="store_true", help="Report changes without writing")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    db = SessionLocal()
    try:
        rows = db.query(TrainingSession).all()
        instructors = instructor_fixes(rows)
        types = retype_fixes(rows)
        logger.info("Instructor fixes: %s, retype fixes: %s", len(instructors), len(types))

        if args.dry_run:
            logger.info("DRY RUN, no writes performed")
            return

        by_id = {r.id: r for r in rows}
        for row_id, name in instructors.items():
            by_id[row_id].instructor = name
        for row_id, class_type in types.items():
            by_id[row_id].class_type = class_type
        db.commit()
        logger.info("Updates applied")
    finally:
        db.close()


if __name__ == "__main__":
    main()
