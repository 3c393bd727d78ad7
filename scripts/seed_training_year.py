#!/usr/bin/env python3
"""
Seed a year of BJJ training into the training-log API.

Pattern per week (Mon–Sun):
  - Tue: Advanced (no-gi, 1h)
  - Thu: Advanced (no-gi, 1h)
  - Sat: Fundamentals, Open Mat (gi, 2h)
  - every other Sun: solo drilling (0.5h)

Sessions run from Jan 1 of the chosen year up to today (or Dec 31 for past
years), and a weekly goal is saved for the current year.

Usage examples:
  - Against a local dev server:
      python scripts/seed_training_year.py --base-url http://localhost:8000
  - Different goal:
      python scripts/seed_training_year.py --base-url http://localhost:8000 --goal 4 --cadence weekly
"""

from __future__ import annotations

import argparse
import datetime as dt
import sys
from typing import Iterator

import requests

TECHNIQUES = ["Guard", "Passing", "Escapes", "Submissions", "Wrestling", "Leg Locks", "Position"]
DRILLS = ["Guard retention drill", "Armbar drill", "Leg drag drill", "Mount escape drill"]


def send_json(base_url: str, method: str, path: str, payload: dict) -> dict:
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    r = requests.request(method, url, json=payload, timeout=15)
    if r.status_code >= 300:
        raise RuntimeError(f"{method} {path} -> HTTP {r.status_code}: {r.text}")
    return r.json()


def week_sessions(week_start: dt.date, week_no: int) -> Iterator[dict]:
    tech = TECHNIQUES[week_no % len(TECHNIQUES)]
    # Monday-based offsets
    plan = [
        (1, "Advanced", tech, 1.0, "nogi", ""),
        (3, "Advanced", tech, 1.0, "nogi", ""),
        (5, "Fundamentals, Open Mat", "Position", 2.0, "gi", ""),
    ]
    if week_no % 2 == 0:
        plan.append((6, "Drilling", "", 0.5, "nogi", DRILLS[week_no // 2 % len(DRILLS)]))

    for offset, class_type, technique, hours, style, description in plan:
        yield {
            "date": (week_start + dt.timedelta(days=offset)).isoformat(),
            "classType": class_type,
            "instructor": "Home" if class_type == "Drilling" else "Kieran Davern",
            "technique": technique,
            "description": description,
            "hours": hours,
            "style": style,
            "performance": "ok",
        }


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed a year of classes and a training goal")
    ap.add_argument("--base-url", required=True, help="API base URL (e.g., http://localhost:8000)")
    ap.add_argument("--year", type=int, default=dt.date.today().year, help="Year to fill (default: current)")
    ap.add_argument("--goal", type=float, default=3, help="Goal target per cadence period")
    ap.add_argument("--cadence", default="weekly", choices=["weekly", "monthly", "annually"])
    ap.add_argument("--metric", default="classes", choices=["classes", "hours"])
    args = ap.parse_args()

    today = dt.date.today()
    last_day = min(today, dt.date(args.year, 12, 31))
    first_day = dt.date(args.year, 1, 1)
    monday = first_day - dt.timedelta(days=first_day.weekday())

    created = 0
    week_no = 0
    while monday <= last_day:
        for payload in week_sessions(monday, week_no):
            day = dt.date.fromisoformat(payload["date"])
            if first_day <= day <= last_day:
                send_json(args.base_url, "POST", "classes/", payload)
                created += 1
        monday += dt.timedelta(weeks=1)
        week_no += 1

    goal = send_json(
        args.base_url,
        "PUT",
        "goals",
        {"metric": args.metric, "target": args.goal, "cadence": args.cadence},
    )

    print(f"Seed complete: {created} sessions, goal {goal['annual_target']} {goal['metric']}/year.")


if __name__ == "__main__":
    try:
        main()
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)
