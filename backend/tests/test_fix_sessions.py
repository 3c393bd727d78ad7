from datetime import datetime
from types import SimpleNamespace

from scripts.fix_sessions import instructor_fixes, retype_fixes


def _row(id, date, **kw):
    base = {"instructor": "", "class_type": "", "style": "nogi", "hours": 1}
    base.update(kw)
    return SimpleNamespace(id=id, date=date, **base)


def test_instructor_fixes():
    rows = [
        _row(1, datetime(2025, 1, 4), instructor=" kieran "),
        _row(2, datetime(2025, 1, 4), instructor="Kieran OD"),
        _row(3, datetime(2025, 1, 4), instructor="Kieran Davern"),
    ]
    assert instructor_fixes(rows) == {1: "Kieran Davern"}


def test_retype_fixes_by_weekday():
    rows = [
        _row(1, datetime(2025, 1, 4)),                       # Saturday
        _row(2, datetime(2025, 1, 7), class_type="Regular Class"),  # Tuesday
        _row(3, datetime(2025, 1, 9), hours=2),              # Thursday, 2h
        _row(4, datetime(2025, 1, 9), style="gi"),           # gi
        _row(5, datetime(2025, 1, 9), class_type="Seminar"), # already typed
        _row(6, datetime(2025, 1, 6)),                       # Monday
    ]
    assert retype_fixes(rows) == {1: "Fundamentals", 2: "Advanced"}
