from datetime import date, datetime

import pytest
from fastapi import HTTPException

from app.api.dashboard import _selected_year
from app.core.config import settings

LABELS = {"Ahead of goal", "On track", "Behind goal"}


def _log(client, day: str, **extra):
    r = client.post("/classes/", json={"date": day, **extra})
    assert r.status_code == 201, r.text
    return r.json()


def _seed_two_years(client):
    year = date.today().year
    _log(client, f"{year}-01-09", technique="Guard", hours=1, classType="Fundamentals")
    _log(client, f"{year}-03-12", technique="Passing", hours=1.5, classType="Advanced")
    _log(client, f"{year}-03-20", classType="Drilling", description="Guard retention drill", hours=0.5)
    _log(client, f"{year - 1}-11-02", technique="Escapes", hours=2, classType="Fundamentals, Open Mat")
    _log(client, f"{year - 1}-12-14", technique="Guard", hours=1, classType="Advanced")
    return year


def test_dashboard_defaults_to_current_year(client):
    year = _seed_two_years(client)
    data = client.get("/dashboard").json()

    assert data["year"] == year
    assert data["years"] == [year - 1, year]
    assert data["available_months"] == [1, 3]
    assert data["month_summary"] == "All months"
    assert data["total_classes"] == 3
    assert data["total_hours"] == 3
    assert data["total_hours_label"] == "3"
    assert data["years_count"] is None
    assert data["by_month"][2] == {"month": 3, "label": "Mar", "classes": 2, "hours": 2.0}
    assert data["by_class_type"] == {"Advanced": 1, "Drilling": 1, "Fundamentals": 1}
    # no goal saved
    assert data["goal"] is None
    assert data["goal_detail"] is None


def test_dashboard_filters(client):
    year = _seed_two_years(client)

    data = client.get("/dashboard", params={"year": year, "month": [3]}).json()
    assert data["total_classes"] == 2
    assert data["month_summary"] == "Mar"

    data = client.get("/dashboard", params={"year": "all", "q": "GUARD"}).json()
    assert data["total_classes"] == 3
    assert data["years_count"] == 2
    assert data["available_months"] == []

    data = client.get("/dashboard", params={"year": year - 1, "month": [11, 12]}).json()
    assert data["total_classes"] == 2
    assert data["total_hours_label"] == "3"
    assert data["month_summary"] == "Nov, Dec"


def test_dashboard_goal_badge(client):
    year = _seed_two_years(client)
    client.put("/goals", json={"metric": "classes", "target": 3, "cadence": "weekly"})

    # Filters do not change the goal numbers
    data = client.get("/dashboard", params={"year": year - 1, "metric": "classes"}).json()
    assert data["goal"] in LABELS
    detail = data["goal_detail"]
    assert detail["unit"] == "classes"
    assert detail["target"] == 156
    assert detail["ytd"] == 3
    assert detail["needed"] == 153
    assert detail["message"].startswith("Need 153 more classes to reach 156 this year (YTD 3, proj ")

    # Badge hidden when the view spans several years
    data = client.get("/dashboard", params={"year": "all"}).json()
    assert data["goal"] is None


def test_dashboard_uses_latest_goal_without_metric(client):
    _seed_two_years(client)
    client.put("/goals", json={"metric": "hours", "target": 100, "cadence": "annually"})
    detail = client.get("/dashboard").json()["goal_detail"]
    assert detail["unit"] == "hours"
    assert detail["ytd"] == 3


def test_dashboard_badge_follows_latest_saved_goal(client):
    _seed_two_years(client)
    client.put("/goals", json={"metric": "hours", "target": 100, "cadence": "annually"})
    client.put("/goals", json={"metric": "classes", "target": 3, "cadence": "weekly"})
    assert client.get("/dashboard").json()["goal_detail"]["unit"] == "classes"

    client.put("/goals", json={"metric": "hours", "target": 120, "cadence": "annually"})
    detail = client.get("/dashboard").json()["goal_detail"]
    assert detail["unit"] == "hours"
    assert detail["target"] == 120


def test_dashboard_default_goal_metric_setting(client, monkeypatch):
    _seed_two_years(client)
    client.put("/goals", json={"metric": "hours", "target": 100, "cadence": "annually"})
    client.put("/goals", json={"metric": "classes", "target": 3, "cadence": "weekly"})

    monkeypatch.setattr(settings, "default_goal_metric", "hours")
    assert client.get("/dashboard").json()["goal_detail"]["unit"] == "hours"
    # An explicit metric still wins over the setting
    detail = client.get("/dashboard", params={"metric": "classes"}).json()["goal_detail"]
    assert detail["unit"] == "classes"


def test_dashboard_rejects_bad_filters(client):
    assert client.get("/dashboard", params={"year": "last"}).status_code == 422
    assert client.get("/dashboard", params={"month": [13]}).status_code == 422


def test_dashboard_empty(client):
    data = client.get("/dashboard").json()
    assert data["year"] == date.today().year
    assert data["years"] == []
    assert data["total_classes"] == 0
    assert data["sessions"] == []


def test_bad_year_error_is_not_chained():
    with pytest.raises(HTTPException) as exc_info:
        _selected_year("last", [], datetime(2025, 6, 1))
    assert exc_info.value.status_code == 422
    assert exc_info.value.__cause__ is None
    assert exc_info.value.__suppress_context__
