from datetime import date


def test_goal_unset_returns_nulls(client):
    r = client.get("/goals", params={"metric": "hours"})
    assert r.status_code == 200
    data = r.json()
    assert data["year"] == date.today().year
    assert data["metric"] == "hours"
    assert data["target"] is None
    assert data["annual_target"] is None


def test_save_goal_forces_current_year(client):
    r = client.put(
        "/goals",
        json={"metric": "classes", "target": 3, "cadence": "weekly", "year": 1999},
    )
    assert r.status_code == 200, r.text
    saved = r.json()
    assert saved["year"] == date.today().year
    assert saved["annual_target"] == 156

    got = client.get("/goals", params={"metric": "classes"}).json()
    assert got["target"] == 3
    assert got["cadence"] == "weekly"

    # other metric untouched
    assert client.get("/goals", params={"metric": "hours"}).json()["target"] is None


def test_save_goal_overwrites(client):
    client.put("/goals", json={"metric": "hours", "target": 10, "cadence": "monthly"})
    r = client.put("/goals", json={"metric": "hours", "target": 150, "cadence": "annually"})
    assert r.json()["annual_target"] == 150
    got = client.get("/goals", params={"metric": "hours"}).json()
    assert got["target"] == 150
    assert got["cadence"] == "annually"


def test_unknown_cadence_and_metric_fall_back(client):
    r = client.put("/goals", json={"metric": "minutes", "target": 2, "cadence": "fortnightly"})
    assert r.status_code == 200
    data = r.json()
    assert data["metric"] == "classes"
    assert data["cadence"] == "weekly"
    assert data["annual_target"] == 104


def test_rejects_non_positive_target(client):
    for target in (0, -3):
        r = client.put("/goals", json={"metric": "classes", "target": target, "cadence": "weekly"})
        assert r.status_code == 422
    r = client.put("/goals", json={"metric": "classes", "target": "lots"})
    assert r.status_code == 422
