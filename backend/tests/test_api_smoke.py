from datetime import date


def test_root_ok(client):
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert "message" in data


def test_create_and_list_session(client):
    payload = {
        "date": "2025-03-04T19:30:00",
        "classType": ["Fundamentals", "Open Mat"],
        "instructor": "Kieran Davern",
        "technique": "Guard, Passing",
        "description": "Knee cut entries",
        "hours": "1.5",
        "style": "gi",
        "performance": "💪",
        "performanceNotes": "  ",
    }
    cr = client.post("/classes/", json=payload)
    assert cr.status_code == 201, cr.text
    row = cr.json()
    assert row["class_type"] == "Fundamentals, Open Mat"
    assert row["hours"] == 1.5
    assert row["performance"] == "EXCELLENT"
    assert row["performance_notes"] is None
    assert row["url"] is None

    lr = client.get("/classes/", params={"start_date": "2025-03-01", "end_date": "2025-03-04"})
    assert lr.status_code == 200
    arr = lr.json()
    assert [r["id"] for r in arr] == [row["id"]]

    lr = client.get("/classes/", params={"start_date": "2025-03-05"})
    assert lr.json() == []


def test_create_defaults_for_missing_fields(client):
    cr = client.post("/classes/", json={"date": "2025-02-01", "instructor": None})
    assert cr.status_code == 201, cr.text
    row = cr.json()
    assert row["class_type"] == "Class"
    assert row["instructor"] == ""
    assert row["style"] == "unknown"
    assert row["hours"] == 0
    assert row["performance"] == "NONE"


def test_create_rejects_bad_input(client):
    r = client.post("/classes/", json={"date": ""})
    assert r.status_code == 422
    assert "Date is required" in r.text

    r = client.post("/classes/", json={"date": "not a date"})
    assert r.status_code == 422
    assert "Invalid date" in r.text

    r = client.post("/classes/", json={"date": "2025-01-01", "hours": "abc"})
    assert r.status_code == 422
    assert "Hours must be a number" in r.text

    r = client.post("/classes/", json={"date": "2025-01-01", "hours": -1})
    assert r.status_code == 422


def test_list_newest_first(client):
    for d in ["2025-01-10", "2025-03-10", "2025-02-10"]:
        client.post("/classes/", json={"date": d})
    dates = [r["date"][:10] for r in client.get("/classes/").json()]
    assert dates == ["2025-03-10", "2025-02-10", "2025-01-10"]


def test_update_session_partial(client):
    row = client.post("/classes/", json={"date": "2025-01-01", "hours": 1}).json()

    r = client.put(
        f"/classes/{row['id']}",
        json={"classType": " Advanced ", "performance": "rough", "url": "", "date": "garbage"},
    )
    assert r.status_code == 200, r.text
    updated = r.json()
    assert updated["class_type"] == "Advanced"
    assert updated["performance"] == "POOR"
    assert updated["url"] is None
    # unparseable date is dropped, not applied
    assert updated["date"].startswith("2025-01-01")
    assert updated["hours"] == 1

    r = client.patch(f"/classes/{row['id']}", json={"hours": "lots"})
    assert r.status_code == 200
    assert r.json()["hours"] is None


def test_update_without_usable_fields(client):
    row = client.post("/classes/", json={"date": "2025-01-01"}).json()
    r = client.put(f"/classes/{row['id']}", json={"date": "garbage", "unknown": 1})
    assert r.status_code == 400
    assert r.json()["detail"] == "No valid fields provided"


def test_get_update_delete_missing(client):
    assert client.get("/classes/999").status_code == 404
    assert client.put("/classes/999", json={"hours": 1}).status_code == 404
    assert client.delete("/classes/999").status_code == 404


def test_delete_session(client):
    row = client.post("/classes/", json={"date": str(date(2025, 5, 1))}).json()
    r = client.delete(f"/classes/{row['id']}")
    assert r.status_code == 200
    assert r.json()["id"] == row["id"]
    assert client.get(f"/classes/{row['id']}").status_code == 404
