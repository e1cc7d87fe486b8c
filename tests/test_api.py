from __future__ import annotations

import pytest

from src.hr_checkin.hr_checkin.main import create_app


@pytest.fixture
def app(scenario_events):
    app = create_app("config.testing")
    container = app.extensions["hr_checkin"]
    for e in scenario_events:
        container.events_repo.add(e)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def test_attendance_history_endpoint(client):
    resp = client.get("/api/employees/CR001/attendance?start=2024-01-01&end=2024-01-31")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["days"] == [
        {"date": "2024-01-01", "check_in": "08:05", "check_out": "17:30", "status": "ON_TIME"},
        {"date": "2024-01-02", "check_in": "09:10", "check_out": "17:00", "status": "LATE"},
    ]
    assert body["stats"] == {"total": 2, "on_time": 1, "late": 1}


def test_attendance_history_unknown_employee_is_empty(client):
    resp = client.get("/api/employees/NOBODY/attendance?start=2024-01-01&end=2024-01-31")

    assert resp.status_code == 200
    assert resp.get_json()["stats"] == {"total": 0, "on_time": 0, "late": 0}


def test_attendance_history_bad_dates(client):
    resp = client.get("/api/employees/CR001/attendance?start=01/01/2024")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_penalty_endpoint(client):
    resp = client.get("/api/employees/CR001/penalties?start=2024-01-01&end=2024-01-31")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["total_deduction"] == 300
    assert body["late_by_threshold"] == {">10min": 1, ">30min": 1}
    assert body["days"][1]["charged"] == [">10min", ">30min"]


def test_rule_mutation_round_trip(client):
    resp = client.post("/api/lateness/rules", json={"minutes": 60, "amount": 500})
    assert resp.status_code == 201
    assert resp.get_json()["rules"][-1] == {"minutes": 60, "amount": 500}

    resp = client.delete("/api/lateness/rules/0")
    assert resp.status_code == 200
    assert [r["minutes"] for r in resp.get_json()["rules"]] == [30, 60]

    assert [r["minutes"] for r in client.get("/api/lateness/rules").get_json()["rules"]] == [30, 60]


def test_invalid_rule_is_not_stored(client):
    resp = client.post("/api/lateness/rules", json={"minutes": -1, "amount": 10})

    assert resp.status_code == 400
    assert len(client.get("/api/lateness/rules").get_json()["rules"]) == 2


def test_remove_missing_rule(client):
    assert client.delete("/api/lateness/rules/9").status_code == 404


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"late_minutes": 35}, 300),
        ({"late_minutes": 15}, 100),
        ({"late_minutes": 5}, 0),
        ({"late_minutes": 35, "policy": "highest_band"}, 200),
    ],
)
def test_deduction_endpoint(client, payload, expected):
    resp = client.post("/api/lateness/deduction", json=payload)

    assert resp.status_code == 200
    assert resp.get_json()["deduction"] == expected


@pytest.mark.parametrize("payload", [{"late_minutes": -3}, {"late_minutes": "10"}, {"late_minutes": 5, "policy": "max"}])
def test_deduction_endpoint_rejects_bad_input(client, payload):
    assert client.post("/api/lateness/deduction", json=payload).status_code == 400


def test_history_defaults_to_recent_window(client, monkeypatch, fixed_now):
    monkeypatch.setattr("src.hr_checkin.hr_checkin.common.http.now_local", lambda: fixed_now)

    body = client.get("/api/employees/CR001/attendance").get_json()

    assert body["start"] == "2023-12-04"
    assert body["end"] == "2024-01-03"
    assert body["stats"]["total"] == 2


@pytest.mark.parametrize("url", ["/api/lateness/rules", "/api/lateness/deduction"])
def test_non_object_json_body_is_rejected(client, url):
    resp = client.post(url, json=[{"minutes": 5, "amount": 10}])

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
