from __future__ import annotations

from worklog.common.datetime_utils import today_local


def _submit(client, employee, tag, *, count=4, log_date="2026-02-02"):
    return client.post(
        "/api/logs",
        json={"employeeId": employee["id"], "logDate": log_date, "logs": [{"tagId": tag["id"], "count": count}]},
    )


def test_submit_then_locked(client, employee, tag):
    resp = _submit(client, employee, tag)
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["message"] == "Work log submitted and locked successfully"
    assert body["data"] == {"totalMinutes": 20, "missingMandatory": False}

    again = _submit(client, employee, tag, count=1)
    assert again.status_code == 400
    assert again.get_json()["error"] == "Data already submitted and locked for this date"


def test_missing_mandatory_tag_warns(client, employee, tag):
    calls = client.post("/api/tags", json={"tagName": "Customer Calls", "timeMinutes": 15}).get_json()["data"]
    client.post("/api/assignments", json={"employeeId": employee["id"], "tagId": calls["id"], "isMandatory": True})

    body = _submit(client, employee, tag).get_json()
    assert body["data"]["missingMandatory"] is True

    warnings = client.get(f"/api/warnings?employeeId={employee['id']}").get_json()["data"]
    assert [w["warningMessage"] for w in warnings] == ["Mandatory tags were not filled"]

    statuses = client.get(f"/api/submission-status?employeeId={employee['id']}").get_json()["data"]
    assert statuses[0]["statusMessage"] == "Submitted with missing mandatory tags"


def test_by_date_includes_submission_status(client, employee, tag):
    _submit(client, employee, tag)

    resp = client.get(f"/api/logs/by-date?employeeId={employee['id']}&logDate=2026-02-02")
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["data"][0]["tag"]["tagName"] == "Data Entry"
    assert body["submissionStatus"]["isLocked"] is True
    assert body["submissionStatus"]["totalMinutes"] == 20


def test_by_date_requires_both_filters(client, employee):
    resp = client.get(f"/api/logs/by-date?employeeId={employee['id']}")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Employee ID and log date are required"


def test_update_log_refreshes_submission_total(client, employee, tag):
    _submit(client, employee, tag)
    log = client.get(f"/api/logs?employeeId={employee['id']}").get_json()["data"][0]

    resp = client.put(f"/api/logs/{log['id']}", json={"count": 10})
    assert resp.status_code == 200
    assert resp.get_json()["data"]["totalMinutes"] == 50

    status = client.get(f"/api/logs/by-date?employeeId={employee['id']}&logDate=2026-02-02").get_json()["submissionStatus"]
    assert status["totalMinutes"] == 50


def test_update_log_errors(client):
    assert client.put("/api/logs/abc", json={"count": 1}).get_json()["error"] == "Invalid log ID"
    missing = client.put("/api/logs/12", json={"count": 1})
    assert missing.status_code == 404
    assert missing.get_json()["error"] == "Log not found"


def test_list_logs_rejects_malformed_query(client):
    resp = client.get("/api/logs?logDate=2026-2-2")
    assert resp.status_code == 400
    assert resp.get_json()["details"][0]["field"] == "logDate"


def test_summary_for_today(client, employee, tag):
    _submit(client, employee, tag, count=3, log_date=today_local("Asia/Kolkata").isoformat())

    resp = client.get(f"/api/logs/summary?employeeId={employee['id']}")
    data = resp.get_json()["data"]

    assert data["today"]["totalMinutes"] == 15
    assert data["weekly"]["daysWorked"] == 1
    assert data["weekly"]["averagePerDay"] == 15


def test_summary_requires_employee(client):
    resp = client.get("/api/logs/summary")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Employee ID is required"


def test_submit_without_logs_is_rejected_and_leaves_day_open(client, employee, tag):
    resp = client.post("/api/logs", json={"employeeId": employee["id"], "logDate": "2026-02-02"})
    body = resp.get_json()

    assert resp.status_code == 400
    assert body["error"] == "Validation failed"
    assert "logs" in [d["field"] for d in body["details"]]

    statuses = client.get(f"/api/submission-status?employeeId={employee['id']}").get_json()["data"]
    assert statuses == []

    assert _submit(client, employee, tag).status_code == 200
