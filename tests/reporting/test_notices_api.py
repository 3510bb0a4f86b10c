from __future__ import annotations


def test_manual_warning_lifecycle(client, employee):
    created = client.post(
        "/api/warnings",
        json={"employeeId": employee["id"], "warningMessage": "Late submission", "warningDate": "2026-02-01"},
    )
    assert created.status_code == 200
    warning = created.get_json()["data"]
    assert warning["isActive"] is True
    assert warning["warningDate"] == "2026-02-01"

    dismissed = client.put(f"/api/warnings/{warning['id']}", json={"isActive": False})
    assert dismissed.get_json()["message"] == "Warning updated successfully"

    active = client.get(f"/api/warnings?employeeId={employee['id']}&active=true").get_json()["data"]
    assert active == []
    inactive = client.get(f"/api/warnings?employeeId={employee['id']}&active=false").get_json()["data"]
    assert [w["id"] for w in inactive] == [warning["id"]]


def test_warning_defaults_to_today(client, employee):
    warning = client.post(
        "/api/warnings",
        json={"employeeId": employee["id"], "warningMessage": "Dress code"},
    ).get_json()["data"]
    assert warning["warningDate"] is not None


def test_warning_errors(client):
    missing = client.post("/api/warnings", json={"employeeId": 9, "warningMessage": "x"})
    assert missing.status_code == 404
    assert missing.get_json()["error"] == "Employee not found"

    assert client.put("/api/warnings/9", json={"isActive": False}).status_code == 404
    assert client.put("/api/warnings/x", json={"isActive": False}).get_json()["error"] == "Invalid warning ID"


def test_issue_lifecycle(client, employee):
    raised = client.post(
        "/api/issues",
        json={"employeeId": employee["id"], "issueCategory": "IT Support", "issueDescription": "VPN drops every hour"},
    )
    assert raised.status_code == 200
    issue = raised.get_json()["data"]
    assert issue["issueStatus"] == "pending"
    assert issue["resolvedDate"] is None

    resolved = client.put(
        f"/api/issues/{issue['id']}",
        json={"issueStatus": "resolved", "adminResponse": "Router replaced"},
    ).get_json()["data"]
    assert resolved["issueStatus"] == "resolved"
    assert resolved["resolvedDate"] is not None
    assert resolved["adminResponse"] == "Router replaced"

    pending = client.get("/api/issues?status=pending").get_json()["data"]
    assert pending == []


def test_issue_validation(client, employee):
    resp = client.post(
        "/api/issues",
        json={"employeeId": employee["id"], "issueCategory": "Coffee", "issueDescription": "short"},
    )
    fields = {d["field"] for d in resp.get_json()["details"]}

    assert resp.status_code == 400
    assert fields == {"issueCategory", "issueDescription"}

    bad_status = client.get("/api/issues?status=closed")
    assert bad_status.status_code == 400
