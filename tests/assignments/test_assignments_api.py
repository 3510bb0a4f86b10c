from __future__ import annotations


def test_create_list_and_delete(client, employee, tag):
    created = client.post(
        "/api/assignments",
        json={"employeeId": employee["id"], "tagId": tag["id"], "isMandatory": True},
    )
    assert created.status_code == 200
    assignment = created.get_json()["data"]
    assert assignment["isMandatory"] is True
    assert assignment["tag"]["tagName"] == "Data Entry"

    listed = client.get(f"/api/assignments?employeeId={employee['id']}").get_json()["data"]
    assert [a["id"] for a in listed] == [assignment["id"]]

    deleted = client.delete(f"/api/assignments/{assignment['id']}")
    assert deleted.status_code == 200
    assert deleted.get_json() == {"success": True, "message": "Assignment deleted successfully"}

    again = client.delete(f"/api/assignments/{assignment['id']}")
    assert again.status_code == 404
    assert again.get_json() == {"success": False, "error": "Assignment not found"}


def test_delete_with_non_numeric_id(client):
    resp = client.delete("/api/assignments/abc")
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "error": "Invalid assignment ID"}


def test_duplicate_assignment(client, employee, tag):
    body = {"employeeId": employee["id"], "tagId": tag["id"]}
    client.post("/api/assignments", json=body)

    resp = client.post("/api/assignments", json=body)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Assignment already exists for this employee and tag"


def test_assignment_needs_existing_rows(client, employee):
    resp = client.post("/api/assignments", json={"employeeId": employee["id"], "tagId": 77})
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Tag not found"


def test_list_ignores_malformed_filter(client, employee, tag):
    client.post("/api/assignments", json={"employeeId": employee["id"], "tagId": tag["id"]})

    resp = client.get("/api/assignments?employeeId=x")
    assert resp.status_code == 200
    assert len(resp.get_json()["data"]) == 1


def test_deleting_tag_cascades(client, employee, tag):
    client.post("/api/assignments", json={"employeeId": employee["id"], "tagId": tag["id"]})

    assert client.delete(f"/api/tags/{tag['id']}").status_code == 200
    assert client.get("/api/assignments").get_json()["data"] == []
    assert client.get(f"/api/tags/{tag['id']}").status_code == 404
