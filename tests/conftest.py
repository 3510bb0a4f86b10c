from __future__ import annotations

from datetime import datetime

import pytest

from worklog.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 10, 0, 0)


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"DATABASE_URL": "sqlite:///:memory:", "AUTO_INIT_DB": True, "AUTO_SEED_DB": False})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return app.extensions["worklog"]


@pytest.fixture
def employee(client):
    resp = client.post(
        "/api/employees",
        json={"name": "John Doe", "email": "john.doe@company.com", "employeeCode": "EMP001"},
    )
    assert resp.status_code == 200
    return resp.get_json()["data"]


@pytest.fixture
def tag(client):
    resp = client.post("/api/tags", json={"tagName": "Data Entry", "timeMinutes": 5})
    assert resp.status_code == 200
    return resp.get_json()["data"]
