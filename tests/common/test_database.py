from __future__ import annotations

from worklog.database.bootstrap import create_schema, list_tables, seed_demo_data
from worklog.database.connection import Database
from worklog.employees.sql_employee_repository import SQLEmployeeRepository


def test_schema_and_seed_are_idempotent():
    database = Database("sqlite:///:memory:")
    try:
        create_schema(database)
        create_schema(database)
        assert {"employees", "tags", "assignments", "breaks", "logs", "submission_statuses", "warnings", "issues"} <= set(
            list_tables(database)
        )

        seed_demo_data(database)
        seed_demo_data(database)
        employees = SQLEmployeeRepository(database).list_all()
        assert [e.employee_code for e in employees] == ["EMP002", "EMP001", "EMP003"]
    finally:
        database.close()


def test_close_is_idempotent():
    database = Database("sqlite:///:memory:")
    assert database.ping()

    database.close()
    database.close()
    assert database.closed
