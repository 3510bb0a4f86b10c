from __future__ import annotations

from datetime import date

import pytest

from worklog.common.schema import EmployeeQuery
from worklog.common.validators import parse, parse_id, parse_lenient
from worklog.core.exceptions import ValidationError
from worklog.logs.schemas import LogSubmit


def test_parse_normalizes_camel_case_body():
    data = parse(LogSubmit, {"employeeId": 3, "logDate": "2026-02-02", "logs": [{"tagId": 1, "count": 4}]})

    assert data.employee_id == 3
    assert data.log_date == date(2026, 2, 2)
    assert data.logs[0].tag_id == 1
    assert data.logs[0].count == 4


def test_parse_reports_every_failing_field():
    with pytest.raises(ValidationError) as exc:
        parse(LogSubmit, {"employeeId": "E1", "logDate": "02/02/2026", "logs": [{"tagId": 1, "count": -1}]})

    fields = {d["field"] for d in exc.value.details}
    assert {"employeeId", "logDate", "logs.0.count"} <= fields
    assert str(exc.value) == "Validation failed"


def test_parse_rejects_non_object_body():
    with pytest.raises(ValidationError) as exc:
        parse(LogSubmit, None)
    assert exc.value.details == [{"field": "body", "message": "Expected a JSON object"}]


def test_query_values_are_coerced():
    query = parse(EmployeeQuery, {"employeeId": "7", "active": "true", "dateFrom": "2026-01-01", "dateTo": "2026-01-31"})

    assert query.employee_id == 7
    assert query.active is True
    assert query.date_range == (date(2026, 1, 1), date(2026, 1, 31))


def test_date_range_needs_both_ends():
    assert parse(EmployeeQuery, {"dateFrom": "2026-01-01"}).date_range is None


def test_parse_lenient_drops_invalid_filters():
    assert parse_lenient(EmployeeQuery, {"employeeId": "abc"}) is None
    assert parse_lenient(EmployeeQuery, {"employeeId": "2"}).employee_id == 2


def test_parse_id():
    assert parse_id("12") == 12
    assert parse_id("abc") is None
    assert parse_id(None) is None
