from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from worklog.breaks.model import Break
from worklog.breaks.service import BreakService
from worklog.core.exceptions import BusinessRuleError, NotFoundError
from worklog.employees.model import Employee


class InMemoryEmployees:
    def __init__(self, *employees: Employee):
        self._by_id = {e.id: e for e in employees}

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(employee_id)


class InMemoryBreaks:
    def __init__(self):
        self._by_id: dict[int, Break] = {}
        self._next_id = 1
        self.warnings: list[tuple[int, date, str]] = []

    def get_by_id(self, break_id: int) -> Optional[Break]:
        return self._by_id.get(break_id)

    def get_active(self, employee_id: int) -> Optional[Break]:
        for brk in self._by_id.values():
            if brk.employee_id == employee_id and brk.is_active:
                return brk
        return None

    def start_if_none_active(self, *, employee_id: int, break_date: date, break_in_time: datetime) -> Optional[Break]:
        if self.get_active(employee_id):
            return None
        brk = Break(
            id=self._next_id,
            employee_id=employee_id,
            break_date=break_date,
            break_in_time=break_in_time,
            is_active=True,
            warning_sent=False,
            active_employee_id=employee_id,
        )
        self._by_id[brk.id] = brk
        self._next_id += 1
        return brk

    def close(self, *, break_id, break_out_time, duration_minutes, warning_message=None) -> Optional[Break]:
        brk = self._by_id.get(break_id)
        if not brk or not brk.is_active:
            return None
        for field, value in Break.closing_values(out_time=break_out_time, duration_minutes=duration_minutes).items():
            setattr(brk, field, value)
        if warning_message:
            self.warnings.append((brk.employee_id, break_out_time.date(), warning_message))
            brk.warning_sent = True
        return brk

    def record_warning(self, *, break_id, employee_id, warning_date, warning_message) -> bool:
        brk = self._by_id.get(break_id)
        if not brk or brk.warning_sent:
            return False
        self.warnings.append((employee_id, warning_date, warning_message))
        brk.warning_sent = True
        return True


@pytest.fixture
def breaks():
    return InMemoryBreaks()


@pytest.fixture
def service(breaks):
    employees = InMemoryEmployees(Employee(id=1, name="John Doe", email="john@company.com", employee_code="EMP001"))
    return BreakService(breaks, employees, tz_name="Asia/Kolkata", limit_minutes=20)


def test_start_opens_break_dated_today(service, fixed_now):
    brk = service.start(1, now=fixed_now)

    assert brk.is_active
    assert brk.break_date == fixed_now.date()
    assert brk.break_in_time == fixed_now


def test_second_start_is_rejected(service, fixed_now):
    service.start(1, now=fixed_now)

    with pytest.raises(BusinessRuleError, match="Employee already has an active break"):
        service.start(1, now=fixed_now + timedelta(minutes=1))


def test_start_for_unknown_employee(service, fixed_now):
    with pytest.raises(NotFoundError, match="Employee not found"):
        service.start(99, now=fixed_now)


def test_end_without_active_break(service, fixed_now):
    with pytest.raises(BusinessRuleError, match="No active break found for this employee"):
        service.end(1, now=fixed_now)


def test_short_break_ends_without_warning(service, breaks, fixed_now):
    service.start(1, now=fixed_now)
    brk = service.end(1, now=fixed_now + timedelta(minutes=15, seconds=40))

    assert not brk.is_active
    assert brk.break_duration == 15
    assert not brk.warning_sent
    assert breaks.warnings == []
    assert service.status(1) is None


def test_long_break_records_warning(service, breaks, fixed_now):
    service.start(1, now=fixed_now)
    brk = service.end(1, now=fixed_now + timedelta(minutes=25))

    assert brk.break_duration == 25
    assert brk.warning_sent
    assert breaks.warnings == [(1, fixed_now.date(), "Break exceeded 20 minutes (25 minutes)")]


def test_exactly_at_limit_is_not_a_warning(service, breaks, fixed_now):
    service.start(1, now=fixed_now)
    service.end(1, now=fixed_now + timedelta(minutes=20))

    assert breaks.warnings == []


def test_can_start_again_after_ending(service, fixed_now):
    service.start(1, now=fixed_now)
    service.end(1, now=fixed_now + timedelta(minutes=5))

    again = service.start(1, now=fixed_now + timedelta(minutes=30))
    assert again.is_active
    assert service.status(1).id == again.id


def test_send_warning_rules(service, breaks, fixed_now):
    brk = service.start(1, now=fixed_now)

    with pytest.raises(NotFoundError, match="Break record not found"):
        service.send_warning(1, 999, now=fixed_now)
    with pytest.raises(BusinessRuleError, match="does not belong"):
        service.send_warning(2, brk.id, now=fixed_now)
    with pytest.raises(BusinessRuleError, match="Break has not exceeded 20 minutes"):
        service.send_warning(1, brk.id, now=fixed_now + timedelta(minutes=10))

    service.send_warning(1, brk.id, now=fixed_now + timedelta(minutes=21))
    assert len(breaks.warnings) == 1

    with pytest.raises(BusinessRuleError, match="Warning already sent for this break"):
        service.send_warning(1, brk.id, now=fixed_now + timedelta(minutes=22))


def test_warned_break_is_not_warned_again_on_end(service, breaks, fixed_now):
    brk = service.start(1, now=fixed_now)
    service.send_warning(1, brk.id, now=fixed_now + timedelta(minutes=21))

    service.end(1, now=fixed_now + timedelta(minutes=30))
    assert len(breaks.warnings) == 1
