from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

import pytest

from worklog.assignments.model import Assignment
from worklog.core.exceptions import BusinessRuleError, NotFoundError
from worklog.logs.model import Log
from worklog.logs.schemas import LogSubmit
from worklog.logs.service import LogService
from worklog.submissions.model import SubmissionStatus
from worklog.tags.model import Tag

DAY = date(2026, 2, 2)


class InMemoryTags:
    def __init__(self, *tags: Tag):
        self._by_id = {t.id: t for t in tags}

    def get_by_id(self, tag_id: int) -> Optional[Tag]:
        return self._by_id.get(tag_id)


class InMemoryAssignments:
    def __init__(self, *assignments: Assignment):
        self._items = list(assignments)

    def list_mandatory(self, employee_id: int):
        return [a for a in self._items if a.employee_id == employee_id and a.is_mandatory]


class InMemorySubmissions:
    def __init__(self):
        self.by_key: dict[tuple[int, date], SubmissionStatus] = {}

    def get_for_employee_and_date(self, employee_id, submission_date):
        return self.by_key.get((employee_id, submission_date))


class InMemoryLogs:
    def __init__(self, submissions: InMemorySubmissions, tags: InMemoryTags):
        self._submissions = submissions
        self._tags = tags
        self.logs: dict[int, Log] = {}
        self.warnings: list[str] = []
        self._next_id = 1

    def _find(self, employee_id, tag_id, log_date):
        for log in self.logs.values():
            if (log.employee_id, log.tag_id, log.log_date) == (employee_id, tag_id, log_date):
                return log
        return None

    def list_for(self, *, employee_id=None, log_date=None, date_range=None):
        out = [log for log in self.logs.values() if employee_id is None or log.employee_id == employee_id]
        if date_range:
            out = [log for log in out if date_range[0] <= log.log_date <= date_range[1]]
        elif log_date:
            out = [log for log in out if log.log_date == log_date]
        return out

    def get_by_id(self, log_id):
        return self.logs.get(log_id)

    def save_submission(self, *, employee_id, log_date, lines, submitted_at, status_message, warning_message=None):
        status = self._submissions.get_for_employee_and_date(employee_id, log_date)
        if status and status.is_locked:
            return None
        for line in lines:
            log = self._find(employee_id, line.tag_id, log_date)
            if log is None:
                log = Log(id=self._next_id, employee_id=employee_id, tag_id=line.tag_id, log_date=log_date)
                log.tag = self._tags.get_by_id(line.tag_id)
                self.logs[log.id] = log
                self._next_id += 1
            log.count = line.count
            log.total_minutes = line.total_minutes
        status = SubmissionStatus(
            employee_id=employee_id,
            submission_date=log_date,
            submission_time=submitted_at,
            is_locked=True,
            total_minutes=sum(line.total_minutes for line in lines),
            status_message=status_message,
        )
        self._submissions.by_key[(employee_id, log_date)] = status
        if warning_message:
            self.warnings.append(warning_message)
        return status

    def update_count(self, log_id, *, count, total_minutes):
        log = self.logs.get(log_id)
        if log:
            log.count = count
            log.total_minutes = total_minutes
        return log


@pytest.fixture
def tags():
    return InMemoryTags(
        Tag(id=1, tag_name="Data Entry", time_minutes=5),
        Tag(id=2, tag_name="Customer Calls", time_minutes=15),
    )


@pytest.fixture
def submissions():
    return InMemorySubmissions()


@pytest.fixture
def logs(submissions, tags):
    return InMemoryLogs(submissions, tags)


@pytest.fixture
def service(logs, tags, submissions):
    assignments = InMemoryAssignments(Assignment(employee_id=1, tag_id=2, is_mandatory=True))
    return LogService(logs, tags, assignments, submissions, tz_name="Asia/Kolkata")


def _submit(service, entries, *, employee_id=1, log_date=DAY, now=None):
    data = LogSubmit(employee_id=employee_id, log_date=log_date, logs=entries)
    return service.submit(data, now=now)


def test_submission_prices_entries_and_locks_day(service, submissions, logs, fixed_now):
    result = _submit(service, [{"tag_id": 1, "count": 4}, {"tag_id": 2, "count": 2}], now=fixed_now)

    assert result.to_dict() == {"totalMinutes": 50, "missingMandatory": False}
    status = submissions.by_key[(1, DAY)]
    assert status.is_locked
    assert status.status_message == "Data submitted successfully"
    assert logs.warnings == []


def test_unknown_tags_are_skipped(service, logs, fixed_now):
    result = _submit(service, [{"tag_id": 1, "count": 2}, {"tag_id": 99, "count": 10}, {"tag_id": 2, "count": 1}], now=fixed_now)

    assert result.total_minutes == 25
    assert sorted(log.tag_id for log in logs.logs.values()) == [1, 2]


def test_zero_count_on_mandatory_tag_is_missing(service, submissions, logs, fixed_now):
    result = _submit(service, [{"tag_id": 1, "count": 3}, {"tag_id": 2, "count": 0}], now=fixed_now)

    assert result.missing_mandatory is True
    assert submissions.by_key[(1, DAY)].status_message == "Submitted with missing mandatory tags"
    assert logs.warnings == ["Mandatory tags were not filled"]


def test_locked_day_rejects_resubmission(service, fixed_now):
    _submit(service, [{"tag_id": 2, "count": 1}], now=fixed_now)

    with pytest.raises(BusinessRuleError, match="Data already submitted and locked for this date"):
        _submit(service, [{"tag_id": 2, "count": 5}], now=fixed_now)


def test_other_day_is_not_locked(service, fixed_now):
    _submit(service, [{"tag_id": 2, "count": 1}], now=fixed_now)
    result = _submit(service, [{"tag_id": 2, "count": 1}], log_date=DAY + timedelta(days=1), now=fixed_now)

    assert result.total_minutes == 15


def test_update_count_reprices(service, logs, fixed_now):
    _submit(service, [{"tag_id": 2, "count": 1}], now=fixed_now)
    log_id = next(iter(logs.logs))

    updated = service.update_count(log_id, 3)
    assert updated.total_minutes == 45

    with pytest.raises(NotFoundError, match="Log not found"):
        service.update_count(999, 1)


def test_summary_rounds_average_per_day(service, fixed_now):
    _submit(service, [{"tag_id": 1, "count": 1}, {"tag_id": 2, "count": 1}], log_date=DAY, now=fixed_now)
    _submit(service, [{"tag_id": 2, "count": 1}], log_date=DAY - timedelta(days=2), now=fixed_now)
    _submit(service, [{"tag_id": 2, "count": 4}], log_date=DAY - timedelta(days=30), now=fixed_now)

    summary = service.summary(1, today=DAY)

    assert summary["today"]["totalMinutes"] == 20
    assert summary["today"]["totalEntries"] == 2
    assert summary["weekly"]["totalMinutes"] == 35
    assert summary["weekly"]["daysWorked"] == 2
    # 35 / 2 = 17.5 rounds half up
    assert summary["weekly"]["averagePerDay"] == 18


def test_summary_without_logs(service):
    summary = service.summary(1, today=DAY)
    assert summary["weekly"] == {"logs": [], "totalMinutes": 0, "daysWorked": 0, "averagePerDay": 0}
