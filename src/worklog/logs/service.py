from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..assignments.repository import AssignmentRepository
from ..common.datetime_utils import now_local, today_local
from ..common.schema import EmployeeQuery
from ..core.constants import (
    DEFAULT_TIMEZONE,
    STATUS_SUBMITTED,
    STATUS_SUBMITTED_MISSING,
    SUMMARY_WINDOW_DAYS,
    WARNING_MISSING_MANDATORY,
)
from ..core.exceptions import BusinessRuleError, NotFoundError
from ..submissions.repository import SubmissionStatusRepository
from ..tags.repository import TagRepository
from .model import Log
from .repository import LogLine, LogRepository
from .schemas import LogSubmit

logger = logging.getLogger(__name__)

DAY_LOCKED = "Data already submitted and locked for this date"


@dataclass(frozen=True)
class SubmissionResult:
    total_minutes: int
    missing_mandatory: bool

    def to_dict(self) -> dict:
        return {"totalMinutes": self.total_minutes, "missingMandatory": self.missing_mandatory}


class LogService:
    """Use cases around daily work logs.

    A submission prices each entry with its tag (count x tag minutes), checks the
    employee's mandatory tags and locks the day. Locked days reject further submissions.
    """

    def __init__(
        self,
        logs: LogRepository,
        tags: TagRepository,
        assignments: AssignmentRepository,
        submissions: SubmissionStatusRepository,
        *,
        tz_name: str = DEFAULT_TIMEZONE,
    ):
        self._logs = logs
        self._tags = tags
        self._assignments = assignments
        self._submissions = submissions
        self._tz_name = tz_name

    def list_for(self, query: EmployeeQuery):
        return self._logs.list_for(
            employee_id=query.employee_id,
            log_date=query.log_date,
            date_range=query.date_range,
        )

    def submit(self, data: LogSubmit, *, now: Optional[datetime] = None) -> SubmissionResult:
        now = now or now_local(self._tz_name)

        status = self._submissions.get_for_employee_and_date(data.employee_id, data.log_date)
        if status and status.is_locked:
            raise BusinessRuleError(DAY_LOCKED)

        counts: dict[int, int] = {}
        for entry in data.logs:
            counts[entry.tag_id] = entry.count

        lines = []
        for tag_id, count in counts.items():
            tag = self._tags.get_by_id(tag_id)
            if not tag:
                logger.info("Skipping unknown tag %s in submission of employee %s", tag_id, data.employee_id)
                continue
            lines.append(LogLine(tag_id=tag_id, count=count, total_minutes=count * tag.time_minutes))

        missing = any(
            counts.get(a.tag_id, 0) == 0 for a in self._assignments.list_mandatory(data.employee_id)
        )

        saved = self._logs.save_submission(
            employee_id=data.employee_id,
            log_date=data.log_date,
            lines=lines,
            submitted_at=now,
            status_message=STATUS_SUBMITTED_MISSING if missing else STATUS_SUBMITTED,
            warning_message=WARNING_MISSING_MANDATORY if missing else None,
        )
        if saved is None:
            raise BusinessRuleError(DAY_LOCKED)

        total = sum(line.total_minutes for line in lines)
        logger.info(
            "Employee %s submitted %s entries for %s: %s minutes%s",
            data.employee_id,
            len(lines),
            data.log_date,
            total,
            " (missing mandatory tags)" if missing else "",
        )
        return SubmissionResult(total_minutes=total, missing_mandatory=missing)

    def by_date(self, employee_id: int, log_date: date):
        """That day's logs plus its submission status (or None)."""
        logs = self._logs.list_for_day(employee_id, log_date)
        status = self._submissions.get_for_employee_and_date(employee_id, log_date)
        return logs, status

    def update_count(self, log_id: int, count: int) -> Log:
        log = self._logs.get_by_id(log_id)
        if not log:
            raise NotFoundError("Log not found")

        minutes = count * (log.tag.time_minutes if log.tag else 0)
        updated = self._logs.update_count(log_id, count=count, total_minutes=minutes)
        if not updated:
            raise NotFoundError("Log not found")
        return updated

    def summary(self, employee_id: int, *, today: Optional[date] = None) -> dict:
        today = today or today_local(self._tz_name)
        week_start = today - timedelta(days=SUMMARY_WINDOW_DAYS)

        today_logs = self._logs.list_for(employee_id=employee_id, log_date=today)
        weekly_logs = self._logs.list_for(employee_id=employee_id, date_range=(week_start, today))

        today_total = sum(log.total_minutes for log in today_logs)
        weekly_total = sum(log.total_minutes for log in weekly_logs)
        days_worked = len({log.log_date for log in weekly_logs})
        # half-up, minutes are never negative
        average = int(weekly_total / days_worked + 0.5) if days_worked else 0

        return {
            "today": {
                "logs": [log.to_dict(include_tag=True) for log in today_logs],
                "totalMinutes": today_total,
                "totalEntries": len(today_logs),
            },
            "weekly": {
                "logs": [log.to_dict(include_tag=True) for log in weekly_logs],
                "totalMinutes": weekly_total,
                "daysWorked": days_worked,
                "averagePerDay": average,
            },
        }
