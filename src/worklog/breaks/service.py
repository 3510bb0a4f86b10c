from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import minutes_between, now_local
from ..common.schema import EmployeeQuery
from ..core.constants import DEFAULT_BREAK_LIMIT_MINUTES, DEFAULT_TIMEZONE
from ..core.exceptions import BusinessRuleError, NotFoundError
from ..employees.repository import EmployeeRepository
from .model import Break
from .repository import BreakRepository

logger = logging.getLogger(__name__)

ACTIVE_BREAK_EXISTS = "Employee already has an active break"
NO_ACTIVE_BREAK = "No active break found for this employee"


class BreakService:
    """Use cases: start / end a break, report the open one, warn on long breaks.

    At most one break per employee may be active at any time.
    """

    def __init__(
        self,
        breaks: BreakRepository,
        employees: EmployeeRepository,
        *,
        tz_name: str = DEFAULT_TIMEZONE,
        limit_minutes: int = DEFAULT_BREAK_LIMIT_MINUTES,
    ):
        self._breaks = breaks
        self._employees = employees
        self._tz_name = tz_name
        self._limit_minutes = int(limit_minutes)

    def _warning_text(self, minutes: int) -> str:
        return f"Break exceeded {self._limit_minutes} minutes ({minutes} minutes)"

    def list_for(self, query: Optional[EmployeeQuery] = None):
        if query is None:
            return self._breaks.list_for()
        return self._breaks.list_for(
            employee_id=query.employee_id,
            break_date=query.break_date,
            date_range=query.date_range,
            active=query.active,
        )

    def start(self, employee_id: int, *, now: Optional[datetime] = None) -> Break:
        now = now or now_local(self._tz_name)

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        if self._breaks.get_active(employee_id):
            raise BusinessRuleError(ACTIVE_BREAK_EXISTS)

        started = self._breaks.start_if_none_active(
            employee_id=employee_id,
            break_date=now.date(),
            break_in_time=now,
        )
        if started is None:
            raise BusinessRuleError(ACTIVE_BREAK_EXISTS)

        logger.info("Employee %s started break %s", employee_id, started.id)
        return started

    def end(self, employee_id: int, *, now: Optional[datetime] = None) -> Break:
        now = now or now_local(self._tz_name)

        active = self._breaks.get_active(employee_id)
        if not active:
            raise BusinessRuleError(NO_ACTIVE_BREAK)

        duration = minutes_between(active.break_in_time, now) if active.break_in_time else 0
        warning = None
        if duration > self._limit_minutes and not active.warning_sent:
            warning = self._warning_text(duration)

        closed = self._breaks.close(
            break_id=active.id,
            break_out_time=now,
            duration_minutes=duration,
            warning_message=warning,
        )
        if closed is None:
            raise BusinessRuleError(NO_ACTIVE_BREAK)

        if warning:
            logger.info("Employee %s exceeded break limit: %s minutes", employee_id, duration)
        return closed

    def status(self, employee_id: int) -> Optional[Break]:
        return self._breaks.get_active(employee_id)

    def send_warning(self, employee_id: int, break_id: int, *, now: Optional[datetime] = None) -> None:
        now = now or now_local(self._tz_name)

        brk = self._breaks.get_by_id(break_id)
        if not brk:
            raise NotFoundError("Break record not found")
        if brk.employee_id != employee_id:
            raise BusinessRuleError("Break does not belong to this employee")
        if brk.warning_sent:
            raise BusinessRuleError("Warning already sent for this break")

        duration = minutes_between(brk.break_in_time, now) if brk.break_in_time else 0
        if duration <= self._limit_minutes:
            raise BusinessRuleError(f"Break has not exceeded {self._limit_minutes} minutes")

        if not self._breaks.record_warning(
            break_id=break_id,
            employee_id=employee_id,
            warning_date=now.date(),
            warning_message=self._warning_text(duration),
        ):
            raise BusinessRuleError("Warning already sent for this break")
