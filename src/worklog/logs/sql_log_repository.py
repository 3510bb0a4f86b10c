from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import joinedload

from ..database.connection import Database
from ..database.session import db_session
from ..employees.model import Employee
from ..submissions.model import SubmissionStatus
from ..tags.model import Tag
from ..warnings.model import EmployeeWarning
from .model import Log
from .repository import LogLine, LogRepository


class SQLLogRepository(LogRepository):
    def __init__(self, database: Database):
        self._db = database

    def list_for(
        self,
        *,
        employee_id: Optional[int] = None,
        log_date: Optional[date] = None,
        date_range: Optional[tuple[date, date]] = None,
    ) -> Sequence[Log]:
        stmt = (
            select(Log)
            .join(Log.employee)
            .join(Log.tag)
            .options(joinedload(Log.employee), joinedload(Log.tag))
        )
        if employee_id is not None:
            stmt = stmt.where(Log.employee_id == employee_id)
        if date_range:
            stmt = stmt.where(Log.log_date >= date_range[0], Log.log_date <= date_range[1])
        elif log_date:
            stmt = stmt.where(Log.log_date == log_date)
        stmt = stmt.order_by(Log.log_date.desc(), Employee.name, Tag.tag_name)

        with db_session(self._db) as session:
            return list(session.scalars(stmt).unique())

    def list_for_day(self, employee_id: int, log_date: date) -> Sequence[Log]:
        stmt = (
            select(Log)
            .join(Log.tag)
            .options(joinedload(Log.tag), joinedload(Log.employee))
            .where(Log.employee_id == employee_id, Log.log_date == log_date)
            .order_by(Tag.tag_name)
        )
        with db_session(self._db) as session:
            return list(session.scalars(stmt).unique())

    def get_by_id(self, log_id: int) -> Optional[Log]:
        with db_session(self._db) as session:
            return session.get(Log, log_id, options=[joinedload(Log.tag), joinedload(Log.employee)])

    def save_submission(
        self,
        *,
        employee_id: int,
        log_date: date,
        lines: Sequence[LogLine],
        submitted_at: datetime,
        status_message: str,
        warning_message: Optional[str] = None,
    ) -> Optional[SubmissionStatus]:
        with db_session(self._db) as session:
            status = session.scalars(
                select(SubmissionStatus).where(
                    SubmissionStatus.employee_id == employee_id,
                    SubmissionStatus.submission_date == log_date,
                )
            ).first()
            if status is not None and status.is_locked:
                return None

            existing = {
                log.tag_id: log
                for log in session.scalars(
                    select(Log).where(Log.employee_id == employee_id, Log.log_date == log_date)
                )
            }
            for line in lines:
                log = existing.get(line.tag_id)
                if log is None:
                    log = Log(employee_id=employee_id, tag_id=line.tag_id, log_date=log_date)
                    session.add(log)
                    existing[line.tag_id] = log
                log.count = line.count
                log.total_minutes = line.total_minutes

            if status is None:
                status = SubmissionStatus(employee_id=employee_id, submission_date=log_date)
                session.add(status)
            status.submission_time = submitted_at
            status.is_locked = True
            status.total_minutes = sum(line.total_minutes for line in lines)
            status.status_message = status_message

            if warning_message:
                session.add(
                    EmployeeWarning(
                        employee_id=employee_id,
                        warning_date=log_date,
                        warning_message=warning_message,
                        is_active=True,
                    )
                )
            session.flush()
            return status

    def update_count(self, log_id: int, *, count: int, total_minutes: int) -> Optional[Log]:
        with db_session(self._db) as session:
            log = session.get(Log, log_id, options=[joinedload(Log.tag), joinedload(Log.employee)])
            if not log:
                return None
            log.count = count
            log.total_minutes = total_minutes
            session.flush()

            day_total = session.scalar(
                select(func.coalesce(func.sum(Log.total_minutes), 0)).where(
                    Log.employee_id == log.employee_id,
                    Log.log_date == log.log_date,
                )
            )
            status = session.scalars(
                select(SubmissionStatus).where(
                    SubmissionStatus.employee_id == log.employee_id,
                    SubmissionStatus.submission_date == log.log_date,
                )
            ).first()
            if status is not None:
                status.total_minutes = int(day_total or 0)
            return log
