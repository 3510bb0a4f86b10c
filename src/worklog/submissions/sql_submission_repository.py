from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from ..database.connection import Database
from ..database.session import db_session
from .model import SubmissionStatus
from .repository import SubmissionStatusRepository


class SQLSubmissionStatusRepository(SubmissionStatusRepository):
    def __init__(self, database: Database):
        self._db = database

    def get_for_employee_and_date(self, employee_id: int, submission_date: date) -> Optional[SubmissionStatus]:
        stmt = select(SubmissionStatus).where(
            SubmissionStatus.employee_id == employee_id,
            SubmissionStatus.submission_date == submission_date,
        )
        with db_session(self._db) as session:
            return session.scalars(stmt).first()

    def list_for(
        self,
        *,
        employee_id: Optional[int] = None,
        submission_date: Optional[date] = None,
        date_range: Optional[tuple[date, date]] = None,
    ) -> Sequence[SubmissionStatus]:
        stmt = select(SubmissionStatus).options(joinedload(SubmissionStatus.employee))
        if employee_id is not None:
            stmt = stmt.where(SubmissionStatus.employee_id == employee_id)
        if date_range:
            stmt = stmt.where(
                SubmissionStatus.submission_date >= date_range[0],
                SubmissionStatus.submission_date <= date_range[1],
            )
        elif submission_date:
            stmt = stmt.where(SubmissionStatus.submission_date == submission_date)
        stmt = stmt.order_by(SubmissionStatus.submission_date.desc(), SubmissionStatus.submission_time.desc())

        with db_session(self._db) as session:
            return list(session.scalars(stmt))
