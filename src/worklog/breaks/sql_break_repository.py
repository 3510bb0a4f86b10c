from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload

from ..database.connection import Database
from ..database.session import db_session
from ..warnings.model import EmployeeWarning
from .model import Break
from .repository import BreakRepository

logger = logging.getLogger(__name__)


class SQLBreakRepository(BreakRepository):
    def __init__(self, database: Database):
        self._db = database

    def list_for(
        self,
        *,
        employee_id: Optional[int] = None,
        break_date: Optional[date] = None,
        date_range: Optional[tuple[date, date]] = None,
        active: Optional[bool] = None,
    ) -> Sequence[Break]:
        stmt = select(Break).options(joinedload(Break.employee))
        if employee_id is not None:
            stmt = stmt.where(Break.employee_id == employee_id)
        if date_range:
            stmt = stmt.where(Break.break_date >= date_range[0], Break.break_date <= date_range[1])
        elif break_date:
            stmt = stmt.where(Break.break_date == break_date)
        if active is not None:
            stmt = stmt.where(Break.is_active.is_(active))
        stmt = stmt.order_by(Break.break_date.desc(), Break.break_in_time.desc())

        with db_session(self._db) as session:
            return list(session.scalars(stmt))

    def get_by_id(self, break_id: int) -> Optional[Break]:
        with db_session(self._db) as session:
            return session.get(Break, break_id, options=[joinedload(Break.employee)])

    def get_active(self, employee_id: int) -> Optional[Break]:
        stmt = (
            select(Break)
            .options(joinedload(Break.employee))
            .where(Break.employee_id == employee_id, Break.is_active.is_(True))
        )
        with db_session(self._db) as session:
            return session.scalars(stmt).first()

    def start_if_none_active(self, *, employee_id: int, break_date: date, break_in_time: datetime) -> Optional[Break]:
        try:
            with db_session(self._db) as session:
                brk = Break(
                    employee_id=employee_id,
                    break_date=break_date,
                    break_in_time=break_in_time,
                    is_active=True,
                    active_employee_id=employee_id,
                )
                session.add(brk)
                session.flush()
                session.refresh(brk, ["employee"])
                return brk
        except IntegrityError:
            # uq_breaks_one_active_per_employee: someone else opened a break first
            if self.get_active(employee_id) is None:
                raise
            logger.info("Concurrent break start rejected for employee %s", employee_id)
            return None

    def close(
        self,
        *,
        break_id: int,
        break_out_time: datetime,
        duration_minutes: int,
        warning_message: Optional[str] = None,
    ) -> Optional[Break]:
        with db_session(self._db) as session:
            # Only one caller may close an open break.
            closed = session.execute(
                update(Break)
                .where(Break.id == break_id, Break.is_active.is_(True))
                .values(**Break.closing_values(out_time=break_out_time, duration_minutes=duration_minutes))
                .execution_options(synchronize_session=False)
            )
            if closed.rowcount != 1:
                return None
            warned = bool(warning_message) and _mark_warned(session, break_id)
            brk = session.get(Break, break_id, options=[joinedload(Break.employee)])
            if warned:
                session.add(
                    EmployeeWarning(
                        employee_id=brk.employee_id,
                        warning_date=break_out_time.date(),
                        warning_message=warning_message,
                        is_active=True,
                    )
                )
                session.flush()
            return brk

    def record_warning(self, *, break_id: int, employee_id: int, warning_date: date, warning_message: str) -> bool:
        with db_session(self._db) as session:
            if not _mark_warned(session, break_id):
                return False
            session.add(
                EmployeeWarning(
                    employee_id=employee_id,
                    warning_date=warning_date,
                    warning_message=warning_message,
                    is_active=True,
                )
            )
            return True


def _mark_warned(session, break_id: int) -> bool:
    """Flip warning_sent once; False if it was already set (or the break is gone)."""
    marked = session.execute(
        update(Break)
        .where(Break.id == break_id, Break.warning_sent.is_(False))
        .values(warning_sent=True)
        .execution_options(synchronize_session=False)
    )
    return marked.rowcount == 1
