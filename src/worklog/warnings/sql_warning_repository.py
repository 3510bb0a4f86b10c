from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from ..database.connection import Database
from ..database.session import db_session
from .model import EmployeeWarning
from .repository import WarningRepository


class SQLWarningRepository(WarningRepository):
    def __init__(self, database: Database):
        self._db = database

    def list_for(self, *, employee_id: Optional[int] = None, active: Optional[bool] = None) -> Sequence[EmployeeWarning]:
        stmt = select(EmployeeWarning).options(joinedload(EmployeeWarning.employee))
        if employee_id is not None:
            stmt = stmt.where(EmployeeWarning.employee_id == employee_id)
        if active is not None:
            stmt = stmt.where(EmployeeWarning.is_active.is_(active))
        stmt = stmt.order_by(EmployeeWarning.warning_date.desc(), EmployeeWarning.created_at.desc())

        with db_session(self._db) as session:
            return list(session.scalars(stmt))

    def create(self, *, employee_id: int, warning_date: date, warning_message: str) -> EmployeeWarning:
        with db_session(self._db) as session:
            warning = EmployeeWarning(
                employee_id=employee_id,
                warning_date=warning_date,
                warning_message=warning_message,
                is_active=True,
            )
            session.add(warning)
            session.flush()
            session.refresh(warning, ["employee"])
            return warning

    def set_active(self, warning_id: int, is_active: bool) -> Optional[EmployeeWarning]:
        with db_session(self._db) as session:
            warning = session.get(EmployeeWarning, warning_id, options=[joinedload(EmployeeWarning.employee)])
            if not warning:
                return None
            warning.is_active = is_active
            session.flush()
            return warning
