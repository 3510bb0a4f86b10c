from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import or_, select

from ..database.connection import Database
from ..database.session import db_session
from .model import Employee
from .repository import EmployeeRepository


class SQLEmployeeRepository(EmployeeRepository):
    def __init__(self, database: Database):
        self._db = database

    def list_all(self) -> Sequence[Employee]:
        with db_session(self._db) as session:
            return list(session.scalars(select(Employee).order_by(Employee.name)))

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_session(self._db) as session:
            return session.get(Employee, employee_id)

    def get_by_code(self, employee_code: str) -> Optional[Employee]:
        with db_session(self._db) as session:
            stmt = select(Employee).where(Employee.employee_code == employee_code)
            return session.scalars(stmt).first()

    def find_conflict(
        self,
        *,
        email: Optional[str],
        employee_code: Optional[str],
        exclude_id: Optional[int] = None,
    ) -> Optional[Employee]:
        conditions = []
        if email:
            conditions.append(Employee.email == email)
        if employee_code:
            conditions.append(Employee.employee_code == employee_code)
        if not conditions:
            return None

        stmt = select(Employee).where(or_(*conditions))
        if exclude_id is not None:
            stmt = stmt.where(Employee.id != exclude_id)

        with db_session(self._db) as session:
            return session.scalars(stmt).first()

    def create(self, *, name: str, email: str, employee_code: str) -> Employee:
        with db_session(self._db) as session:
            employee = Employee(name=name, email=email, employee_code=employee_code)
            session.add(employee)
            session.flush()
            return employee

    def update(self, employee_id: int, changes: dict) -> Optional[Employee]:
        with db_session(self._db) as session:
            employee = session.get(Employee, employee_id)
            if not employee:
                return None
            for field, value in changes.items():
                setattr(employee, field, value)
            session.flush()
            return employee

    def delete_by_id(self, employee_id: int) -> bool:
        with db_session(self._db) as session:
            employee = session.get(Employee, employee_id)
            if not employee:
                return False
            # ORM cascades remove the employee's breaks, logs, assignments, ...
            session.delete(employee)
            return True
