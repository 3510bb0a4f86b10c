from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from ..database.connection import Database
from ..database.session import db_session
from ..employees.model import Employee
from ..tags.model import Tag
from .model import Assignment
from .repository import AssignmentRepository


class SQLAssignmentRepository(AssignmentRepository):
    def __init__(self, database: Database):
        self._db = database

    def list_for(self, *, employee_id: Optional[int] = None) -> Sequence[Assignment]:
        stmt = (
            select(Assignment)
            .join(Assignment.employee)
            .join(Assignment.tag)
            .options(joinedload(Assignment.employee), joinedload(Assignment.tag))
            .order_by(Employee.name, Tag.tag_name)
        )
        if employee_id is not None:
            stmt = stmt.where(Assignment.employee_id == employee_id)

        with db_session(self._db) as session:
            return list(session.scalars(stmt).unique())

    def list_mandatory(self, employee_id: int) -> Sequence[Assignment]:
        stmt = select(Assignment).where(
            Assignment.employee_id == employee_id,
            Assignment.is_mandatory.is_(True),
        )
        with db_session(self._db) as session:
            return list(session.scalars(stmt))

    def get_by_id(self, assignment_id: int) -> Optional[Assignment]:
        with db_session(self._db) as session:
            return session.get(Assignment, assignment_id)

    def get_for_employee_and_tag(self, employee_id: int, tag_id: int) -> Optional[Assignment]:
        stmt = select(Assignment).where(Assignment.employee_id == employee_id, Assignment.tag_id == tag_id)
        with db_session(self._db) as session:
            return session.scalars(stmt).first()

    def create(self, *, employee_id: int, tag_id: int, is_mandatory: bool) -> Assignment:
        with db_session(self._db) as session:
            assignment = Assignment(employee_id=employee_id, tag_id=tag_id, is_mandatory=is_mandatory)
            session.add(assignment)
            session.flush()
            session.refresh(assignment, ["employee", "tag"])
            return assignment

    def delete_by_id(self, assignment_id: int) -> bool:
        with db_session(self._db) as session:
            assignment = session.get(Assignment, assignment_id)
            if not assignment:
                return False
            session.delete(assignment)
            return True
