from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from ..core.enums import IssueStatus
from ..database.connection import Database
from ..database.session import db_session
from .model import Issue
from .repository import IssueRepository


class SQLIssueRepository(IssueRepository):
    def __init__(self, database: Database):
        self._db = database

    def list_for(self, *, employee_id: Optional[int] = None, status: Optional[str] = None) -> Sequence[Issue]:
        stmt = select(Issue).options(joinedload(Issue.employee))
        if employee_id is not None:
            stmt = stmt.where(Issue.employee_id == employee_id)
        if status:
            stmt = stmt.where(Issue.issue_status == status)
        stmt = stmt.order_by(Issue.raised_date.desc(), Issue.id.desc())

        with db_session(self._db) as session:
            return list(session.scalars(stmt))

    def create(self, *, employee_id: int, issue_category: str, issue_description: str) -> Issue:
        with db_session(self._db) as session:
            issue = Issue(
                employee_id=employee_id,
                issue_category=issue_category,
                issue_description=issue_description,
                issue_status=IssueStatus.PENDING.value,
            )
            session.add(issue)
            session.flush()
            session.refresh(issue, ["employee"])
            return issue

    def get_by_id(self, issue_id: int) -> Optional[Issue]:
        with db_session(self._db) as session:
            return session.get(Issue, issue_id, options=[joinedload(Issue.employee)])

    def update(self, issue_id: int, changes: dict) -> Optional[Issue]:
        with db_session(self._db) as session:
            issue = session.get(Issue, issue_id, options=[joinedload(Issue.employee)])
            if not issue:
                return None
            for field, value in changes.items():
                setattr(issue, field, value)
            session.flush()
            return issue
