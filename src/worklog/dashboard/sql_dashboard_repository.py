from __future__ import annotations

from datetime import date

from sqlalchemy import distinct, func, select

from ..database.connection import Database
from ..database.session import db_session
from ..employees.model import Employee
from ..issues.model import Issue
from ..logs.model import Log
from ..tags.model import Tag
from .repository import DashboardRepository


class SQLDashboardRepository(DashboardRepository):
    def __init__(self, database: Database):
        self._db = database

    def _scalar_count(self, stmt) -> int:
        with db_session(self._db) as session:
            return int(session.scalar(stmt) or 0)

    def count_employees(self) -> int:
        return self._scalar_count(select(func.count(Employee.id)))

    def count_tags(self) -> int:
        return self._scalar_count(select(func.count(Tag.id)))

    def count_employees_with_logs_on(self, log_date: date) -> int:
        return self._scalar_count(select(func.count(distinct(Log.employee_id))).where(Log.log_date == log_date))

    def count_issues_with_status(self, status: str) -> int:
        return self._scalar_count(select(func.count(Issue.id)).where(Issue.issue_status == status))
