from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import utcnow
from ..common.schema import EmployeeQuery
from ..core.enums import IssueStatus
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .model import Issue
from .repository import IssueRepository
from .schemas import IssueCreate, IssueUpdate

logger = logging.getLogger(__name__)


class IssueService:
    """Employees raise workplace issues; admins move them through pending -> in_progress -> resolved."""

    def __init__(self, issues: IssueRepository, employees: EmployeeRepository):
        self._issues = issues
        self._employees = employees

    def list_for(self, query: Optional[EmployeeQuery] = None):
        if query is None:
            return self._issues.list_for()
        return self._issues.list_for(
            employee_id=query.employee_id,
            status=query.status.value if query.status else None,
        )

    def raise_issue(self, data: IssueCreate) -> Issue:
        if not self._employees.get_by_id(data.employee_id):
            raise NotFoundError("Employee not found")

        issue = self._issues.create(
            employee_id=data.employee_id,
            issue_category=data.issue_category.value,
            issue_description=data.issue_description,
        )
        logger.info("Employee %s raised %s issue %s", data.employee_id, issue.issue_category, issue.id)
        return issue

    def update(self, issue_id: int, data: IssueUpdate, *, now: Optional[datetime] = None) -> Issue:
        current = self._issues.get_by_id(issue_id)
        if not current:
            raise NotFoundError("Issue not found")

        changes = {}
        if data.issue_status is not None:
            changes["issue_status"] = data.issue_status.value
            if data.issue_status is not IssueStatus.RESOLVED:
                changes["resolved_date"] = None
            elif current.issue_status != IssueStatus.RESOLVED.value or current.resolved_date is None:
                changes["resolved_date"] = now or utcnow()
        if data.admin_response is not None:
            changes["admin_response"] = data.admin_response

        issue = self._issues.update(issue_id, changes)
        if not issue:
            raise NotFoundError("Issue not found")
        return issue
