from __future__ import annotations

from typing import Optional

from ..common.schema import EmployeeQuery
from .repository import SubmissionStatusRepository


class SubmissionStatusService:
    def __init__(self, submissions: SubmissionStatusRepository):
        self._submissions = submissions

    def list_for(self, query: Optional[EmployeeQuery] = None):
        """Submission statuses matching the filters; no query means no filters."""
        if query is None:
            return self._submissions.list_for()
        return self._submissions.list_for(
            employee_id=query.employee_id,
            submission_date=query.log_date,
            date_range=query.date_range,
        )
