from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import SubmissionStatus


class SubmissionStatusRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: int, submission_date: date) -> Optional[SubmissionStatus]:
        raise NotImplementedError

    def list_for(
        self,
        *,
        employee_id: Optional[int] = None,
        submission_date: Optional[date] = None,
        date_range: Optional[tuple[date, date]] = None,
    ) -> Sequence[SubmissionStatus]:
        """Newest first (submission date, then submission time), employee loaded."""
        raise NotImplementedError
