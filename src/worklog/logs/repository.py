from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..submissions.model import SubmissionStatus
from .model import Log


@dataclass(frozen=True)
class LogLine:
    """One priced entry of a submission."""

    tag_id: int
    count: int
    total_minutes: int


class LogRepository(Protocol):
    def list_for(
        self,
        *,
        employee_id: Optional[int] = None,
        log_date: Optional[date] = None,
        date_range: Optional[tuple[date, date]] = None,
    ) -> Sequence[Log]:
        raise NotImplementedError

    def list_for_day(self, employee_id: int, log_date: date) -> Sequence[Log]:
        """That day's logs with tag and employee loaded, ordered by tag name."""
        raise NotImplementedError

    def get_by_id(self, log_id: int) -> Optional[Log]:
        raise NotImplementedError

    def save_submission(
        self,
        *,
        employee_id: int,
        log_date: date,
        lines: Sequence[LogLine],
        submitted_at: datetime,
        status_message: str,
        warning_message: Optional[str] = None,
    ) -> Optional[SubmissionStatus]:
        """Upsert the day's logs and lock its submission status in one transaction.

        Returns None when the day was already locked.
        """
        raise NotImplementedError

    def update_count(self, log_id: int, *, count: int, total_minutes: int) -> Optional[Log]:
        """Change one log and refresh the total of its day's submission status."""
        raise NotImplementedError
