from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import Break


class BreakRepository(Protocol):
    def list_for(
        self,
        *,
        employee_id: Optional[int] = None,
        break_date: Optional[date] = None,
        date_range: Optional[tuple[date, date]] = None,
        active: Optional[bool] = None,
    ) -> Sequence[Break]:
        raise NotImplementedError

    def get_by_id(self, break_id: int) -> Optional[Break]:
        raise NotImplementedError

    def get_active(self, employee_id: int) -> Optional[Break]:
        raise NotImplementedError

    def start_if_none_active(self, *, employee_id: int, break_date: date, break_in_time: datetime) -> Optional[Break]:
        """Open a break; None when the employee already has one open.

        Must be atomic: two concurrent calls for one employee yield at most one break.
        """
        raise NotImplementedError

    def close(
        self,
        *,
        break_id: int,
        break_out_time: datetime,
        duration_minutes: int,
        warning_message: Optional[str] = None,
    ) -> Optional[Break]:
        """Close an open break; with a warning_message also file a warning and mark the break warned.

        Returns None when the break does not exist or is already closed.
        """
        raise NotImplementedError

    def record_warning(self, *, break_id: int, employee_id: int, warning_date: date, warning_message: str) -> bool:
        raise NotImplementedError
