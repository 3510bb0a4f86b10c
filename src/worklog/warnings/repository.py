from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import EmployeeWarning


class WarningRepository(Protocol):
    def list_for(self, *, employee_id: Optional[int] = None, active: Optional[bool] = None) -> Sequence[EmployeeWarning]:
        raise NotImplementedError

    def create(self, *, employee_id: int, warning_date: date, warning_message: str) -> EmployeeWarning:
        raise NotImplementedError

    def set_active(self, warning_id: int, is_active: bool) -> Optional[EmployeeWarning]:
        raise NotImplementedError
