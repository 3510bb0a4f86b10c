from __future__ import annotations

from datetime import date
from typing import Protocol


class DashboardRepository(Protocol):
    def count_employees(self) -> int:
        raise NotImplementedError

    def count_tags(self) -> int:
        raise NotImplementedError

    def count_employees_with_logs_on(self, log_date: date) -> int:
        raise NotImplementedError

    def count_issues_with_status(self, status: str) -> int:
        raise NotImplementedError
