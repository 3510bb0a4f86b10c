from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_TIMEZONE
from ..core.enums import IssueStatus
from .repository import DashboardRepository


class DashboardService:
    def __init__(self, dashboard: DashboardRepository, *, tz_name: str = DEFAULT_TIMEZONE):
        self._dashboard = dashboard
        self._tz_name = tz_name

    def stats(self, *, today: Optional[date] = None) -> dict:
        """Headline counts; "today" is the calendar date in the configured timezone."""
        today = today or today_local(self._tz_name)
        return {
            "totalEmployees": self._dashboard.count_employees(),
            "totalTags": self._dashboard.count_tags(),
            "todaysSubmissions": self._dashboard.count_employees_with_logs_on(today),
            "pendingIssues": self._dashboard.count_issues_with_status(IssueStatus.PENDING.value),
        }
