from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import today_local
from ..common.schema import EmployeeQuery
from ..core.constants import DEFAULT_TIMEZONE
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .model import EmployeeWarning
from .repository import WarningRepository
from .schemas import WarningCreate

logger = logging.getLogger(__name__)


class WarningService:
    """Manual warnings (admin) and their dismissal."""

    def __init__(self, warnings: WarningRepository, employees: EmployeeRepository, *, tz_name: str = DEFAULT_TIMEZONE):
        self._warnings = warnings
        self._employees = employees
        self._tz_name = tz_name

    def list_for(self, query: Optional[EmployeeQuery] = None):
        if query is None:
            return self._warnings.list_for()
        return self._warnings.list_for(employee_id=query.employee_id, active=query.active)

    def create(self, data: WarningCreate) -> EmployeeWarning:
        if not self._employees.get_by_id(data.employee_id):
            raise NotFoundError("Employee not found")

        warning = self._warnings.create(
            employee_id=data.employee_id,
            warning_date=data.warning_date or today_local(self._tz_name),
            warning_message=data.warning_message,
        )
        logger.info("Warning %s issued to employee %s", warning.id, data.employee_id)
        return warning

    def set_active(self, warning_id: int, is_active: bool) -> EmployeeWarning:
        warning = self._warnings.set_active(warning_id, is_active)
        if not warning:
            raise NotFoundError("Warning not found")
        return warning
