from __future__ import annotations

import logging
from typing import Optional

from ..core.exceptions import BusinessRuleError, NotFoundError
from ..employees.repository import EmployeeRepository
from ..tags.repository import TagRepository
from .model import Assignment
from .repository import AssignmentRepository
from .schemas import AssignmentCreate

logger = logging.getLogger(__name__)


class AssignmentService:
    def __init__(self, assignments: AssignmentRepository, employees: EmployeeRepository, tags: TagRepository):
        self._assignments = assignments
        self._employees = employees
        self._tags = tags

    def list_for(self, *, employee_id: Optional[int] = None):
        return self._assignments.list_for(employee_id=employee_id)

    def create(self, data: AssignmentCreate) -> Assignment:
        if self._assignments.get_for_employee_and_tag(data.employee_id, data.tag_id):
            raise BusinessRuleError("Assignment already exists for this employee and tag")

        employee = self._employees.get_by_id(data.employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        tag = self._tags.get_by_id(data.tag_id)
        if not tag:
            raise NotFoundError("Tag not found")

        logger.info("Assigning tag %r to employee %r", tag.tag_name, employee.name)
        return self._assignments.create(
            employee_id=data.employee_id,
            tag_id=data.tag_id,
            is_mandatory=data.is_mandatory,
        )

    def delete(self, assignment_id: int) -> None:
        if not self._assignments.delete_by_id(assignment_id):
            raise NotFoundError("Assignment not found")
