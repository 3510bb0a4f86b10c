from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Assignment


class AssignmentRepository(Protocol):
    def list_for(self, *, employee_id: Optional[int] = None) -> Sequence[Assignment]:
        """Assignments with employee and tag loaded, ordered by employee name then tag name."""
        raise NotImplementedError

    def list_mandatory(self, employee_id: int) -> Sequence[Assignment]:
        raise NotImplementedError

    def get_by_id(self, assignment_id: int) -> Optional[Assignment]:
        raise NotImplementedError

    def get_for_employee_and_tag(self, employee_id: int, tag_id: int) -> Optional[Assignment]:
        raise NotImplementedError

    def create(self, *, employee_id: int, tag_id: int, is_mandatory: bool) -> Assignment:
        raise NotImplementedError

    def delete_by_id(self, assignment_id: int) -> bool:
        raise NotImplementedError
