from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_code(self, employee_code: str) -> Optional[Employee]:
        raise NotImplementedError

    def find_conflict(
        self,
        *,
        email: Optional[str],
        employee_code: Optional[str],
        exclude_id: Optional[int] = None,
    ) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, name: str, email: str, employee_code: str) -> Employee:
        raise NotImplementedError

    def update(self, employee_id: int, changes: dict) -> Optional[Employee]:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError
