from __future__ import annotations

from dataclasses import dataclass

from ..core.exceptions import AuthenticationError, BusinessRuleError, NotFoundError
from .model import Employee
from .repository import EmployeeRepository
from .schemas import EmployeeCreate, EmployeeUpdate

DUPLICATE_EMPLOYEE = "Employee with this email or employee code already exists"


@dataclass(frozen=True)
class EmployeeSession:
    """Echoed back to the client after a code login. Not a credential: no token, no expiry."""

    employee_id: int
    employee_name: str
    employee_code: str

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "employeeCode": self.employee_code,
        }


class AuthService:
    """Use case: employee logs in with their employee code."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def login(self, employee_code: str) -> Employee:
        employee = self._employees.get_by_code(employee_code)
        if not employee:
            raise AuthenticationError("Invalid employee code")
        return employee

    def create_session(self, employee_code: str) -> tuple[Employee, EmployeeSession]:
        employee = self.login(employee_code)
        session = EmployeeSession(
            employee_id=employee.id,
            employee_name=employee.name,
            employee_code=employee.employee_code,
        )
        return employee, session


class EmployeeService:
    """Use case: manage employees (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_all(self):
        return self._employees.list_all()

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create(self, data: EmployeeCreate) -> Employee:
        if self._employees.find_conflict(email=data.email, employee_code=data.employee_code):
            raise BusinessRuleError(DUPLICATE_EMPLOYEE)
        return self._employees.create(name=data.name, email=data.email, employee_code=data.employee_code)

    def update(self, employee_id: int, data: EmployeeUpdate) -> Employee:
        self.get(employee_id)

        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if changes.get("email") or changes.get("employee_code"):
            conflict = self._employees.find_conflict(
                email=changes.get("email"),
                employee_code=changes.get("employee_code"),
                exclude_id=employee_id,
            )
            if conflict:
                raise BusinessRuleError(DUPLICATE_EMPLOYEE)

        employee = self._employees.update(employee_id, changes)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def delete(self, employee_id: int) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")
