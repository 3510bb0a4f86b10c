from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field

from ..common.schema import RequestSchema

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

Name = Annotated[str, Field(min_length=2, max_length=100)]
Email = Annotated[str, Field(pattern=EMAIL_PATTERN, max_length=150)]
EmployeeCode = Annotated[str, Field(min_length=3, max_length=50, pattern=r"^[a-zA-Z0-9]+$")]


class EmployeeCreate(RequestSchema):
    name: Name
    email: Email
    employee_code: EmployeeCode


class EmployeeUpdate(RequestSchema):
    name: Optional[Name] = None
    email: Optional[Email] = None
    employee_code: Optional[EmployeeCode] = None


class EmployeeLogin(RequestSchema):
    employee_code: Annotated[str, Field(min_length=1)]
