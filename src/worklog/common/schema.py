"""Shared pieces for request schemas."""

from __future__ import annotations

import re
from datetime import date
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.constants import DATE_PATTERN
from ..core.enums import IssueStatus

_DATE_RE = re.compile(DATE_PATTERN)


def _check_date_format(value: Any) -> Any:
    if isinstance(value, str) and not _DATE_RE.match(value):
        raise ValueError("Invalid date format")
    return value


class RequestSchema(BaseModel):
    """Base for request bodies / query strings: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


# JSON bodies: ids must be real integers, not strings.
PositiveId = Annotated[int, Field(strict=True, gt=0)]
NonNegativeCount = Annotated[int, Field(strict=True, ge=0)]

IsoDate = Annotated[date, BeforeValidator(_check_date_format)]

# Query strings arrive as text and are coerced.
QueryId = Annotated[int, Field(gt=0)]
QueryFlag = Annotated[bool, BeforeValidator(lambda v: v == "true" if isinstance(v, str) else v)]


class EmployeeQuery(RequestSchema):
    """Filters accepted by the list endpoints (`?employeeId=&logDate=&...`)."""

    employee_id: Optional[QueryId] = None
    log_date: Optional[IsoDate] = None
    break_date: Optional[IsoDate] = None
    date_from: Optional[IsoDate] = None
    date_to: Optional[IsoDate] = None
    active: Optional[QueryFlag] = None
    status: Optional[IssueStatus] = None

    @property
    def date_range(self) -> Optional[tuple[date, date]]:
        if self.date_from and self.date_to:
            return self.date_from, self.date_to
        return None
