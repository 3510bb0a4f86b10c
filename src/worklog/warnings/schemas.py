from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schema import IsoDate, PositiveId, RequestSchema


class WarningCreate(RequestSchema):
    employee_id: PositiveId
    warning_message: str = Field(min_length=1, max_length=500)
    warning_date: Optional[IsoDate] = None


class WarningUpdate(RequestSchema):
    is_active: bool = Field(strict=True)
