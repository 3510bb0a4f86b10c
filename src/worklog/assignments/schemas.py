from __future__ import annotations

from pydantic import Field

from ..common.schema import PositiveId, RequestSchema


class AssignmentCreate(RequestSchema):
    employee_id: PositiveId
    tag_id: PositiveId
    is_mandatory: bool = Field(default=False, strict=True)
