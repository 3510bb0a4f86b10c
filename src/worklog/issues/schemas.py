from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schema import PositiveId, RequestSchema
from ..core.enums import IssueCategory, IssueStatus


class IssueCreate(RequestSchema):
    employee_id: PositiveId
    issue_category: IssueCategory
    issue_description: str = Field(min_length=10, max_length=1000)


class IssueUpdate(RequestSchema):
    issue_status: Optional[IssueStatus] = None
    admin_response: Optional[str] = Field(default=None, max_length=1000)
