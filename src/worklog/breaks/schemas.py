from __future__ import annotations

from ..common.schema import PositiveId, RequestSchema


class BreakRequest(RequestSchema):
    employee_id: PositiveId


class BreakWarningRequest(RequestSchema):
    employee_id: PositiveId
    break_id: PositiveId
