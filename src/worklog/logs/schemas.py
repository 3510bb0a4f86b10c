from __future__ import annotations

from ..common.schema import IsoDate, NonNegativeCount, PositiveId, RequestSchema


class LogEntry(RequestSchema):
    tag_id: PositiveId
    count: NonNegativeCount


class LogSubmit(RequestSchema):
    employee_id: PositiveId
    logs: list[LogEntry]
    log_date: IsoDate


class LogUpdate(RequestSchema):
    count: NonNegativeCount
