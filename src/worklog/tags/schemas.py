from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field

from ..common.schema import RequestSchema

TagName = Annotated[str, Field(min_length=1, max_length=100)]
TimeMinutes = Annotated[int, Field(strict=True, ge=1, le=480)]


class TagCreate(RequestSchema):
    tag_name: TagName
    time_minutes: TimeMinutes


class TagUpdate(RequestSchema):
    tag_name: Optional[TagName] = None
    time_minutes: Optional[TimeMinutes] = None
