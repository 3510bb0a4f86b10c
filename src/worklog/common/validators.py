from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, TypeVar

import pydantic

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=pydantic.BaseModel)


def _field_name(loc: tuple) -> str:
    parts = [str(p) for p in loc]
    return ".".join(parts) if parts else "body"


def _details(exc: pydantic.ValidationError) -> list[dict[str, Any]]:
    return [{"field": _field_name(err["loc"]), "message": err["msg"]} for err in exc.errors()]


def parse(schema: type[SchemaT], data: Any) -> SchemaT:
    """Validate raw request data against a schema.

    Returns the normalized model or raises ValidationError with one entry per failing field.
    """
    if not isinstance(data, Mapping):
        raise ValidationError(details=[{"field": "body", "message": "Expected a JSON object"}])

    try:
        return schema.model_validate(dict(data))
    except pydantic.ValidationError as e:
        raise ValidationError(details=_details(e)) from e


def parse_lenient(schema: type[SchemaT], data: Any) -> Optional[SchemaT]:
    """Like parse(), but a validation failure means "no filters" instead of an error."""
    try:
        return parse(schema, data)
    except ValidationError as e:
        logger.info("Ignoring invalid query filters: %s", e.details)
        return None


def parse_id(raw: Any) -> Optional[int]:
    """Parse a path id segment; None if it is not an integer."""
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return None
