from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import request

from ..core.exceptions import AuthenticationError, BadRequestError, NotFoundError, ValidationError
from .perf import PerformanceCollector
from .responses import fail
from .validators import parse_id

logger = logging.getLogger(__name__)


def make_api_view(perf: Optional[PerformanceCollector] = None):
    """Build the decorator every JSON endpoint is wrapped with.

    Domain errors map to 400/401/404; anything else is logged and becomes a 500
    carrying the endpoint's generic message plus the underlying error text.
    """

    def api_view(failure_message: str):
        def decorator(view):
            @wraps(view)
            def wrapper(*args, **kwargs):
                rule = request.url_rule.rule if request.url_rule else request.path
                name = f"{request.method} {rule}"
                try:
                    if perf is None:
                        return view(*args, **kwargs)
                    with perf.measure(name):
                        return view(*args, **kwargs)
                except ValidationError as e:
                    return fail(str(e), 400, details=e.details)
                except BadRequestError as e:
                    return fail(str(e), 400)
                except AuthenticationError as e:
                    return fail(str(e), 401)
                except NotFoundError as e:
                    return fail(str(e), 404)
                except Exception as e:
                    logger.exception("%s failed", name)
                    return fail(failure_message, 500, details=str(e) or "Unknown error")

            return wrapper

        return decorator

    return api_view


def require_id(raw, resource: str) -> int:
    """Path id as int, or a 400 `Invalid <resource> ID`."""
    value = parse_id(raw)
    if value is None:
        raise BadRequestError(f"Invalid {resource} ID")
    return value


def json_body():
    return request.get_json(silent=True)
