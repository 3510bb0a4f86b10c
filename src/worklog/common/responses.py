"""Uniform JSON envelope: {success, data | error, message?, details?}."""

from __future__ import annotations

from typing import Any, Optional

from flask import jsonify

_NO_DATA = object()


def ok(data: Any = _NO_DATA, *, message: Optional[str] = None, **extra: Any):
    body: dict[str, Any] = {"success": True}
    if data is not _NO_DATA:
        body["data"] = data
    if message:
        body["message"] = message
    body.update(extra)
    return jsonify(body), 200


def fail(error: str, status: int, *, details: Any = None):
    body: dict[str, Any] = {"success": False, "error": error}
    if details is not None:
        body["details"] = details
    return jsonify(body), status
