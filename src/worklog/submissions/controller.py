from __future__ import annotations

from flask import Flask, request

from ..common.http import make_api_view
from ..common.responses import ok
from ..common.schema import EmployeeQuery
from ..common.validators import parse_lenient
from ..container import Container


def register(app: Flask, container: Container) -> None:
    api_view = make_api_view(container.perf)

    @app.route("/api/submission-status", methods=["GET"], endpoint="list_submission_statuses")
    @api_view("Failed to fetch submission statuses")
    def list_submission_statuses():
        # Malformed filters are ignored here (unfiltered list), unlike the other endpoints.
        query = parse_lenient(EmployeeQuery, request.args.to_dict())
        statuses = container.submission_service.list_for(query)
        return ok([s.to_dict(include_employee=True) for s in statuses])
