from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, make_api_view, require_id
from ..common.responses import ok
from ..common.schema import EmployeeQuery
from ..common.validators import parse
from ..container import Container
from ..core.exceptions import BadRequestError
from .schemas import LogSubmit, LogUpdate


def register(app: Flask, container: Container) -> None:
    api_view = make_api_view(container.perf)

    @app.route("/api/logs", methods=["GET"], endpoint="list_logs")
    @api_view("Failed to fetch logs")
    def list_logs():
        query = parse(EmployeeQuery, request.args.to_dict())
        logs = container.log_service.list_for(query)
        return ok([log.to_dict(include_employee=True, include_tag=True) for log in logs])

    @app.route("/api/logs", methods=["POST"], endpoint="submit_logs")
    @api_view("Failed to submit logs")
    def submit_logs():
        data = parse(LogSubmit, json_body())
        result = container.log_service.submit(data)
        return ok(result.to_dict(), message="Work log submitted and locked successfully")

    @app.route("/api/logs/by-date", methods=["GET"], endpoint="logs_by_date")
    @api_view("Failed to fetch logs")
    def logs_by_date():
        query = parse(EmployeeQuery, request.args.to_dict())
        if not query.employee_id or not query.log_date:
            raise BadRequestError("Employee ID and log date are required")
        logs, status = container.log_service.by_date(query.employee_id, query.log_date)
        return ok(
            [log.to_dict(include_employee=True, include_tag=True) for log in logs],
            submissionStatus=status.to_dict() if status else None,
        )

    @app.route("/api/logs/summary", methods=["GET"], endpoint="logs_summary")
    @api_view("Failed to fetch logs summary")
    def logs_summary():
        query = parse(EmployeeQuery, request.args.to_dict())
        if not query.employee_id:
            raise BadRequestError("Employee ID is required")
        return ok(container.log_service.summary(query.employee_id))

    @app.route("/api/logs/<raw_id>", methods=["PUT"], endpoint="update_log")
    @api_view("Failed to update log")
    def update_log(raw_id):
        log_id = require_id(raw_id, "log")
        data = parse(LogUpdate, json_body())
        log = container.log_service.update_count(log_id, data.count)
        return ok(log.to_dict(include_employee=True, include_tag=True), message="Log updated successfully")
