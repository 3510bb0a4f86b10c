from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, make_api_view
from ..common.responses import ok
from ..common.schema import EmployeeQuery
from ..common.validators import parse, parse_lenient
from ..container import Container
from ..core.exceptions import BadRequestError
from .schemas import BreakRequest, BreakWarningRequest


def register(app: Flask, container: Container) -> None:
    api_view = make_api_view(container.perf)

    @app.route("/api/breaks", methods=["GET"], endpoint="list_breaks")
    @api_view("Failed to fetch breaks")
    def list_breaks():
        query = parse_lenient(EmployeeQuery, request.args.to_dict())
        breaks = container.break_service.list_for(query)
        return ok([b.to_dict(include_employee=True) for b in breaks])

    @app.route("/api/breaks/in", methods=["POST"], endpoint="break_in")
    @api_view("Failed to start break")
    def break_in():
        data = parse(BreakRequest, json_body())
        brk = container.break_service.start(data.employee_id)
        return ok(brk.to_dict(include_employee=True), message="Break started successfully")

    @app.route("/api/breaks/out", methods=["POST"], endpoint="break_out")
    @api_view("Failed to end break")
    def break_out():
        data = parse(BreakRequest, json_body())
        brk = container.break_service.end(data.employee_id)
        return ok(brk.to_dict(include_employee=True), message="Break ended successfully")

    @app.route("/api/breaks/status", methods=["GET"], endpoint="break_status")
    @api_view("Failed to fetch break status")
    def break_status():
        query = parse(EmployeeQuery, request.args.to_dict())
        if not query.employee_id:
            raise BadRequestError("Employee ID is required")
        active = container.break_service.status(query.employee_id)
        return ok(active.to_dict(include_employee=True) if active else None)

    @app.route("/api/breaks/warning", methods=["POST"], endpoint="break_warning")
    @api_view("Failed to send warning")
    def break_warning():
        data = parse(BreakWarningRequest, json_body())
        container.break_service.send_warning(data.employee_id, data.break_id)
        return ok(message="Warning sent successfully")
