from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, make_api_view, require_id
from ..common.responses import ok
from ..common.schema import EmployeeQuery
from ..common.validators import parse
from ..container import Container
from .schemas import WarningCreate, WarningUpdate


def register(app: Flask, container: Container) -> None:
    api_view = make_api_view(container.perf)

    @app.route("/api/warnings", methods=["GET"], endpoint="list_warnings")
    @api_view("Failed to fetch warnings")
    def list_warnings():
        query = parse(EmployeeQuery, request.args.to_dict())
        warnings = container.warning_service.list_for(query)
        return ok([w.to_dict(include_employee=True) for w in warnings])

    @app.route("/api/warnings", methods=["POST"], endpoint="create_warning")
    @api_view("Failed to create warning")
    def create_warning():
        warning = container.warning_service.create(parse(WarningCreate, json_body()))
        return ok(warning.to_dict(include_employee=True), message="Warning created successfully")

    @app.route("/api/warnings/<raw_id>", methods=["PUT"], endpoint="update_warning")
    @api_view("Failed to update warning")
    def update_warning(raw_id):
        warning_id = require_id(raw_id, "warning")
        data = parse(WarningUpdate, json_body())
        warning = container.warning_service.set_active(warning_id, data.is_active)
        return ok(warning.to_dict(include_employee=True), message="Warning updated successfully")
