from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, make_api_view, require_id
from ..common.responses import ok
from ..common.schema import EmployeeQuery
from ..common.validators import parse, parse_lenient
from ..container import Container
from .schemas import AssignmentCreate


def register(app: Flask, container: Container) -> None:
    api_view = make_api_view(container.perf)

    @app.route("/api/assignments", methods=["GET"], endpoint="list_assignments")
    @api_view("Failed to fetch assignments")
    def list_assignments():
        query = parse_lenient(EmployeeQuery, request.args.to_dict())
        employee_id = query.employee_id if query else None
        assignments = container.assignment_service.list_for(employee_id=employee_id)
        return ok([a.to_dict(include_relations=True) for a in assignments])

    @app.route("/api/assignments", methods=["POST"], endpoint="create_assignment")
    @api_view("Failed to create assignment")
    def create_assignment():
        assignment = container.assignment_service.create(parse(AssignmentCreate, json_body()))
        return ok(assignment.to_dict(include_relations=True), message="Assignment created successfully")

    @app.route("/api/assignments/<raw_id>", methods=["DELETE"], endpoint="delete_assignment")
    @api_view("Failed to delete assignment")
    def delete_assignment(raw_id: str):
        container.assignment_service.delete(require_id(raw_id, "assignment"))
        return ok(message="Assignment deleted successfully")
