from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, make_api_view, require_id
from ..common.responses import ok
from ..common.schema import EmployeeQuery
from ..common.validators import parse
from ..container import Container
from .schemas import IssueCreate, IssueUpdate


def register(app: Flask, container: Container) -> None:
    api_view = make_api_view(container.perf)

    @app.route("/api/issues", methods=["GET"], endpoint="list_issues")
    @api_view("Failed to fetch issues")
    def list_issues():
        query = parse(EmployeeQuery, request.args.to_dict())
        issues = container.issue_service.list_for(query)
        return ok([i.to_dict(include_employee=True) for i in issues])

    @app.route("/api/issues", methods=["POST"], endpoint="raise_issue")
    @api_view("Failed to create issue")
    def raise_issue():
        issue = container.issue_service.raise_issue(parse(IssueCreate, json_body()))
        return ok(issue.to_dict(include_employee=True), message="Issue raised successfully")

    @app.route("/api/issues/<raw_id>", methods=["PUT"], endpoint="update_issue")
    @api_view("Failed to update issue")
    def update_issue(raw_id):
        issue_id = require_id(raw_id, "issue")
        issue = container.issue_service.update(issue_id, parse(IssueUpdate, json_body()))
        return ok(issue.to_dict(include_employee=True), message="Issue updated successfully")
