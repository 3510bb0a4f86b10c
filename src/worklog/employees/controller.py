from __future__ import annotations

from flask import Flask

from ..common.http import json_body, make_api_view, require_id
from ..common.responses import ok
from ..common.validators import parse
from ..container import Container
from .schemas import EmployeeCreate, EmployeeLogin, EmployeeUpdate


def register(app: Flask, container: Container) -> None:
    api_view = make_api_view(container.perf)

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @api_view("Failed to fetch employees")
    def list_employees():
        employees = container.employee_service.list_all()
        return ok([e.to_dict() for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @api_view("Failed to create employee")
    def create_employee():
        data = parse(EmployeeCreate, json_body())
        employee = container.employee_service.create(data)
        return ok(employee.to_dict(), message="Employee created successfully")

    @app.route("/api/employees/<raw_id>", methods=["GET"], endpoint="get_employee")
    @api_view("Failed to fetch employee")
    def get_employee(raw_id: str):
        employee = container.employee_service.get(require_id(raw_id, "employee"))
        return ok(employee.to_dict())

    @app.route("/api/employees/<raw_id>", methods=["PUT"], endpoint="update_employee")
    @api_view("Failed to update employee")
    def update_employee(raw_id: str):
        employee_id = require_id(raw_id, "employee")
        data = parse(EmployeeUpdate, json_body())
        employee = container.employee_service.update(employee_id, data)
        return ok(employee.to_dict(), message="Employee updated successfully")

    @app.route("/api/employees/<raw_id>", methods=["DELETE"], endpoint="delete_employee")
    @api_view("Failed to delete employee")
    def delete_employee(raw_id: str):
        container.employee_service.delete(require_id(raw_id, "employee"))
        return ok(message="Employee deleted successfully")

    @app.route("/api/employees/login", methods=["POST"], endpoint="employee_login")
    @api_view("Login failed")
    def employee_login():
        data = parse(EmployeeLogin, json_body())
        employee = container.auth_service.login(data.employee_code)
        return ok(employee.to_dict(), message="Login successful")

    @app.route("/api/employees/session", methods=["POST"], endpoint="employee_session")
    @api_view("Session creation failed")
    def employee_session():
        data = parse(EmployeeLogin, json_body())
        employee, session = container.auth_service.create_session(data.employee_code)
        return ok(
            {"employee": employee.to_dict(), "session": session.to_dict()},
            message="Session created successfully",
        )
