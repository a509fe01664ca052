from __future__ import annotations

from flask import Flask

from ..common.guards import owner_required
from ..common.responses import handle_errors, ok, request_data
from ..container import Container
from .model import Employee


def _view(e: Employee) -> dict:
    return {"id": e.employee_id, "name": e.name, "hourly_wage": e.hourly_wage, "created_at": e.created_at}


def register(app: Flask, container: Container) -> None:
    @app.route("/owner/employees", methods=["GET"], endpoint="owner_employees")
    @owner_required
    @handle_errors
    def list_employees():
        return ok([_view(e) for e in container.employee_service.list_employees()])

    @app.route("/owner/employees", methods=["POST"], endpoint="add_employee")
    @owner_required
    @handle_errors
    def add_employee():
        data = request_data()
        employee = container.employee_service.register(name=data.get("name", ""), hourly_wage=data.get("hourly_wage"))
        return ok(_view(employee), message="Employee registered", status=201)

    @app.route("/owner/employees/<int:employee_id>", methods=["GET"], endpoint="owner_employee")
    @owner_required
    @handle_errors
    def get_employee(employee_id: int):
        return ok(_view(container.employee_service.get_employee(employee_id)))

    @app.route("/owner/employees/<int:employee_id>", methods=["PUT", "POST"], endpoint="edit_employee")
    @owner_required
    @handle_errors
    def edit_employee(employee_id: int):
        data = request_data()
        employee = container.employee_service.update(
            employee_id, name=data.get("name", ""), hourly_wage=data.get("hourly_wage")
        )
        return ok(_view(employee), message="Employee updated")

    @app.route("/owner/employees/<int:employee_id>/delete", methods=["POST"], endpoint="delete_employee")
    @app.route("/owner/employees/<int:employee_id>", methods=["DELETE"])
    @owner_required
    @handle_errors
    def delete_employee(employee_id: int):
        container.employee_service.delete(employee_id)
        return ok(message="Employee deleted")
