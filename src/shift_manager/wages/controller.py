from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import to_date_key
from ..common.guards import owner_required
from ..common.responses import fail, handle_errors, ok, request_data
from ..container import Container
from .model import HourlyWage


def register(app: Flask, container: Container) -> None:
    service = container.wage_service

    def _view(w: HourlyWage) -> dict:
        return {
            "id": w.wage_id,
            "employee_id": w.employee_id,
            "employee_name": w.employee_name or "",
            "hourly_wage": w.hourly_wage,
            "effective_date": to_date_key(w.effective_date, offset=container.offset) or "",
        }

    @app.route("/owner/wages", methods=["GET"], endpoint="owner_wages")
    @owner_required
    @handle_errors
    def list_wages():
        rows = service.list_wages(employee_id=request.args.get("employee_id", type=int))
        return ok([_view(w) for w in rows])

    @app.route("/owner/wages", methods=["POST"], endpoint="set_wage")
    @owner_required
    @handle_errors
    def set_wage():
        data = request_data()
        wage = service.set_wage(
            employee_id=data.get("employee_id"),
            hourly_wage=data.get("hourly_wage"),
            effective_date=data.get("effective_date", ""),
        )
        return ok(_view(wage), message="Hourly wage saved", status=201)

    @app.route("/owner/wages/<int:employee_id>/history", endpoint="wage_history")
    @owner_required
    @handle_errors
    def history(employee_id: int):
        return ok([_view(w) for w in service.history(employee_id)])

    @app.route("/owner/wages/<int:employee_id>/current", endpoint="current_wage")
    @owner_required
    @handle_errors
    def current(employee_id: int):
        wage = service.current(employee_id)
        if not wage:
            return fail("No hourly wage is set for this employee", 404)
        return ok(_view(wage))

    @app.route("/owner/wages/<int:wage_id>/delete", methods=["POST"], endpoint="delete_wage")
    @app.route("/owner/wages/<int:wage_id>", methods=["DELETE"])
    @owner_required
    @handle_errors
    def delete_wage(wage_id: int):
        service.delete(wage_id)
        return ok(message="Hourly wage deleted")
