from __future__ import annotations

from typing import Optional

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.guards import current_user, login_required, owner_required
from ..common.responses import handle_errors, ok, request_data
from ..container import Container
from ..core.enums import PermissionFlag


def register(app: Flask, container: Container) -> None:
    def _year_month() -> tuple[int, int]:
        today = now_local(container.offset).date()
        return request.args.get("year", today.year), request.args.get("month", today.month)

    def _visible_employee() -> Optional[int]:
        """Employee filter for the current user; None means everyone."""

        user = current_user()
        requested = request.args.get("employee_id", type=int)
        if user.is_owner:
            return requested
        if container.permission_service.has_permission(user, PermissionFlag.VIEW_OTHER_SHIFTS):
            return requested
        return user.employee_id

    @app.route("/shifts", endpoint="shifts")
    @login_required
    @handle_errors
    def list_shifts():
        shifts = container.shift_service.list_shifts(employee_id=_visible_employee())
        return ok([container.shift_service.to_view(s) for s in shifts])

    @app.route("/shifts/month", endpoint="shifts_month")
    @login_required
    @handle_errors
    def month_shifts():
        year, month = _year_month()
        shifts = container.shift_service.list_month(year, month, employee_id=_visible_employee())
        return ok([container.shift_service.to_view(s) for s in shifts])

    @app.route("/shifts/calendar", endpoint="shift_calendar")
    @login_required
    @handle_errors
    def calendar():
        year, month = _year_month()
        return ok(container.shift_service.month_calendar(year, month, employee_id=_visible_employee()))

    @app.route("/owner/shifts", methods=["POST"], endpoint="add_shift")
    @owner_required
    @handle_errors
    def add_shift():
        data = request_data()
        shift = container.shift_service.create(
            employee_id=data.get("employee_id"),
            work_date=data.get("date", ""),
            start_time=data.get("start_time", ""),
            end_time=data.get("end_time", ""),
            break_minutes=data.get("break_minutes", 0),
        )
        return ok(container.shift_service.to_view(shift), message="Shift created", status=201)

    @app.route("/owner/shifts/<int:shift_id>", methods=["PUT", "POST"], endpoint="edit_shift")
    @owner_required
    @handle_errors
    def edit_shift(shift_id: int):
        data = request_data()
        container.shift_service.update(
            shift_id,
            work_date=data.get("date"),
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
            break_minutes=data.get("break_minutes"),
        )
        return ok(message="Shift updated")

    @app.route("/owner/shifts/<int:shift_id>/delete", methods=["POST"], endpoint="delete_shift")
    @app.route("/owner/shifts/<int:shift_id>", methods=["DELETE"])
    @owner_required
    @handle_errors
    def delete_shift(shift_id: int):
        container.shift_service.delete(shift_id)
        return ok(message="Shift deleted")
