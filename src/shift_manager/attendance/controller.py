from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.guards import current_user, employee_required, owner_required, permission_required
from ..common.responses import handle_errors, ok, request_data
from ..container import Container
from ..core.enums import PermissionFlag
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    def _date_arg(name: str):
        value = request.args.get(name)
        if not value:
            return None
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"{name} must be YYYY-MM-DD")

    def _today_view(record):
        return container.attendance_service.to_ui(record) if record else None

    @app.route("/attendance", endpoint="my_attendance")
    @employee_required
    @handle_errors
    def my_attendance():
        limit = request.args.get("limit", type=int)
        history = container.attendance_service.get_history_ui(current_user().employee_id, limit=limit)
        return ok(history)

    @app.route("/attendance/clock-in", methods=["POST"], endpoint="clock_in")
    @employee_required
    @handle_errors
    def clock_in():
        record = container.attendance_service.clock_in(current_user().employee_id)
        return ok(_today_view(record), message="Clocked in")

    @app.route("/attendance/clock-out", methods=["POST"], endpoint="clock_out")
    @employee_required
    @handle_errors
    def clock_out():
        record = container.attendance_service.clock_out(current_user().employee_id)
        return ok(_today_view(record), message="Clocked out")

    @app.route("/attendance/undo", methods=["POST"], endpoint="undo_attendance")
    @employee_required
    @handle_errors
    def undo():
        data = request_data()
        record = container.attendance_service.undo(current_user().employee_id, data.get("action", ""))
        return ok(_today_view(record), message="Undone")

    @app.route("/owner/attendance", methods=["GET"], endpoint="owner_attendance")
    @owner_required
    @handle_errors
    def list_attendance():
        rows = container.attendance_service.list_records(
            employee_id=request.args.get("employee_id", type=int),
            start=_date_arg("start_date"),
            end=_date_arg("end_date"),
        )
        return ok([container.attendance_service.to_ui(r) for r in rows])

    @app.route("/owner/attendance", methods=["POST"], endpoint="add_attendance")
    @permission_required(PermissionFlag.EDIT_ATTENDANCE)
    @handle_errors
    def add_attendance():
        data = request_data()
        record = container.attendance_service.create_record(
            employee_id=data.get("employee_id"),
            work_date=data.get("date", ""),
            clock_in_time=data.get("clock_in_time"),
            clock_out_time=data.get("clock_out_time"),
            status=data.get("status"),
        )
        return ok(container.attendance_service.to_ui(record), message="Attendance recorded", status=201)

    @app.route("/owner/attendance/<int:attendance_id>", methods=["PUT", "POST"], endpoint="edit_attendance")
    @permission_required(PermissionFlag.EDIT_ATTENDANCE)
    @handle_errors
    def edit_attendance(attendance_id: int):
        data = request_data()
        container.attendance_service.update_record(
            attendance_id,
            clock_in_time=data.get("clock_in_time"),
            clock_out_time=data.get("clock_out_time"),
            status=data.get("status"),
        )
        return ok(message="Attendance updated")

    @app.route("/owner/attendance/<int:attendance_id>/delete", methods=["POST"], endpoint="delete_attendance")
    @app.route("/owner/attendance/<int:attendance_id>", methods=["DELETE"])
    @permission_required(PermissionFlag.EDIT_ATTENDANCE)
    @handle_errors
    def delete_attendance(attendance_id: int):
        container.attendance_service.delete_record(attendance_id)
        return ok(message="Attendance deleted")
