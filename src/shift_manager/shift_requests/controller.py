from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.guards import current_user, employee_required, owner_required, permission_required
from ..common.responses import handle_errors, ok, request_data
from ..container import Container
from ..core.enums import PermissionFlag


def register(app: Flask, container: Container) -> None:
    service = container.shift_request_service

    @app.route("/shift-requests", methods=["GET"], endpoint="my_shift_requests")
    @employee_required
    @handle_errors
    def my_requests():
        rows = service.list_for_employee(current_user().employee_id)
        return ok([service.to_view(r) for r in rows])

    @app.route("/shift-requests", methods=["POST"], endpoint="submit_shift_request")
    @employee_required
    @permission_required(PermissionFlag.SUBMIT_SHIFT_REQUESTS)
    @handle_errors
    def submit():
        data = request_data()
        req = service.submit(
            employee_id=current_user().employee_id,
            work_date=data.get("date", ""),
            start_time=data.get("start_time", ""),
            end_time=data.get("end_time", ""),
        )
        return ok(service.to_view(req), message="Shift request submitted", status=201)

    @app.route("/shift-requests/<int:request_id>/delete", methods=["POST"], endpoint="withdraw_shift_request")
    @app.route("/shift-requests/<int:request_id>", methods=["DELETE"])
    @employee_required
    @handle_errors
    def withdraw(request_id: int):
        service.withdraw(employee_id=current_user().employee_id, request_id=request_id)
        return ok(message="Shift request withdrawn")

    @app.route("/owner/shift-requests", endpoint="owner_shift_requests")
    @owner_required
    @handle_errors
    def month_requests():
        today = now_local(container.offset).date()
        rows = service.list_month(request.args.get("year", today.year), request.args.get("month", today.month))
        return ok([service.to_view(r) for r in rows])

    @app.route("/owner/shift-requests/<int:request_id>/approve", methods=["POST"], endpoint="approve_shift_request")
    @owner_required
    @handle_errors
    def approve(request_id: int):
        service.approve(request_id)
        return ok(message="Shift request approved")

    @app.route("/owner/shift-requests/<int:request_id>/reject", methods=["POST"], endpoint="reject_shift_request")
    @owner_required
    @handle_errors
    def reject(request_id: int):
        service.reject(request_id)
        return ok(message="Shift request rejected")
