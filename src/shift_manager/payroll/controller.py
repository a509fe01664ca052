from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.guards import current_user, employee_required, owner_required, permission_required
from ..common.responses import fail, handle_errors, ok
from ..container import Container
from ..core.enums import PermissionFlag


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    def _year_month() -> tuple[int, int]:
        today = now_local(container.offset).date()
        return request.args.get("year", today.year, type=int), request.args.get("month", today.month, type=int)

    @app.route("/owner/payroll", endpoint="owner_payroll")
    @owner_required
    @handle_errors
    def monthly_payroll():
        year, month = _year_month()
        report = service.monthly_report(year, month, employee_id=request.args.get("employee_id", type=int))
        return ok(
            {
                "year": report.year,
                "month": report.month,
                "rows": report.rows,
                "total_net_hours": report.total_net_hours,
                "total_salary": report.total_salary,
            }
        )

    @app.route("/payroll/me", endpoint="my_payroll")
    @employee_required
    @permission_required(PermissionFlag.VIEW_PAYROLL)
    @handle_errors
    def my_payroll():
        year, month = _year_month()
        row = service.employee_payroll(current_user().employee_id, year, month)
        if row is None:
            return fail("No payroll data for this month", 404)
        return ok(row)

    @app.route("/payroll/me/stats", endpoint="my_payroll_stats")
    @employee_required
    @handle_errors
    def my_stats():
        year, month = _year_month()
        line = service.employee_month_line(current_user().employee_id, year, month)
        return ok(service.line_to_view(line))
