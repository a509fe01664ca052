from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import MutableMapping, Optional

import requests

from .api.client import ApiClient
from .attendance.api_attendance_repository import ApiAttendanceRepository
from .attendance.service import AttendanceService
from .auth.api_auth_repository import ApiAuthRepository
from .auth.service import AuthService
from .auth.session import AuthSession
from .dashboard.service import DashboardService
from .employees.api_employee_repository import ApiEmployeeRepository
from .employees.service import EmployeeService
from .gantt.api_gantt_repository import ApiGanttSettingsRepository
from .gantt.service import GanttSettingsService
from .payroll.api_payroll_repository import ApiPayrollRepository
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollService
from .permissions.api_permission_repository import ApiPermissionRepository
from .permissions.service import PermissionService
from .shift_requests.api_shift_request_repository import ApiShiftRequestRepository
from .shift_requests.service import ShiftRequestService
from .shifts.api_shift_repository import ApiShiftRepository
from .shifts.service import ShiftService
from .time_slots.api_time_slot_repository import ApiTimeSlotRepository
from .time_slots.service import TimeSlotService
from .wages.api_wage_repository import ApiHourlyWageRepository
from .wages.service import HourlyWageService


@dataclass(frozen=True)
class Container:
    offset: timedelta
    auth_session: AuthSession
    api_client: ApiClient

    employees_repo: ApiEmployeeRepository
    shifts_repo: ApiShiftRepository
    attendance_repo: ApiAttendanceRepository
    shift_requests_repo: ApiShiftRequestRepository
    wages_repo: ApiHourlyWageRepository
    payroll_repo: ApiPayrollRepository
    time_slots_repo: ApiTimeSlotRepository
    permissions_repo: ApiPermissionRepository
    gantt_repo: ApiGanttSettingsRepository

    auth_service: AuthService
    employee_service: EmployeeService
    shift_service: ShiftService
    attendance_service: AttendanceService
    shift_request_service: ShiftRequestService
    wage_service: HourlyWageService
    payroll_service: PayrollService
    time_slot_service: TimeSlotService
    permission_service: PermissionService
    gantt_service: GanttSettingsService
    dashboard_service: DashboardService


def build_container(
    *,
    session_store: MutableMapping,
    api_base_url: str,
    api_timeout: float,
    utc_offset_hours: float,
    overtime_daily_hours: int,
    http: Optional[requests.Session] = None,
) -> Container:
    offset = timedelta(hours=utc_offset_hours)
    auth_session = AuthSession(session_store)
    client = ApiClient(api_base_url, auth_session, timeout=api_timeout, http=http)

    auth_repo = ApiAuthRepository(client)
    employees_repo = ApiEmployeeRepository(client)
    shifts_repo = ApiShiftRepository(client)
    attendance_repo = ApiAttendanceRepository(client)
    shift_requests_repo = ApiShiftRequestRepository(client)
    wages_repo = ApiHourlyWageRepository(client)
    payroll_repo = ApiPayrollRepository(client)
    time_slots_repo = ApiTimeSlotRepository(client)
    permissions_repo = ApiPermissionRepository(client)
    gantt_repo = ApiGanttSettingsRepository(client)

    attendance_service = AttendanceService(attendance_repo, offset=offset)
    payroll_service = PayrollService(
        payroll_repo,
        attendance_repo,
        wages_repo,
        calculator=StandardPayrollCalculator(offset=offset, overtime_daily_hours=overtime_daily_hours),
        offset=offset,
    )

    return Container(
        offset=offset,
        auth_session=auth_session,
        api_client=client,
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        attendance_repo=attendance_repo,
        shift_requests_repo=shift_requests_repo,
        wages_repo=wages_repo,
        payroll_repo=payroll_repo,
        time_slots_repo=time_slots_repo,
        permissions_repo=permissions_repo,
        gantt_repo=gantt_repo,
        auth_service=AuthService(auth_repo, auth_session),
        employee_service=EmployeeService(employees_repo),
        shift_service=ShiftService(shifts_repo, shift_requests_repo, offset=offset),
        attendance_service=attendance_service,
        shift_request_service=ShiftRequestService(shift_requests_repo, offset=offset),
        wage_service=HourlyWageService(wages_repo, offset=offset),
        payroll_service=payroll_service,
        time_slot_service=TimeSlotService(time_slots_repo, offset=offset),
        permission_service=PermissionService(permissions_repo),
        gantt_service=GanttSettingsService(gantt_repo),
        dashboard_service=DashboardService(
            employees_repo,
            shifts_repo,
            shift_requests_repo,
            attendance_service,
            payroll_service,
            offset=offset,
        ),
    )
