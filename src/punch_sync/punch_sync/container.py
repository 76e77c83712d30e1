from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from .attendance.board import AttendanceBoard
from .attendance.remote_attendance_repository import RemoteAttendanceRepository
from .attendance.service import AttendanceService
from .attendance.synchronizer import BatchSynchronizer
from .common.datetime_utils import today
from .core.constants import DEFAULT_REQUEST_TIMEOUT
from .employees.remote_employee_repository import RemoteEmployeeRepository
from .employees.service import EmployeeService
from .remote.executor import RemoteExecutor
from .reports.remote_report_repository import RemoteReportRepository
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    board: AttendanceBoard

    employees_repo: RemoteEmployeeRepository
    attendance_repo: RemoteAttendanceRepository
    reports_repo: RemoteReportRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    synchronizer: BatchSynchronizer
    report_service: ReportService


def build_container(
    *,
    endpoint_url: Optional[str],
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Container:
    def executor() -> RemoteExecutor:
        # One executor per logical operation so busy/state never collide.
        return RemoteExecutor(endpoint_url, timeout=timeout, transport=transport)

    board = AttendanceBoard(today())

    employees_repo = RemoteEmployeeRepository(executor(), write_executor=executor())
    attendance_repo = RemoteAttendanceRepository(report_executor=executor(), submit_executor=executor())
    reports_repo = RemoteReportRepository(executor())

    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(board, employees_repo, attendance_repo)
    synchronizer = BatchSynchronizer(board, attendance_repo, reload=attendance_service.reload)
    report_service = ReportService(reports_repo)

    return Container(
        board=board,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        reports_repo=reports_repo,
        employee_service=employee_service,
        attendance_service=attendance_service,
        synchronizer=synchronizer,
        report_service=report_service,
    )
