from __future__ import annotations

import asyncio
from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

from punch_sync.attendance.board import AttendanceBoard
from punch_sync.attendance.model import AdjustmentPayload, AttendanceRecord
from punch_sync.attendance.service import AttendanceService
from punch_sync.attendance.synchronizer import BatchSynchronizer
from punch_sync.employees.model import Employee
from punch_sync.remote.model import Envelope


class InMemoryEmployees:
    def __init__(self, employees: list[Employee]):
        self.employees = list(employees)
        self.error: Optional[str] = None
        self.calls: list[tuple] = []

    async def list_employees(self) -> Envelope:
        self.calls.append(("list",))
        await asyncio.sleep(0)
        if self.error:
            return Envelope.error(self.error)
        return Envelope.success(list(self.employees))

    async def add_employee(self, employee: Employee) -> Envelope:
        self.calls.append(("add", employee))
        if self.error:
            return Envelope.error(self.error)
        self.employees.append(employee)
        return Envelope.success({"message": f"Employee {employee.name} added successfully."})

    async def update_employee(self, employee: Employee) -> Envelope:
        self.calls.append(("update", employee))
        if self.error:
            return Envelope.error(self.error)
        self.employees = [employee if e.id == employee.id else e for e in self.employees]
        return Envelope.success({"message": "Employee updated successfully."})

    async def delete_employee(self, employee_id: str) -> Envelope:
        self.calls.append(("delete", employee_id))
        if self.error:
            return Envelope.error(self.error)
        self.employees = [e for e in self.employees if e.id != employee_id]
        return Envelope.success({"message": "Employee deleted successfully."})

    async def refresh_cache(self) -> Envelope:
        self.calls.append(("refresh",))
        if self.error:
            return Envelope.error(self.error)
        return Envelope.success({"message": "Cache refreshed."})


class InMemoryAttendance:
    """Record store keyed by (date, employee id) that applies successful adjustments."""

    def __init__(self):
        self.records: dict[tuple[date, str], AttendanceRecord] = {}
        self.report_error: Optional[str] = None
        self.rejections: dict[str, str] = {}
        self.submitted: list[AdjustmentPayload] = []

    def put(self, work_date: date, record: AttendanceRecord) -> None:
        self.records[(work_date, record.employee_id)] = record

    async def get_daily_records(self, work_date: date) -> Envelope:
        await asyncio.sleep(0)
        if self.report_error:
            return Envelope.error(self.report_error)
        return Envelope.success([r for (d, _), r in self.records.items() if d == work_date])

    async def adjust_attendance(self, payload: AdjustmentPayload) -> Envelope:
        self.submitted.append(payload)
        await asyncio.sleep(0)
        if payload.employee_id in self.rejections:
            return Envelope.error(self.rejections[payload.employee_id])
        key = (payload.work_date, payload.employee_id)
        current = self.records.get(key) or AttendanceRecord(employee_id=payload.employee_id)
        self.records[key] = replace(
            current,
            check_in=payload.check_in,
            check_out=payload.check_out,
            is_work_day=bool(payload.check_in and payload.check_out),
        )
        return Envelope.success({"message": "Attendance adjusted successfully."})


@pytest.fixture
def work_date() -> date:
    return date(2024, 5, 1)


@pytest.fixture
def roster() -> list[Employee]:
    return [
        Employee(id="E1", name="Alice", job_title="Dev"),
        Employee(id="E2", name="Bob", job_title="QA"),
    ]


@pytest.fixture
def employees_repo(roster) -> InMemoryEmployees:
    return InMemoryEmployees(roster)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def board(work_date) -> AttendanceBoard:
    return AttendanceBoard(work_date)


@pytest.fixture
def attendance_service(board, employees_repo, attendance_repo) -> AttendanceService:
    return AttendanceService(board, employees_repo, attendance_repo)


@pytest.fixture
def synchronizer(board, attendance_repo, attendance_service) -> BatchSynchronizer:
    return BatchSynchronizer(board, attendance_repo, reload=attendance_service.reload)
