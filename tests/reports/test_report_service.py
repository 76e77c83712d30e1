from __future__ import annotations

import asyncio
from datetime import date

import pytest

from punch_sync.core.enums import ReportType
from punch_sync.core.exceptions import RemoteError, ValidationError
from punch_sync.remote.model import Envelope
from punch_sync.reports.service import ReportService


class FakeReports:
    def __init__(self, envelope: Envelope):
        self._envelope = envelope
        self.last_args = None

    async def generate(self, report_type, params):
        self.last_args = (report_type, dict(params))
        return self._envelope


def test_daily_report_is_decoded():
    repo = FakeReports(
        Envelope.success(
            {
                "records": [
                    {
                        "employeeId": "E1",
                        "employeeName": "Alice",
                        "jobTitle": "Dev",
                        "checkIn": "2024-05-01T08:00:00",
                        "checkOut": None,
                        "workHours": 0,
                        "overtimeHours": 0,
                        "isWorkDay": False,
                    }
                ],
                "summary": {
                    "totalEmployeesChecked": 1,
                    "totalWorkHours": 0,
                    "totalOvertimeHours": 0,
                    "reportDate": "2024-05-01",
                },
            }
        )
    )

    report = asyncio.run(ReportService(repo).daily(date(2024, 5, 1)))

    assert repo.last_args == (ReportType.DAILY, {"date": "2024-05-01"})
    assert report.records[0].check_in == "2024-05-01T08:00:00"
    assert report.summary.total_employees_checked == 1
    assert report.to_dict()["summary"]["report_date"] == "2024-05-01"


def test_employee_report_forwards_range_and_labels_status():
    repo = FakeReports(
        Envelope.success(
            {
                "records": [
                    {"date": "2024-05-01", "checkIn": "2024-05-01T08:00:00", "checkOut": None, "isWorkDay": False},
                    {"date": "2024-05-02", "checkIn": None, "checkOut": None, "isWorkDay": False},
                    {"date": "2024-05-03", "checkIn": "x", "checkOut": "y", "workHours": 8, "isWorkDay": True},
                ],
                "summary": {"employeeId": "E1", "employeeName": "Alice", "totalWorkDays": 1, "totalWorkHours": 8},
            }
        )
    )

    report = asyncio.run(ReportService(repo).employee("E1", start=date(2024, 5, 1), end=date(2024, 5, 3)))

    assert repo.last_args == (
        ReportType.EMPLOYEE,
        {"employeeId": "E1", "startDate": "2024-05-01", "endDate": "2024-05-03"},
    )
    assert [r.status_label for r in report.records] == ["Partial", "No Record", "Present"]
    assert report.summary.total_work_hours == 8


def test_employee_report_requires_id():
    with pytest.raises(ValidationError):
        asyncio.run(ReportService(FakeReports(Envelope.success({}))).employee(""))


def test_range_defaults_to_month_to_date():
    repo = FakeReports(Envelope.success({"records": [], "summary": None}))

    asyncio.run(ReportService(repo).range(end=date(2024, 5, 20)))

    assert repo.last_args == (ReportType.RANGE, {"startDate": "2024-05-01", "endDate": "2024-05-20"})


def test_inverted_range_is_rejected():
    with pytest.raises(ValidationError):
        asyncio.run(ReportService(FakeReports(Envelope.success({}))).range(start=date(2024, 5, 2), end=date(2024, 5, 1)))


def test_remote_error_is_raised():
    with pytest.raises(RemoteError) as exc:
        asyncio.run(ReportService(FakeReports(Envelope.error("Invalid report type"))).daily(date(2024, 5, 1)))
    assert exc.value.message == "Invalid report type"


def test_text_work_day_flag_in_report_is_read_as_boolean():
    repo = FakeReports(
        Envelope.success(
            {"records": [{"date": "2024-05-01", "checkIn": None, "checkOut": None, "isWorkDay": "false"}]}
        )
    )

    report = asyncio.run(ReportService(repo).employee("E1", start=date(2024, 5, 1), end=date(2024, 5, 1)))

    assert report.records[0].is_work_day is False
    assert report.records[0].status_label == "No Record"


def test_unreadable_work_day_flag_is_a_protocol_error():
    repo = FakeReports(Envelope.success({"records": [{"date": "2024-05-01", "isWorkDay": "maybe"}]}))

    with pytest.raises(RemoteError):
        asyncio.run(ReportService(repo).employee("E1", start=date(2024, 5, 1), end=date(2024, 5, 1)))
