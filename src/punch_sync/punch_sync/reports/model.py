from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from ..common.validators import coerce_flag


def _text(raw: Mapping[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    return None if value in (None, "") else str(value)


def _number(raw: Mapping[str, Any], key: str) -> float:
    return float(raw.get(key) or 0)


@dataclass(frozen=True)
class DailyReportRecord:
    employee_id: str
    employee_name: str
    job_title: str
    check_in: Optional[str]
    check_out: Optional[str]
    work_hours: float
    overtime_hours: float
    is_work_day: bool

    @classmethod
    def from_wire(cls, raw: Mapping[str, Any]) -> "DailyReportRecord":
        return cls(
            employee_id=str(raw["employeeId"]),
            employee_name=str(raw.get("employeeName") or ""),
            job_title=str(raw.get("jobTitle") or ""),
            check_in=_text(raw, "checkIn"),
            check_out=_text(raw, "checkOut"),
            work_hours=_number(raw, "workHours"),
            overtime_hours=_number(raw, "overtimeHours"),
            is_work_day=coerce_flag(raw.get("isWorkDay")),
        )


@dataclass(frozen=True)
class DailyReportSummary:
    total_employees_checked: int
    total_work_hours: float
    total_overtime_hours: float
    report_date: str

    @classmethod
    def from_wire(cls, raw: Mapping[str, Any]) -> "DailyReportSummary":
        return cls(
            total_employees_checked=int(raw.get("totalEmployeesChecked") or 0),
            total_work_hours=_number(raw, "totalWorkHours"),
            total_overtime_hours=_number(raw, "totalOvertimeHours"),
            report_date=str(raw.get("reportDate") or ""),
        )


@dataclass(frozen=True)
class EmployeeReportRecord:
    date: str
    check_in: Optional[str]
    check_out: Optional[str]
    work_hours: float
    overtime_hours: float
    is_work_day: bool

    @property
    def status_label(self) -> str:
        if self.is_work_day:
            return "Present"
        return "Partial" if (self.check_in or self.check_out) else "No Record"

    @classmethod
    def from_wire(cls, raw: Mapping[str, Any]) -> "EmployeeReportRecord":
        return cls(
            date=str(raw["date"]),
            check_in=_text(raw, "checkIn"),
            check_out=_text(raw, "checkOut"),
            work_hours=_number(raw, "workHours"),
            overtime_hours=_number(raw, "overtimeHours"),
            is_work_day=coerce_flag(raw.get("isWorkDay")),
        )


@dataclass(frozen=True)
class EmployeeReportSummary:
    employee_id: str
    employee_name: str
    total_days_in_report: int
    total_work_days: int
    total_work_hours: float
    total_overtime_hours: float

    @classmethod
    def from_wire(cls, raw: Mapping[str, Any]) -> "EmployeeReportSummary":
        return cls(
            employee_id=str(raw.get("employeeId") or ""),
            employee_name=str(raw.get("employeeName") or ""),
            total_days_in_report=int(raw.get("totalDaysInReport") or 0),
            total_work_days=int(raw.get("totalWorkDays") or 0),
            total_work_hours=_number(raw, "totalWorkHours"),
            total_overtime_hours=_number(raw, "totalOvertimeHours"),
        )


@dataclass(frozen=True)
class RangeReportRecord:
    employee_id: str
    employee_name: str
    job_title: str
    total_work_days: int
    total_work_hours: float
    total_overtime_hours: float

    @classmethod
    def from_wire(cls, raw: Mapping[str, Any]) -> "RangeReportRecord":
        return cls(
            employee_id=str(raw["employeeId"]),
            employee_name=str(raw.get("employeeName") or ""),
            job_title=str(raw.get("jobTitle") or ""),
            total_work_days=int(raw.get("totalWorkDays") or 0),
            total_work_hours=_number(raw, "totalWorkHours"),
            total_overtime_hours=_number(raw, "totalOvertimeHours"),
        )


@dataclass(frozen=True)
class RangeReportSummary:
    total_employees_in_report: int
    start_date: str
    end_date: str

    @classmethod
    def from_wire(cls, raw: Mapping[str, Any]) -> "RangeReportSummary":
        return cls(
            total_employees_in_report=int(raw.get("totalEmployeesInReport") or 0),
            start_date=str(raw.get("startDate") or ""),
            end_date=str(raw.get("endDate") or ""),
        )


@dataclass(frozen=True)
class Report:
    """Records plus summary as computed by the backend."""

    records: list
    summary: Any

    def to_dict(self) -> dict:
        return {
            "records": [asdict(r) for r in self.records],
            "summary": asdict(self.summary) if self.summary is not None else None,
        }
