from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Mapping, Optional

from ..common.validators import coerce_flag
from ..core.enums import PunchField, SyncStatus


def _optional_text(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


@dataclass(frozen=True)
class AttendanceRecord:
    """One employee's punches for the date the record set was fetched for."""

    employee_id: str
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    work_hours: float = 0.0
    overtime_hours: float = 0.0
    is_work_day: bool = False

    @classmethod
    def from_wire(cls, raw: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            employee_id=str(raw["employeeId"]),
            check_in=_optional_text(raw.get("checkIn")),
            check_out=_optional_text(raw.get("checkOut")),
            work_hours=float(raw.get("workHours") or 0),
            overtime_hours=float(raw.get("overtimeHours") or 0),
            is_work_day=coerce_flag(raw.get("isWorkDay")),
        )


@dataclass(frozen=True)
class UnifiedRow:
    """Reconciled view row: one per roster employee for the board's date."""

    employee_id: str
    employee_name: str
    job_title: str
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    work_hours: float = 0.0
    overtime_hours: float = 0.0
    is_work_day: bool = False

    def punch(self, field: PunchField) -> Optional[str]:
        return self.check_in if field == PunchField.CHECK_IN else self.check_out

    def with_punch(self, field: PunchField, value: Optional[str]) -> "UnifiedRow":
        if field == PunchField.CHECK_IN:
            return replace(self, check_in=value)
        return replace(self, check_out=value)

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "jobTitle": self.job_title,
            "checkIn": self.check_in,
            "checkOut": self.check_out,
            "workHours": self.work_hours,
            "overtimeHours": self.overtime_hours,
            "isWorkDay": self.is_work_day,
        }


@dataclass(frozen=True)
class PendingEdit:
    """Snapshot of the uncommitted punch changes for one employee."""

    employee_id: str
    fields: Mapping[PunchField, Optional[str]]

    def has(self, field: PunchField) -> bool:
        return field in self.fields

    def to_dict(self) -> dict:
        return {"employeeId": self.employee_id, **{f.value: v for f, v in self.fields.items()}}


@dataclass(frozen=True)
class AdjustmentPayload:
    employee_id: str
    work_date: date
    check_in: Optional[str]
    check_out: Optional[str]

    def to_wire(self) -> dict:
        # Both punches are always present; None clears that punch for the day.
        return {
            "employeeId": self.employee_id,
            "date": self.work_date.isoformat(),
            "checkIn": self.check_in,
            "checkOut": self.check_out,
        }


@dataclass(frozen=True)
class SyncOutcome:
    employee_id: str
    status: SyncStatus
    message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == SyncStatus.SUCCESS

    @classmethod
    def success(cls, employee_id: str, message: Optional[str] = None) -> "SyncOutcome":
        return cls(employee_id=employee_id, status=SyncStatus.SUCCESS, message=message)

    @classmethod
    def failure(cls, employee_id: str, message: str) -> "SyncOutcome":
        return cls(employee_id=employee_id, status=SyncStatus.FAILURE, message=message)

    def to_dict(self) -> dict:
        return {"employeeId": self.employee_id, "status": self.status.value, "message": self.message}


@dataclass(frozen=True)
class LoadResult:
    work_date: date
    ok: bool
    row_count: int = 0
    message: Optional[str] = None
    warning: Optional[str] = None
    superseded: bool = False

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.isoformat(),
            "ok": self.ok,
            "rowCount": self.row_count,
            "message": self.message,
            "warning": self.warning,
            "superseded": self.superseded,
        }


@dataclass(frozen=True)
class BatchResult:
    outcomes: tuple[SyncOutcome, ...]
    reload: LoadResult

    @property
    def failures(self) -> tuple[SyncOutcome, ...]:
        return tuple(o for o in self.outcomes if not o.succeeded)

    def to_dict(self) -> dict:
        return {
            "message": "All changes have been processed.",
            "outcomes": [o.to_dict() for o in self.outcomes],
            "failed": len(self.failures),
            "reload": self.reload.to_dict(),
        }
