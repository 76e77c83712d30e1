from __future__ import annotations

from typing import Iterable, Sequence

from ..employees.model import Employee
from .model import AttendanceRecord, UnifiedRow


def reconcile(roster: Sequence[Employee], records: Iterable[AttendanceRecord]) -> list[UnifiedRow]:
    """Merge the roster with one date's sparse records into one row per employee.

    Rows follow roster order. Employees without a record get zero defaults;
    records whose employee is not on the roster are dropped. When a record set
    repeats an employee id, the last record wins.
    """
    by_employee = {r.employee_id: r for r in records}

    rows: list[UnifiedRow] = []
    for emp in roster:
        rec = by_employee.get(emp.id)
        if rec is None:
            rows.append(UnifiedRow(employee_id=emp.id, employee_name=emp.name, job_title=emp.job_title))
            continue
        rows.append(
            UnifiedRow(
                employee_id=emp.id,
                employee_name=emp.name,
                job_title=emp.job_title,
                check_in=rec.check_in,
                check_out=rec.check_out,
                work_hours=rec.work_hours,
                overtime_hours=rec.overtime_hours,
                is_work_day=rec.is_work_day,
            )
        )
    return rows
