from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import month_to_date
from ..common.validators import require_non_empty, require_ordered_range
from ..core.constants import INVALID_JSON_MESSAGE
from ..core.enums import ReportType
from ..core.exceptions import RemoteError
from .model import (
    DailyReportRecord,
    DailyReportSummary,
    EmployeeReportRecord,
    EmployeeReportSummary,
    RangeReportRecord,
    RangeReportSummary,
    Report,
)
from .repository import ReportRepository

logger = logging.getLogger(__name__)


class ReportService:
    """Fetches reports computed remotely; totals are never recomputed here."""

    def __init__(self, reports: ReportRepository):
        self._reports = reports

    async def daily(self, work_date: date) -> Report:
        return await self._fetch(
            ReportType.DAILY,
            {"date": work_date.isoformat()},
            DailyReportRecord.from_wire,
            DailyReportSummary.from_wire,
            "Failed to fetch daily report.",
        )

    async def employee(
        self,
        employee_id: str,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Report:
        employee_id = require_non_empty(employee_id, "Employee ID")
        start, end = self._resolve_range(start, end)
        return await self._fetch(
            ReportType.EMPLOYEE,
            {"employeeId": employee_id, "startDate": start.isoformat(), "endDate": end.isoformat()},
            EmployeeReportRecord.from_wire,
            EmployeeReportSummary.from_wire,
            "Failed to fetch employee report.",
        )

    async def range(self, *, start: Optional[date] = None, end: Optional[date] = None) -> Report:
        start, end = self._resolve_range(start, end)
        return await self._fetch(
            ReportType.RANGE,
            {"startDate": start.isoformat(), "endDate": end.isoformat()},
            RangeReportRecord.from_wire,
            RangeReportSummary.from_wire,
            "Failed to fetch range report.",
        )

    @staticmethod
    def _resolve_range(start: Optional[date], end: Optional[date]) -> tuple[date, date]:
        default_start, default_end = month_to_date(end)
        start = start or default_start
        end = end or default_end
        require_ordered_range(start, end)
        return start, end

    async def _fetch(
        self,
        report_type: ReportType,
        params: Mapping[str, Any],
        record_parser: Callable[[Mapping[str, Any]], Any],
        summary_parser: Callable[[Mapping[str, Any]], Any],
        fallback: str,
    ) -> Report:
        envelope = await self._reports.generate(report_type, params)
        if not envelope.ok:
            raise RemoteError(envelope.message or fallback)

        data = envelope.data if isinstance(envelope.data, Mapping) else {}
        try:
            records = [record_parser(raw) for raw in data.get("records") or []]
            raw_summary = data.get("summary")
            summary = summary_parser(raw_summary) if isinstance(raw_summary, Mapping) else None
        except (KeyError, TypeError, ValueError, AttributeError):
            logger.warning("%s report does not match the expected shape", report_type.value)
            raise RemoteError(INVALID_JSON_MESSAGE) from None
        return Report(records=records, summary=summary)
