from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping

from ..core.constants import ACTION_ADJUST_ATTENDANCE, ACTION_GENERATE_REPORT, INVALID_JSON_MESSAGE
from ..core.enums import HttpVerb, ReportType
from ..remote.executor import RemoteExecutor
from ..remote.model import Envelope
from .model import AdjustmentPayload, AttendanceRecord

logger = logging.getLogger(__name__)


class RemoteAttendanceRepository:
    def __init__(self, report_executor: RemoteExecutor, submit_executor: RemoteExecutor):
        self._reports = report_executor
        self._submit = submit_executor

    async def get_daily_records(self, work_date: date) -> Envelope:
        envelope = await self._reports.invoke(
            ACTION_GENERATE_REPORT,
            {"reportType": ReportType.DAILY.value, "date": work_date.isoformat()},
        )
        if not envelope.ok:
            return envelope
        raw_records = []
        if isinstance(envelope.data, Mapping):
            raw_records = envelope.data.get("records") or []
        try:
            records = [AttendanceRecord.from_wire(raw) for raw in raw_records]
        except (KeyError, TypeError, ValueError, AttributeError):
            logger.warning("Daily report for %s does not match the record shape", work_date)
            return Envelope.error(INVALID_JSON_MESSAGE)
        return Envelope.success(records, envelope.message)

    async def adjust_attendance(self, payload: AdjustmentPayload) -> Envelope:
        params: Mapping[str, Any] = {"payload": payload.to_wire()}
        return await self._submit.invoke(ACTION_ADJUST_ATTENDANCE, params, HttpVerb.POST)
