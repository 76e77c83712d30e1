from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import punch_from_clock
from ..core.enums import PunchField
from ..employees.repository import EmployeeRepository
from .board import AttendanceBoard
from .model import LoadResult, UnifiedRow
from .reconciler import reconcile
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Loads the board for a date and applies operator edits to it."""

    def __init__(
        self,
        board: AttendanceBoard,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
    ):
        self._board = board
        self._employees = employees
        self._attendance = attendance

    @property
    def board(self) -> AttendanceBoard:
        return self._board

    async def load(self, work_date: date) -> LoadResult:
        # Pending edits are discarded up front, whatever their sync state.
        token = self._board.begin_load(work_date)

        roster_env, records_env = await asyncio.gather(
            self._employees.list_employees(),
            self._attendance.get_daily_records(work_date),
        )

        if not roster_env.ok:
            message = roster_env.message or "Failed to fetch employees list."
            logger.warning("Board for %s left empty: %s", work_date, message)
            return LoadResult(work_date=work_date, ok=False, message=message)

        warning = None
        records = records_env.data if records_env.ok else []
        if not records_env.ok:
            warning = records_env.message or "Failed to fetch attendance data, showing full employee list."
            logger.warning("Attendance for %s unavailable: %s", work_date, warning)

        rows = reconcile(roster_env.data, records)
        if not self._board.complete_load(token, rows):
            logger.info("Discarding superseded load for %s", work_date)
            return LoadResult(work_date=work_date, ok=True, row_count=len(rows), superseded=True)

        return LoadResult(work_date=work_date, ok=True, row_count=len(rows), warning=warning)

    async def reload(self) -> LoadResult:
        return await self.load(self._board.work_date)

    async def ensure_loaded(self, work_date: date) -> Optional[LoadResult]:
        """Load ``work_date`` unless the board already shows it."""
        if self._board.loaded and self._board.work_date == work_date:
            return None
        return await self.load(work_date)

    def edit(self, employee_id: str, field: Union[PunchField, str], clock: Optional[str]) -> UnifiedRow:
        """Apply an ``HH:MM`` entry (empty clears the punch) for the board's date."""
        value = punch_from_clock(self._board.work_date, clock)
        return self._board.apply_edit(employee_id, field, value)
