from __future__ import annotations

from datetime import date
from typing import Protocol

from ..remote.model import Envelope
from .model import AdjustmentPayload


class AttendanceRepository(Protocol):
    """Date-scoped attendance access. Every call answers with an envelope."""

    async def get_daily_records(self, work_date: date) -> Envelope:
        """Success data: ``list[AttendanceRecord]`` for ``work_date``."""

        raise NotImplementedError

    async def adjust_attendance(self, payload: AdjustmentPayload) -> Envelope:
        raise NotImplementedError
