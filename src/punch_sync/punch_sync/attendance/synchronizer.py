from __future__ import annotations

import asyncio
import logging
import threading
from typing import Awaitable, Callable, Optional

from .board import AttendanceBoard
from .model import BatchResult, LoadResult, SyncOutcome
from .repository import AttendanceRepository
from .tracker import merge_for_submit

logger = logging.getLogger(__name__)


class BatchSynchronizer:
    """Submits pending edits, one employee at a time or all of them at once."""

    def __init__(
        self,
        board: AttendanceBoard,
        attendance: AttendanceRepository,
        reload: Callable[[], Awaitable[LoadResult]],
    ):
        self._board = board
        self._attendance = attendance
        self._reload = reload
        self._in_flight: set[str] = set()
        self._lock = threading.Lock()
        self._batches_running = 0

    @property
    def saving_all(self) -> bool:
        with self._lock:
            return self._batches_running > 0

    def in_flight(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._in_flight)

    def _claim(self, employee_id: str) -> bool:
        with self._lock:
            if employee_id in self._in_flight:
                return False
            self._in_flight.add(employee_id)
            return True

    def _release(self, employee_id: str) -> None:
        with self._lock:
            self._in_flight.discard(employee_id)

    async def save(self, employee_id: str) -> Optional[SyncOutcome]:
        """Submit the pending edit of one employee.

        Returns None when there is nothing to submit or a submission for the
        same employee is already running.
        """
        tracker = self._board.tracker
        edit = tracker.get(employee_id)
        if edit is None:
            return None
        if not self._claim(employee_id):
            logger.info("Save for %s already in flight", employee_id)
            return None

        try:
            payload = merge_for_submit(
                employee_id,
                self._board.work_date,
                edit,
                self._board.row_for(employee_id),
            )
            envelope = await self._attendance.adjust_attendance(payload)
        finally:
            self._release(employee_id)

        if envelope.ok:
            # The whole entry goes, including fields edited while the request ran.
            tracker.clear(employee_id)
            return SyncOutcome.success(employee_id, envelope.data_message())

        message = envelope.message or f"Failed to save for {employee_id}"
        logger.warning("Failed to save for %s: %s", employee_id, message)
        return SyncOutcome.failure(employee_id, message)

    async def save_all(self) -> BatchResult:
        """Submit every pending edit concurrently, then reload the board.

        The reload runs whatever the outcomes were and drops every pending
        edit, so an edit whose save failed is gone afterwards.
        """
        employee_ids = self._board.tracker.dirty_ids()
        with self._lock:
            self._batches_running += 1
        try:
            settled = await asyncio.gather(
                *(self.save(eid) for eid in employee_ids),
                return_exceptions=True,
            )
        finally:
            with self._lock:
                self._batches_running -= 1

        outcomes: list[SyncOutcome] = []
        for employee_id, result in zip(employee_ids, settled):
            if isinstance(result, BaseException) and not isinstance(result, Exception):
                raise result
            if isinstance(result, Exception):
                logger.error("Save for %s raised", employee_id, exc_info=result)
                outcomes.append(SyncOutcome.failure(employee_id, str(result) or result.__class__.__name__))
            elif result is not None:
                outcomes.append(result)

        failed = sum(1 for o in outcomes if not o.succeeded)
        logger.info("Processed %d pending edits (%d failed); reloading board", len(outcomes), failed)

        reload_result = await self._reload()
        return BatchResult(outcomes=tuple(outcomes), reload=reload_result)
