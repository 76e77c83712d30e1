from __future__ import annotations

import threading
from datetime import date
from typing import Optional, Sequence, Union

from ..core.enums import PunchField
from ..core.exceptions import ValidationError
from .model import PendingEdit, UnifiedRow
from .tracker import DirtyTracker, coerce_field


class AttendanceBoard:
    """Displayed rows of one date plus their pending edits.

    Rows and tracker are only mutated under ``_lock`` and the lock is never held
    across an await, so concurrent console requests interleave exactly like
    coroutines on a single loop: last write wins.
    """

    def __init__(self, work_date: date, *, tracker: Optional[DirtyTracker] = None):
        self._lock = threading.RLock()
        self._work_date = work_date
        self._rows: list[UnifiedRow] = []
        self._tracker = tracker or DirtyTracker()
        self._generation = 0

    @property
    def work_date(self) -> date:
        with self._lock:
            return self._work_date

    @property
    def tracker(self) -> DirtyTracker:
        return self._tracker

    @property
    def loaded(self) -> bool:
        with self._lock:
            return self._generation > 0

    def begin_load(self, work_date: date) -> int:
        """Drop rows and pending edits; return a token identifying this load."""
        with self._lock:
            self._generation += 1
            self._work_date = work_date
            self._rows = []
            self._tracker.clear_all()
            return self._generation

    def complete_load(self, token: int, rows: Sequence[UnifiedRow]) -> bool:
        """Install reconciled rows unless a newer load started meanwhile."""
        with self._lock:
            if token != self._generation:
                return False
            self._rows = list(rows)
            return True

    def rows(self) -> list[UnifiedRow]:
        with self._lock:
            return list(self._rows)

    def row_for(self, employee_id: str) -> Optional[UnifiedRow]:
        with self._lock:
            for row in self._rows:
                if row.employee_id == employee_id:
                    return row
            return None

    def apply_edit(self, employee_id: str, field: Union[PunchField, str], value: Optional[str]) -> UnifiedRow:
        """Show ``value`` immediately and remember it as a pending edit."""
        field = coerce_field(field)
        with self._lock:
            for i, row in enumerate(self._rows):
                if row.employee_id == employee_id:
                    updated = row.with_punch(field, value)
                    self._rows[i] = updated
                    self._tracker.set_field(employee_id, field, value)
                    return updated
        raise ValidationError(f"Employee {employee_id} is not on the current board")

    def pending(self) -> list[PendingEdit]:
        with self._lock:
            edits = (self._tracker.get(eid) for eid in self._tracker.dirty_ids())
            return [e for e in edits if e is not None]

    def search(self, term: str = "") -> list[UnifiedRow]:
        """Rows whose name contains ``term`` (any case) or whose id contains it."""
        rows = self.rows()
        term = (term or "").strip()
        if not term:
            return rows
        lowered = term.lower()
        return [r for r in rows if lowered in r.employee_name.lower() or term in r.employee_id]
