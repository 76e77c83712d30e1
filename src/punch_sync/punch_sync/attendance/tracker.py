from __future__ import annotations

import threading
from datetime import date
from typing import Optional, Union

from ..core.enums import PunchField
from ..core.exceptions import ValidationError
from .model import AdjustmentPayload, PendingEdit, UnifiedRow


def coerce_field(field: Union[PunchField, str]) -> PunchField:
    try:
        return PunchField(field)
    except ValueError:
        allowed = ", ".join(f.value for f in PunchField)
        raise ValidationError(f"Unknown punch field {field!r} (expected one of: {allowed})") from None


class DirtyTracker:
    """Uncommitted punch edits keyed by employee id.

    An entry only ever grows field by field and is dropped as a whole. The
    tracker never compares against the original value, so re-entering the
    value that was already saved still counts as dirty.
    """

    def __init__(self):
        self._edits: dict[str, dict[PunchField, Optional[str]]] = {}
        self._lock = threading.RLock()

    def set_field(self, employee_id: str, field: Union[PunchField, str], value: Optional[str]) -> None:
        field = coerce_field(field)
        with self._lock:
            self._edits.setdefault(employee_id, {})[field] = value

    def clear(self, employee_id: str) -> None:
        with self._lock:
            self._edits.pop(employee_id, None)

    def clear_all(self) -> None:
        with self._lock:
            self._edits.clear()

    def is_dirty(self, employee_id: str) -> bool:
        with self._lock:
            return employee_id in self._edits

    def get(self, employee_id: str) -> Optional[PendingEdit]:
        with self._lock:
            fields = self._edits.get(employee_id)
            if fields is None:
                return None
            return PendingEdit(employee_id=employee_id, fields=dict(fields))

    def dirty_ids(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._edits)

    def __len__(self) -> int:
        with self._lock:
            return len(self._edits)

    def __contains__(self, employee_id: object) -> bool:
        return isinstance(employee_id, str) and self.is_dirty(employee_id)


def merge_for_submit(
    employee_id: str,
    work_date: date,
    edit: PendingEdit,
    displayed: Optional[UnifiedRow],
) -> AdjustmentPayload:
    """Build the adjustment payload for one employee.

    A punch present in the edit (even as None) wins; otherwise the value
    currently displayed for the employee is sent, which may itself be an
    optimistic value that was never saved.
    """

    def pick(field: PunchField) -> Optional[str]:
        if edit.has(field):
            return edit.fields[field]
        return displayed.punch(field) if displayed is not None else None

    return AdjustmentPayload(
        employee_id=employee_id,
        work_date=work_date,
        check_in=pick(PunchField.CHECK_IN),
        check_out=pick(PunchField.CHECK_OUT),
    )
