from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from None


def today() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()


def month_to_date(reference: Optional[date] = None) -> tuple[date, date]:
    """First day of the reference month through the reference day."""
    end = reference or today()
    return end.replace(day=1), end


def punch_from_clock(work_date: date, clock: Optional[str]) -> Optional[str]:
    """Turn an ``HH:MM`` clock entry into the ISO punch sent to the backend.

    An empty entry means "clear this punch" and maps to None.
    """
    if clock is None:
        return None
    if not isinstance(clock, str):
        raise ValidationError(f"Invalid time: {clock!r} (expected HH:MM)")
    if not clock.strip():
        return None
    try:
        parsed = datetime.strptime(clock.strip(), "%H:%M")
    except ValueError:
        raise ValidationError(f"Invalid time: {clock!r} (expected HH:MM)") from None
    return f"{work_date.isoformat()}T{parsed.strftime('%H:%M')}:00"


def clock_from_punch(punch: Optional[str]) -> str:
    """HH:MM part of an ISO punch, or empty string when unset or unreadable."""
    if not punch:
        return ""
    try:
        return datetime.fromisoformat(punch).strftime("%H:%M")
    except ValueError:
        return ""
