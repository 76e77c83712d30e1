from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Employee:
    """Roster entry. ``id`` is the stable identity every other record refers to."""

    id: str
    name: str
    job_title: str

    @classmethod
    def from_wire(cls, raw: Mapping[str, Any]) -> "Employee":
        return cls(
            id=str(raw["id"]),
            name=str(raw.get("name") or ""),
            job_title=str(raw.get("jobTitle") or ""),
        )

    def to_wire(self) -> dict:
        return {"id": self.id, "name": self.name, "jobTitle": self.job_title}
