from __future__ import annotations

from typing import Protocol

from ..remote.model import Envelope
from .model import Employee


class EmployeeRepository(Protocol):
    """Roster access. Every call answers with an envelope, never raises."""

    async def list_employees(self) -> Envelope:
        """Success data: ``list[Employee]`` in roster order."""

        raise NotImplementedError

    async def add_employee(self, employee: Employee) -> Envelope:
        raise NotImplementedError

    async def update_employee(self, employee: Employee) -> Envelope:
        raise NotImplementedError

    async def delete_employee(self, employee_id: str) -> Envelope:
        raise NotImplementedError

    async def refresh_cache(self) -> Envelope:
        raise NotImplementedError
