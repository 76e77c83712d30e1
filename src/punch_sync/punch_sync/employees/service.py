from __future__ import annotations

import logging

from ..common.validators import require_non_empty
from ..core.exceptions import RemoteError
from ..remote.model import Envelope
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def _raise_on_error(envelope: Envelope, fallback: str) -> Envelope:
    if not envelope.ok:
        raise RemoteError(envelope.message or fallback)
    return envelope


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    async def list_employees(self) -> list[Employee]:
        envelope = _raise_on_error(await self._employees.list_employees(), "Failed to fetch employees.")
        return list(envelope.data)

    async def verify_connection(self) -> bool:
        """True when the endpoint answers a roster fetch successfully."""
        envelope = await self._employees.list_employees()
        if not envelope.ok:
            logger.warning("Endpoint check failed: %s", envelope.message)
        return envelope.ok

    async def add_employee(self, *, employee_id: str, name: str, job_title: str) -> str:
        employee = self._build(employee_id, name, job_title)
        envelope = _raise_on_error(await self._employees.add_employee(employee), "Failed to add employee.")
        return envelope.data_message() or f"Employee {employee.id} added."

    async def update_employee(self, *, employee_id: str, name: str, job_title: str) -> str:
        employee = self._build(employee_id, name, job_title)
        envelope = _raise_on_error(await self._employees.update_employee(employee), "Failed to update employee.")
        return envelope.data_message() or f"Employee {employee.id} updated."

    async def delete_employee(self, employee_id: str) -> str:
        employee_id = require_non_empty(employee_id, "Employee ID")
        envelope = _raise_on_error(await self._employees.delete_employee(employee_id), "Failed to delete employee.")
        return envelope.data_message() or f"Employee {employee_id} deleted."

    async def refresh_cache(self) -> str:
        envelope = _raise_on_error(await self._employees.refresh_cache(), "Failed to refresh cache.")
        return envelope.data_message() or "Employee cache refreshed."

    @staticmethod
    def _build(employee_id: str, name: str, job_title: str) -> Employee:
        return Employee(
            id=require_non_empty(employee_id, "Employee ID"),
            name=require_non_empty(name, "Name"),
            job_title=require_non_empty(job_title, "Job title"),
        )
