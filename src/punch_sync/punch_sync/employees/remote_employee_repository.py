from __future__ import annotations

import logging

from ..core.constants import (
    ACTION_ADD_EMPLOYEE,
    ACTION_DELETE_EMPLOYEE,
    ACTION_GET_EMPLOYEES,
    ACTION_REFRESH_EMPLOYEE_CACHE,
    ACTION_UPDATE_EMPLOYEE,
    INVALID_JSON_MESSAGE,
)
from ..core.enums import HttpVerb
from ..remote.executor import RemoteExecutor
from ..remote.model import Envelope
from .model import Employee

logger = logging.getLogger(__name__)


class RemoteEmployeeRepository:
    def __init__(self, executor: RemoteExecutor, *, write_executor: RemoteExecutor | None = None):
        self._executor = executor
        self._write = write_executor or executor

    async def list_employees(self) -> Envelope:
        envelope = await self._executor.invoke(ACTION_GET_EMPLOYEES)
        if not envelope.ok:
            return envelope
        try:
            employees = [Employee.from_wire(raw) for raw in envelope.data]
        except (KeyError, TypeError, AttributeError):
            logger.warning("Roster payload does not match the employee shape")
            return Envelope.error(INVALID_JSON_MESSAGE)
        return Envelope.success(employees, envelope.message)

    async def add_employee(self, employee: Employee) -> Envelope:
        return await self._write.invoke(ACTION_ADD_EMPLOYEE, {"payload": employee.to_wire()}, HttpVerb.POST)

    async def update_employee(self, employee: Employee) -> Envelope:
        return await self._write.invoke(ACTION_UPDATE_EMPLOYEE, {"payload": employee.to_wire()}, HttpVerb.POST)

    async def delete_employee(self, employee_id: str) -> Envelope:
        return await self._write.invoke(ACTION_DELETE_EMPLOYEE, {"payload": {"id": employee_id}}, HttpVerb.POST)

    async def refresh_cache(self) -> Envelope:
        return await self._executor.invoke(ACTION_REFRESH_EMPLOYEE_CACHE)
