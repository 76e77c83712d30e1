from __future__ import annotations

from typing import Any, Mapping

from ..core.constants import ACTION_GENERATE_REPORT
from ..core.enums import ReportType
from ..remote.executor import RemoteExecutor
from ..remote.model import Envelope


class RemoteReportRepository:
    def __init__(self, executor: RemoteExecutor):
        self._executor = executor

    async def generate(self, report_type: ReportType, params: Mapping[str, Any]) -> Envelope:
        return await self._executor.invoke(ACTION_GENERATE_REPORT, {"reportType": report_type.value, **params})
