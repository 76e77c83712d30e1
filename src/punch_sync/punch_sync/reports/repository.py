from __future__ import annotations

from typing import Any, Mapping, Protocol

from ..core.enums import ReportType
from ..remote.model import Envelope


class ReportRepository(Protocol):
    async def generate(self, report_type: ReportType, params: Mapping[str, Any]) -> Envelope:
        """Success data: raw ``{records, summary}`` mapping."""

        raise NotImplementedError
