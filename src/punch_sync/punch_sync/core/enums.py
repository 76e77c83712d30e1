from __future__ import annotations

from enum import Enum


class HttpVerb(str, Enum):
    """Two verbs understood by the remote endpoint."""

    GET = "GET"
    POST = "POST"


class EnvelopeStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class PunchField(str, Enum):
    """Editable punch columns of a unified row, named as on the wire."""

    CHECK_IN = "checkIn"
    CHECK_OUT = "checkOut"


class ReportType(str, Enum):
    DAILY = "daily"
    EMPLOYEE = "employee"
    RANGE = "range"


class SyncStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
