from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from ..core.constants import INVALID_JSON_MESSAGE
from ..core.enums import EnvelopeStatus


@dataclass(frozen=True)
class Envelope:
    """Uniform ``{status, data, message?}`` shape of every remote answer."""

    status: EnvelopeStatus
    data: Any = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == EnvelopeStatus.SUCCESS

    @classmethod
    def success(cls, data: Any = None, message: Optional[str] = None) -> "Envelope":
        return cls(status=EnvelopeStatus.SUCCESS, data=data, message=message)

    @classmethod
    def error(cls, message: str, data: Any = None) -> "Envelope":
        return cls(status=EnvelopeStatus.ERROR, data=data, message=message)

    @classmethod
    def from_body(cls, body: Any) -> "Envelope":
        """Validate a decoded JSON body against the envelope shape."""
        if not isinstance(body, Mapping):
            return cls.error(INVALID_JSON_MESSAGE)
        try:
            status = EnvelopeStatus(body.get("status"))
        except ValueError:
            return cls.error(INVALID_JSON_MESSAGE)
        message = body.get("message")
        if message is not None and not isinstance(message, str):
            message = str(message)
        return cls(status=status, data=body.get("data"), message=message)

    def data_message(self) -> Optional[str]:
        """``data.message`` as sent by write actions, falling back to ``message``."""
        if isinstance(self.data, Mapping) and isinstance(self.data.get("message"), str):
            return self.data["message"]
        return self.message

    def to_dict(self) -> dict:
        out = {"status": self.status.value, "data": self.data}
        if self.message is not None:
            out["message"] = self.message
        return out


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class InFlight:
    action: str


@dataclass(frozen=True)
class Succeeded:
    data: Any = field(default=None)


@dataclass(frozen=True)
class Failed:
    message: str


RequestState = Union[Idle, InFlight, Succeeded, Failed]
