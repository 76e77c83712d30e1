from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

import httpx

from ..core.constants import DEFAULT_REQUEST_TIMEOUT, INVALID_JSON_MESSAGE, MISSING_ENDPOINT_MESSAGE
from ..core.enums import HttpVerb
from .model import Envelope, Failed, Idle, InFlight, RequestState, Succeeded

logger = logging.getLogger(__name__)


def _encode_value(value: Any) -> str:
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RemoteExecutor:
    """Request/response wrapper around the single remote endpoint.

    Every outcome, including transport and parse failures, comes back as an
    ``Envelope``; ``invoke`` never raises for remote trouble.

    ``busy`` and ``state`` describe the invocation issued through this instance.
    Two concurrent invocations on the same instance share them, so callers that
    need independent concurrent calls should hold one executor each.
    """

    def __init__(
        self,
        endpoint_url: Optional[str],
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._endpoint_url = endpoint_url or None
        self._timeout = float(timeout)
        self._transport = transport
        self._busy = False
        self._state: RequestState = Idle()

    @property
    def endpoint_url(self) -> Optional[str]:
        return self._endpoint_url

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def state(self) -> RequestState:
        return self._state

    async def invoke(
        self,
        action: str,
        parameters: Optional[Mapping[str, Any]] = None,
        verb: HttpVerb = HttpVerb.GET,
    ) -> Envelope:
        if not self._endpoint_url:
            logger.error("Cannot invoke %s: %s", action, MISSING_ENDPOINT_MESSAGE)
            self._state = Failed(MISSING_ENDPOINT_MESSAGE)
            return Envelope.error(MISSING_ENDPOINT_MESSAGE)

        fields = {"action": action}
        fields.update({str(k): _encode_value(v) for k, v in (parameters or {}).items()})

        self._busy = True
        self._state = InFlight(action)
        try:
            envelope = await self._send(action, fields, HttpVerb(verb))
        finally:
            self._busy = False

        if envelope.ok:
            self._state = Succeeded(envelope.data)
        else:
            self._state = Failed(envelope.message or "")
        return envelope

    async def _send(self, action: str, fields: dict[str, str], verb: HttpVerb) -> Envelope:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                if verb == HttpVerb.GET:
                    response = await client.get(self._endpoint_url, params=fields)
                else:
                    response = await client.post(self._endpoint_url, data=fields)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            message = str(exc) or exc.__class__.__name__
            logger.warning("Request for %s failed: %s", action, message)
            return Envelope.error(message)

        if not response.is_success:
            message = f"HTTP error! status: {response.status_code}"
            logger.warning("Request for %s failed: %s", action, message)
            return Envelope.error(message)

        try:
            body = json.loads(response.text)
        except ValueError:
            logger.warning("Failed to parse JSON response for %s: %.200s", action, response.text)
            return Envelope.error(INVALID_JSON_MESSAGE)

        envelope = Envelope.from_body(body)
        if not envelope.ok:
            logger.warning("Action %s returned an error: %s", action, envelope.message)
        return envelope
