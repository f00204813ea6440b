"""HTTP transport backed by httpx.

Direct (``cors``) and relayed (``same-origin``) requests expose status and
JSON body. ``no-cors`` requests are still sent, but their response is
discarded and reported as opaque, mirroring what a browser allows.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from tvremote.domain.models import RequestTarget, TransportResponse
from tvremote.transport.base import Transport, TransportError

logger = logging.getLogger(__name__)


class HttpTransport(Transport):
    """Sends JSON requests with a shared httpx.AsyncClient."""

    def __init__(
        self,
        timeout: float | None = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """Create the HTTP client."""
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        logger.debug("HTTP transport ready (timeout=%s)", self._timeout)

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("HTTP transport closed")

    async def send(
        self, target: RequestTarget, payload: dict[str, Any], method: str = "POST"
    ) -> TransportResponse:
        """Send a JSON request and return the part of the response the mode allows."""
        if self._client is None:
            raise TransportError("Transport is not connected", mode=target.mode.value)
        try:
            resp = await self._client.request(
                method, target.url, json=payload, headers=target.headers
            )
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            # bad host or port in the operator config fails while building the URL
            raise TransportError(str(e) or type(e).__name__, mode=target.mode.value) from e

        if target.is_opaque:
            logger.debug("%s %s sent (opaque response)", method, target.url)
            return TransportResponse.opaque_response()

        logger.debug("%s %s -> %d", method, target.url, resp.status_code)
        return TransportResponse(status_code=resp.status_code, body=_json_or_none(resp))


def _json_or_none(resp: httpx.Response) -> dict | list | None:
    if not resp.content:
        return None
    try:
        data = resp.json()
    except ValueError:
        return None
    return data if isinstance(data, (dict, list)) else None
