"""Abstract base class for issuing requests to the TV.

A transport sends one JSON request to a resolved RequestTarget and
returns only what the target's fetch mode allows the caller to see:
opaque targets yield a TransportResponse without status or body.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from tvremote.domain.models import RequestTarget, TransportConfig, TransportResponse
from tvremote.transport.selector import select_target

logger = logging.getLogger(__name__)


class Transport(ABC):
    """Abstract interface for sending requests to the TV or the relay.

    Example usage::

        async with HttpTransport(timeout=5.0) as transport:
            target = select_target(config, "/1/input/key")
            response = await transport.send(target, {"key": "VolumeUp"})
    """

    @abstractmethod
    async def connect(self) -> None:
        """Prepare the underlying client. Must be called before send()."""
        ...

    @abstractmethod
    async def disconnect(self) -> None:
        """Release the underlying client. Safe to call multiple times."""
        ...

    @abstractmethod
    async def send(
        self, target: RequestTarget, payload: dict[str, Any], method: str = "POST"
    ) -> TransportResponse:
        """Send ``payload`` as JSON to ``target``.

        Raises:
            TransportError: If the request could not be completed at the
                network level. HTTP error statuses are not raised here;
                they are returned for the caller to interpret.
        """
        ...

    async def post(
        self, config: TransportConfig, path: str, payload: dict[str, Any]
    ) -> TransportResponse:
        """Resolve ``path`` against ``config`` and POST ``payload`` to it.

        Convenience method combining select_target() and send(). Readable
        responses with a non-success status raise HttpStatusError; opaque
        responses are returned as-is because their status is unknown.
        """
        target = select_target(config, path)
        response = await self.send(target, payload)
        if not response.opaque and not response.ok:
            raise HttpStatusError(response.status_code or 0, mode=target.mode.value)
        return response

    async def __aenter__(self) -> Transport:
        await self.connect()
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        await self.disconnect()


class TransportError(Exception):
    """Raised when a request fails before any response is received."""

    def __init__(self, message: str, mode: str = "") -> None:
        super().__init__(message)
        self.mode = mode


class HttpStatusError(TransportError):
    """Raised when a readable response carries a non-success status."""

    def __init__(self, status_code: int, mode: str = "") -> None:
        super().__init__(f"HTTP {status_code}", mode=mode)
        self.status_code = status_code
