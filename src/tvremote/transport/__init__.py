"""Transport layer for tvremote.

Resolves where a request goes (directly to the TV or through the relay)
and sends it over HTTP.

Public API:
    select_target -- Pure URL / fetch-mode selection
    Transport -- Abstract base class
    HttpTransport -- httpx-backed implementation
"""

from tvremote.transport.base import HttpStatusError, Transport, TransportError
from tvremote.transport.selector import (
    RELAY_PREFIX,
    TV_IP_HEADER,
    TV_PORT_HEADER,
    select_target,
)

__all__ = [
    "HttpStatusError",
    "HttpTransport",
    "RELAY_PREFIX",
    "TV_IP_HEADER",
    "TV_PORT_HEADER",
    "Transport",
    "TransportError",
    "select_target",
]


def __getattr__(name: str) -> type:
    """Lazy import for the httpx-backed implementation."""
    if name == "HttpTransport":
        from tvremote.transport.http_backend import HttpTransport
        return HttpTransport
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
