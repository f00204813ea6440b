"""Resolves a logical TV API path into a concrete request target.

The selection is a pure function of the TransportConfig passed in, so the
caller captures the operator's current toggles for every request and
nothing is cached between calls.
"""

from __future__ import annotations

from tvremote.domain.models import FetchMode, RequestTarget, TransportConfig

RELAY_PREFIX = "/api"
TV_IP_HEADER = "X-TV-IP"
TV_PORT_HEADER = "X-TV-PORT"


def select_target(config: TransportConfig, path: str) -> RequestTarget:
    """Build the URL, fetch mode and routing headers for ``path``.

    Proxy mode always wins: the request goes to the relay under ``/api``
    and the real TV address travels in the ``X-TV-IP``/``X-TV-PORT``
    headers. Otherwise the TV is addressed directly, opaquely when the
    CORS bypass is enabled.
    """
    if not path.startswith("/"):
        path = "/" + path

    if config.proxy_mode:
        base = config.relay_base_url.rstrip("/")
        return RequestTarget(
            url=f"{base}{RELAY_PREFIX}{path}",
            mode=FetchMode.SAME_ORIGIN,
            headers={
                TV_IP_HEADER: config.host.strip(),
                TV_PORT_HEADER: config.effective_port,
            },
        )

    mode = FetchMode.NO_CORS if config.cors_mode else FetchMode.CORS
    return RequestTarget(
        url=f"http://{config.host.strip()}:{config.effective_port}{path}",
        mode=mode,
    )
