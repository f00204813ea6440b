"""Shared test fixtures for the tvremote test suite.

Provides an in-memory store, transport configurations for each fetch
mode, and a fake TV served through httpx.MockTransport.
"""

from __future__ import annotations

import json

import httpx
import pytest

from tvremote.domain.models import TransportConfig
from tvremote.storage.memory import MemoryStore


# ---------------------------------------------------------------------------
# Fake TV
# ---------------------------------------------------------------------------


class FakeTv:
    """Records requests and answers with canned responses per path."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: dict[str, tuple[int, object]] = {}
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        status, body = self.responses.get(request.url.path, (200, {}))
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def json_body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


@pytest.fixture
def fake_tv() -> FakeTv:
    return FakeTv()


# ---------------------------------------------------------------------------
# Store / Config Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def cors_config() -> TransportConfig:
    """Direct, readable requests."""
    return TransportConfig(host="192.168.1.20")


@pytest.fixture
def no_cors_config() -> TransportConfig:
    """Direct, opaque requests."""
    return TransportConfig(host="192.168.1.20", cors_mode=True)


@pytest.fixture
def proxy_config() -> TransportConfig:
    """Requests routed through a relay at relay.test."""
    return TransportConfig(
        host="10.0.0.5",
        proxy_mode=True,
        relay_base_url="http://relay.test",
    )
