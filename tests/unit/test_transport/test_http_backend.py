"""Tests for the httpx-backed transport."""

from __future__ import annotations

import httpx
import pytest

from tvremote.domain.models import TransportConfig
from tvremote.transport.base import HttpStatusError, TransportError
from tvremote.transport.http_backend import HttpTransport
from tvremote.transport.selector import select_target


class TestHttpTransportInit:
    def test_defaults(self) -> None:
        transport = HttpTransport()
        assert transport._timeout == 5.0
        assert not transport.is_connected

    @pytest.mark.asyncio
    async def test_context_manager_connects_and_disconnects(self) -> None:
        transport = HttpTransport()
        async with transport:
            assert transport.is_connected
        assert not transport.is_connected

    @pytest.mark.asyncio
    async def test_send_requires_connection(self, cors_config: TransportConfig) -> None:
        transport = HttpTransport()
        with pytest.raises(TransportError, match="not connected"):
            await transport.send(select_target(cors_config, "/1/input/key"), {"key": "Home"})


class TestHttpTransportSend:
    @pytest.mark.asyncio
    async def test_readable_response(self, fake_tv, cors_config: TransportConfig) -> None:
        fake_tv.responses["/1/pair/request"] = (200, {"auth_key": "XYZ"})
        async with HttpTransport(transport=fake_tv.transport) as transport:
            response = await transport.send(select_target(cors_config, "/1/pair/request"), {})
        assert response.status_code == 200
        assert response.ok
        assert response.body == {"auth_key": "XYZ"}
        assert not response.opaque

    @pytest.mark.asyncio
    async def test_opaque_response_hides_status(self, fake_tv, no_cors_config: TransportConfig) -> None:
        fake_tv.responses["/1/input/key"] = (500, {"error": "boom"})
        async with HttpTransport(transport=fake_tv.transport) as transport:
            response = await transport.send(
                select_target(no_cors_config, "/1/input/key"), {"key": "Home"}
            )
        assert response.opaque
        assert response.status_code is None
        assert response.body is None
        assert len(fake_tv.requests) == 1

    @pytest.mark.asyncio
    async def test_sends_json_and_routing_headers(self, fake_tv, proxy_config: TransportConfig) -> None:
        async with HttpTransport(transport=fake_tv.transport) as transport:
            await transport.send(select_target(proxy_config, "/1/input/key"), {"key": "Mute"})
        request = fake_tv.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "http://relay.test/api/1/input/key"
        assert request.headers["X-TV-IP"] == "10.0.0.5"
        assert request.headers["X-TV-PORT"] == "1925"
        assert fake_tv.json_body() == {"key": "Mute"}

    @pytest.mark.asyncio
    async def test_network_error_wrapped(self, fake_tv, cors_config: TransportConfig) -> None:
        fake_tv.error = httpx.ConnectError("Connection refused")
        async with HttpTransport(transport=fake_tv.transport) as transport:
            with pytest.raises(TransportError, match="Connection refused") as exc_info:
                await transport.send(select_target(cors_config, "/1/input/key"), {"key": "Home"})
        assert exc_info.value.mode == "cors"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("host", "port"),
        [("10.0.0.5", "abc"), ("10.0.0.5:99", "1925")],
    )
    async def test_invalid_address_wrapped(self, fake_tv, host: str, port: str) -> None:
        config = TransportConfig(host=host, port=port)
        async with HttpTransport(transport=fake_tv.transport) as transport:
            with pytest.raises(TransportError, match="Invalid port"):
                await transport.send(select_target(config, "/1/input/key"), {"key": "Home"})
        assert fake_tv.requests == []


class TestTransportPost:
    @pytest.mark.asyncio
    async def test_error_status_raises(self, fake_tv, cors_config: TransportConfig) -> None:
        fake_tv.responses["/1/input/key"] = (500, {})
        async with HttpTransport(transport=fake_tv.transport) as transport:
            with pytest.raises(HttpStatusError) as exc_info:
                await transport.post(cors_config, "/1/input/key", {"key": "Home"})
        assert exc_info.value.status_code == 500
        assert str(exc_info.value) == "HTTP 500"

    @pytest.mark.asyncio
    async def test_error_status_ignored_when_opaque(
        self, fake_tv, no_cors_config: TransportConfig
    ) -> None:
        fake_tv.responses["/1/input/key"] = (500, {})
        async with HttpTransport(transport=fake_tv.transport) as transport:
            response = await transport.post(no_cors_config, "/1/input/key", {"key": "Home"})
        assert response.opaque
