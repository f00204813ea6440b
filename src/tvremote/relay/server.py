"""Same-origin relay server for the TV control API.

Requests under ``/api`` are forwarded to the TV named by the request's
own headers, so the relay holds no device configuration:

    ANY     /api/<path>?<query>   X-TV-IP: 10.0.0.5   [X-TV-PORT: 1925]
        -> ANY http://10.0.0.5:1925/<path>?<query>
    OPTIONS /api/<path>           -> 204, answered locally

Request and response bodies are streamed through without buffering, and
every proxied response carries ``Access-Control-Allow-Origin: *``.
All other paths are served as static files from a fixed root.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse, Response, StreamingResponse
from starlette.background import BackgroundTask

from tvremote.domain.models import DEFAULT_TV_PORT
from tvremote.transport.selector import RELAY_PREFIX, TV_IP_HEADER, TV_PORT_HEADER

logger = logging.getLogger(__name__)

DEFAULT_STATIC_ROOT = Path(__file__).resolve().parent.parent / "web"

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
    "Access-Control-Allow-Headers": f"Content-Type,{TV_IP_HEADER},{TV_PORT_HEADER}",
}

MIME_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "text/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".svg": "image/svg+xml",
}
DEFAULT_MIME_TYPE = "application/octet-stream"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def build_upstream_url(tv_ip: str, tv_port: str, request_path: str, query: str = "") -> str:
    """Strip the relay prefix and address the TV directly."""
    path = request_path[len(RELAY_PREFIX):] if request_path.startswith(RELAY_PREFIX) else request_path
    url = f"http://{tv_ip}:{tv_port}{path or '/'}"
    return f"{url}?{query}" if query else url


def resolve_static_path(root: Path, request_path: str) -> Path | None:
    """Map a URL path to a file under ``root``.

    Returns None when the resolved path escapes the root.
    """
    relative = request_path.lstrip("/") or "index.html"
    base = root.resolve()
    candidate = (base / relative).resolve()
    if candidate != base and base not in candidate.parents:
        return None
    return candidate


def content_type_for(path: Path) -> str:
    return MIME_TYPES.get(path.suffix.lower(), DEFAULT_MIME_TYPE)


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------

def create_app(
    static_root: Path | str | None = None,
    client: httpx.AsyncClient | None = None,
    upstream_timeout: float | None = None,
) -> FastAPI:
    """Create the relay application.

    Args:
        static_root: Directory served for non-proxy paths. Defaults to the
                     bundled ``web/`` directory.
        client: Optional pre-configured httpx.AsyncClient (for testing).
        upstream_timeout: Timeout for upstream requests. None keeps the
                          httpx default.
    """
    root = Path(static_root) if static_root else DEFAULT_STATIC_ROOT

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owns_client = app.state.client is None
        if owns_client:
            kwargs = {"timeout": upstream_timeout} if upstream_timeout is not None else {}
            app.state.client = httpx.AsyncClient(**kwargs)
        logger.info("Relay started (static root %s)", root)
        yield
        if owns_client:
            await app.state.client.aclose()
            app.state.client = None
        logger.info("Relay stopped")

    app = FastAPI(
        title="tvremote relay",
        description="Same-origin relay for the TV JSON/HTTP control API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.client = client
    app.state.static_root = root

    @app.api_route(RELAY_PREFIX, methods=PROXY_METHODS)
    @app.api_route(f"{RELAY_PREFIX}/{{path:path}}", methods=PROXY_METHODS)
    async def proxy(request: Request) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=PREFLIGHT_HEADERS)

        tv_ip = request.headers.get(TV_IP_HEADER)
        if not tv_ip:
            return JSONResponse(status_code=400, content={"error": f"Missing {TV_IP_HEADER} header."})
        tv_port = request.headers.get(TV_PORT_HEADER) or DEFAULT_TV_PORT
        url = build_upstream_url(tv_ip, tv_port, request.url.path, request.url.query)

        headers = {
            "Content-Type": request.headers.get("content-type") or "application/json",
            "Accept": "application/json",
        }
        content = None
        if "content-length" in request.headers:
            headers["Content-Length"] = request.headers["content-length"]
            content = request.stream()
        elif "transfer-encoding" in request.headers:
            content = request.stream()

        http: httpx.AsyncClient = app.state.client
        try:
            upstream_request = http.build_request(request.method, url, headers=headers, content=content)
            upstream = await http.send(upstream_request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Proxy %s %s failed: %s", request.method, url, e)
            return JSONResponse(
                status_code=502,
                content={"error": "Proxy error", "detail": str(e) or type(e).__name__},
            )

        logger.info("Proxy %s %s -> %d", request.method, url, upstream.status_code)
        return StreamingResponse(
            upstream.aiter_bytes(),
            status_code=upstream.status_code,
            media_type=upstream.headers.get("content-type") or "application/json",
            headers={"Access-Control-Allow-Origin": "*"},
            background=BackgroundTask(upstream.aclose),
        )

    @app.get("/{path:path}")
    async def serve_static(path: str) -> Response:
        file_path = resolve_static_path(app.state.static_root, path)
        if file_path is None:
            return JSONResponse(status_code=403, content={"error": "Forbidden"})
        if not file_path.is_file():
            return JSONResponse(status_code=404, content={"error": "Not found"})
        return FileResponse(file_path, media_type=content_type_for(file_path))

    return app


# ---------------------------------------------------------------------------
# Standalone entry point
# ---------------------------------------------------------------------------

def main(
    host: str = "0.0.0.0",
    port: int = 8000,
    static_root: Path | str | None = None,
    upstream_timeout: float | None = None,
) -> None:
    """Run the relay server."""
    app = create_app(static_root=static_root, upstream_timeout=upstream_timeout)
    logger.info("Remote control server running on http://localhost:%d", port)
    # log_config=None keeps the handlers installed by setup_logging
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    from tvremote.utils.logging import setup_logging

    setup_logging()
    main()
