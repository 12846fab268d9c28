"""Pytest configuration and fixtures for the platform SDK.

The gateway is replaced by StubGateway, an in-memory files-proxy served
through httpx.MockTransport, so no test touches the network.
"""

from __future__ import annotations

import json
import os
import threading
from collections.abc import Callable

import httpx
import pytest

from marketplace_sdk.core.config import get_settings
from marketplace_sdk.infrastructure.gateway import registry
from marketplace_sdk.infrastructure.gateway.async_client import AsyncGatewayFileClient
from marketplace_sdk.infrastructure.gateway.client import GatewayFileClient
from marketplace_sdk.shared.context import static_token_provider

GATEWAY_URL = "http://gateway.test/"
TEST_TOKEN = "test-token"

Responder = Callable[[httpx.Request], httpx.Response]


class StubGateway:
    """In-memory files-proxy: stores uploads by key and records every request.

    Individual routes can be overridden with respond(path, responder) to
    simulate envelope variants, error statuses or connection failures.
    """

    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.requests: list[httpx.Request] = []
        self._overrides: dict[str, Responder] = {}
        self._lock = threading.Lock()

    def respond(self, path: str, responder: Responder) -> None:
        self._overrides[path] = responder

    def respond_json(self, path: str, payload: object, status_code: int = 200) -> None:
        self.respond(path, lambda request: httpx.Response(status_code, json=payload))

    def respond_status(self, path: str, status_code: int) -> None:
        self.respond(path, lambda request: httpx.Response(status_code))

    def fail_connect(self, path: str) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self.respond(path, _raise)

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def handle(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.requests.append(request)
        path = request.url.path
        if path in self._overrides:
            return self._overrides[path](request)
        key = request.url.params.get("key")

        if request.method == "POST" and path == "/api/files-proxy/store-bytes":
            with self._lock:
                self.objects[request.headers["X-File-Path"]] = (
                    request.content,
                    request.headers["Content-Type"],
                )
            return httpx.Response(200)

        with self._lock:
            stored = self.objects.get(key) if key is not None else None
        if stored is None:
            return httpx.Response(404, json={"error": "not found"})
        content, content_type = stored

        if request.method == "HEAD" and path == "/api/files-proxy/by-key/exists":
            return httpx.Response(200)
        if request.method == "GET" and path == "/api/files-proxy/by-key/presigned-url":
            expiry = request.url.params.get("expiry")
            url = f"https://cdn.test/{key}?expires={expiry}"
            return httpx.Response(200, content=json.dumps({"data": {"url": url}}).encode())
        if request.method == "GET" and path == "/api/files-proxy/by-key/size":
            return httpx.Response(200, json={"data": {"size": len(content)}})
        if request.method == "GET" and path == "/api/files-proxy/by-key/download":
            return httpx.Response(200, content=content, headers={"Content-Type": content_type})
        if request.method == "DELETE" and path == "/api/files-proxy/by-key":
            with self._lock:
                self.objects.pop(key, None)
            return httpx.Response(204)
        return httpx.Response(405)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Fresh settings per test; PLATFORM_* env from the shell never leaks in."""
    for name in list(os.environ):
        if name.startswith("PLATFORM_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_registry():
    """Drop any shared client installed by a test."""
    yield
    registry.close_files_client()


@pytest.fixture
def gateway() -> StubGateway:
    return StubGateway()


@pytest.fixture
def files_client(gateway: StubGateway) -> GatewayFileClient:
    """Sync client with a fixed bearer token, wired to the stub gateway."""
    http = httpx.Client(transport=httpx.MockTransport(gateway.handle))
    client = GatewayFileClient(
        GATEWAY_URL,
        http_client=http,
        token_provider=static_token_provider(TEST_TOKEN),
    )
    yield client
    http.close()


@pytest.fixture
async def async_files_client(gateway: StubGateway) -> AsyncGatewayFileClient:
    """Async client with a fixed bearer token, wired to the stub gateway."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(gateway.handle))
    client = AsyncGatewayFileClient(
        GATEWAY_URL,
        http_client=http,
        token_provider=static_token_provider(TEST_TOKEN),
    )
    yield client
    await http.aclose()
