"""HTTP transport builders for the gateway clients.

The transport owns timeouts, TLS and connection pooling. Retries are
connection-level only (httpx.HTTPTransport(retries=...)) and off by default;
the clients never retry a request that reached the gateway.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from marketplace_sdk.core.config import Settings


def _resolve(settings: "Settings | None") -> "Settings":
    from marketplace_sdk.core.config import get_settings

    return settings or get_settings()


def build_http_client(settings: "Settings | None" = None) -> httpx.Client:
    """Return a pooled, thread-safe httpx.Client configured from settings."""
    s = _resolve(settings)
    return httpx.Client(
        timeout=s.http_timeout_seconds,
        transport=httpx.HTTPTransport(retries=s.connect_retries),
    )


def build_async_http_client(settings: "Settings | None" = None) -> httpx.AsyncClient:
    """Return an httpx.AsyncClient configured from settings."""
    s = _resolve(settings)
    return httpx.AsyncClient(
        timeout=s.http_timeout_seconds,
        transport=httpx.AsyncHTTPTransport(retries=s.connect_retries),
    )
