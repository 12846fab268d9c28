"""FastAPI dependencies for host apps (composition root)."""

from __future__ import annotations

from fastapi import Request

from marketplace_sdk.infrastructure.exceptions import GatewayNotConfiguredError
from marketplace_sdk.infrastructure.gateway.async_client import AsyncGatewayFileClient


def get_gateway_files_client(request: Request) -> AsyncGatewayFileClient:
    """Async files client opened by files_client_lifespan.

    Raises:
        GatewayNotConfiguredError: The lifespan was not installed.
    """
    client = getattr(request.app.state, "files_client", None)
    if client is None:
        raise GatewayNotConfiguredError()
    return client
