"""Process-wide gateway files client.

Initialized once by the host app (startup hook, worker boot, script main)
and shared by every caller; the client itself is thread-safe. Host apps
that already build their own client just skip init_files_client().
"""

from __future__ import annotations

import threading

from marketplace_sdk.infrastructure.exceptions import GatewayNotConfiguredError
from marketplace_sdk.infrastructure.gateway.client import GatewayFileClient
from marketplace_sdk.infrastructure.gateway.factory import FilesClientFactory
from marketplace_sdk.shared.context import TokenProvider
from marketplace_sdk.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_files_client: GatewayFileClient | None = None
_lock = threading.Lock()


def init_files_client(
    client: GatewayFileClient | None = None,
    token_provider: TokenProvider | None = None,
) -> GatewayFileClient:
    """Install the shared files client; idempotent if one is already installed.

    Args:
        client: Pre-built client to install; if None one is created from settings.
        token_provider: Used only when building from settings.

    Returns:
        The installed client (the existing one when already initialized).
    """
    global _files_client
    with _lock:
        if _files_client is None:
            _files_client = client or FilesClientFactory.create_files_client(
                token_provider=token_provider
            )
            logger.info("Gateway files client initialized: %s", _files_client.base_url)
        return _files_client


def get_files_client() -> GatewayFileClient:
    """Return the shared files client.

    Raises:
        GatewayNotConfiguredError: init_files_client() has not been called.
    """
    if _files_client is None:
        raise GatewayNotConfiguredError()
    return _files_client


def close_files_client() -> None:
    """Close the shared client's connection pool. Call from app shutdown."""
    global _files_client
    with _lock:
        if _files_client is not None:
            _files_client.close()
            _files_client = None
            logger.info("Gateway files client closed")
