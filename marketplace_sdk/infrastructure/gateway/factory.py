"""Files client factory: builds sync or async gateway clients from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from marketplace_sdk.infrastructure.gateway.async_client import AsyncGatewayFileClient
from marketplace_sdk.infrastructure.gateway.client import GatewayFileClient
from marketplace_sdk.infrastructure.gateway.transport import (
    build_async_http_client,
    build_http_client,
)
from marketplace_sdk.shared.context import TokenProvider

if TYPE_CHECKING:
    from marketplace_sdk.core.config import Settings


class FilesClientFactory:
    """Factory for gateway files clients based on configuration."""

    @staticmethod
    def create_files_client(
        settings: "Settings | None" = None,
        token_provider: TokenProvider | None = None,
        http_client: httpx.Client | None = None,
    ) -> GatewayFileClient:
        """Create a blocking files client from settings.

        Args:
            settings: SDK settings; if None, uses get_settings().
            token_provider: Caller identity source; defaults to the identity context.
            http_client: Shared transport; if None one is built from settings
                and owned by the returned client.

        Returns:
            GatewayFileClient pointed at settings.api_url.
        """
        from marketplace_sdk.core.config import get_settings

        s = settings or get_settings()
        return GatewayFileClient(
            s.api_url,
            http_client=http_client if http_client is not None else build_http_client(s),
            token_provider=token_provider,
            default_source_service=s.default_source_service,
            owns_http_client=http_client is None,
        )

    @staticmethod
    def create_async_files_client(
        settings: "Settings | None" = None,
        token_provider: TokenProvider | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> AsyncGatewayFileClient:
        """Create an async files client from settings (see create_files_client)."""
        from marketplace_sdk.core.config import get_settings

        s = settings or get_settings()
        return AsyncGatewayFileClient(
            s.api_url,
            http_client=http_client if http_client is not None else build_async_http_client(s),
            token_provider=token_provider,
            default_source_service=s.default_source_service,
            owns_http_client=http_client is None,
        )
