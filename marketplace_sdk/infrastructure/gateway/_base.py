"""State shared by GatewayFileClient and AsyncGatewayFileClient.

Holds the normalized base URL, the token source and the transport
ownership flag. Performs no I/O; the subclasses own the HTTP calls.
"""

from __future__ import annotations

from collections.abc import Callable

from marketplace_sdk.core.constants import DEFAULT_SOURCE_SERVICE
from marketplace_sdk.domain.value_objects import require_key
from marketplace_sdk.shared.context import TokenProvider, get_current_token
from marketplace_sdk.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def normalize_base_url(base_url: str) -> str:
    """Strip exactly one trailing slash."""
    return base_url[:-1] if base_url.endswith("/") else base_url


class GatewayClientBase[HttpClientT]:
    """Base URL, bearer token resolution and transport ownership."""

    def __init__(
        self,
        base_url: str,
        http_client: HttpClientT | None,
        build_http_client: Callable[[], HttpClientT],
        *,
        token_provider: TokenProvider | None = None,
        default_source_service: str = DEFAULT_SOURCE_SERVICE,
        owns_http_client: bool | None = None,
    ) -> None:
        self._base_url = normalize_base_url(base_url)
        self._http: HttpClientT = (
            http_client if http_client is not None else build_http_client()
        )
        self._owns_http = http_client is None if owns_http_client is None else owns_http_client
        self._token_provider = token_provider or get_current_token
        self._default_source_service = default_source_service

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _resolve_auth_token(self) -> str:
        """Current caller's token, or "" with a warning when there is none."""
        token = self._token_provider()
        if not token:
            logger.warning("No bearer token available for platform API call")
            return ""
        return token

    def _by_key_token(self, key: str) -> str:
        """Validate a by-key operation's key, then resolve the token."""
        require_key(key)
        return self._resolve_auth_token()
