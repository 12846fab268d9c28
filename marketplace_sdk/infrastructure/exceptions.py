"""Infrastructure exceptions for gateway operations.

Gateway errors extend PlatformSDKException so host apps can map them to
HTTP responses consistently. httpx errors are never wrapped here.
"""

from marketplace_sdk.domain.exceptions import PlatformSDKException


class GatewayException(PlatformSDKException):
    """Base exception for gateway file operations."""


class GatewayStreamReadError(GatewayException):
    """Upload source could not be fully read; nothing was sent."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(
            f"Failed to upload stream via platform: {key}",
            "GATEWAY_STREAM_READ_ERROR",
            {"key": key, "reason": reason},
        )


class GatewayResponseError(GatewayException):
    """Gateway answered 2xx but the body does not match the files-proxy contract."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Unexpected gateway response from {path}",
            "GATEWAY_RESPONSE_ERROR",
            {"path": path, "reason": reason},
        )


class GatewayNotConfiguredError(GatewayException):
    """get_files_client() called before init_files_client()."""

    def __init__(self) -> None:
        super().__init__(
            "Gateway files client is not initialized; call init_files_client() first",
            "GATEWAY_NOT_CONFIGURED",
        )
