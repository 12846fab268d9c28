"""Marketplace platform SDK: clients for platform gateway services.

Marketplace apps use GatewayFileClient (or AsyncGatewayFileClient) for all
file operations instead of calling the storage services directly.
"""

from marketplace_sdk.core.config import Settings, get_settings
from marketplace_sdk.domain.exceptions import PlatformSDKException, ValidationException
from marketplace_sdk.domain.value_objects import ExistenceStatus
from marketplace_sdk.infrastructure.exceptions import (
    GatewayException,
    GatewayNotConfiguredError,
    GatewayResponseError,
    GatewayStreamReadError,
)
from marketplace_sdk.infrastructure.gateway import (
    AsyncGatewayFileClient,
    FilesClientFactory,
    GatewayFileClient,
    close_files_client,
    get_files_client,
    init_files_client,
)
from marketplace_sdk.shared.context import (
    bearer_token,
    clear_current_token,
    get_current_token,
    set_current_token,
    static_token_provider,
)

__version__ = "0.1.0"

__all__ = [
    "AsyncGatewayFileClient",
    "ExistenceStatus",
    "FilesClientFactory",
    "GatewayException",
    "GatewayFileClient",
    "GatewayNotConfiguredError",
    "GatewayResponseError",
    "GatewayStreamReadError",
    "PlatformSDKException",
    "Settings",
    "ValidationException",
    "bearer_token",
    "clear_current_token",
    "close_files_client",
    "get_current_token",
    "get_files_client",
    "get_settings",
    "init_files_client",
    "set_current_token",
    "static_token_provider",
]
