"""Gateway files-proxy clients (sync and async).

FilesClientFactory builds clients from marketplace_sdk.core.config; the
registry keeps one shared blocking client per process. Both clients
implement FilesClientProtocol / AsyncFilesClientProtocol (upload_bytes,
upload_stream, get_presigned_url, exists, check_exists, get_object_size,
delete, download).
"""

from marketplace_sdk.infrastructure.gateway.async_client import AsyncGatewayFileClient
from marketplace_sdk.infrastructure.gateway.client import GatewayFileClient
from marketplace_sdk.infrastructure.gateway.factory import FilesClientFactory
from marketplace_sdk.infrastructure.gateway.protocol import (
    AsyncFilesClientProtocol,
    FilesClientProtocol,
)
from marketplace_sdk.infrastructure.gateway.registry import (
    close_files_client,
    get_files_client,
    init_files_client,
)

__all__ = [
    "AsyncFilesClientProtocol",
    "AsyncGatewayFileClient",
    "FilesClientFactory",
    "FilesClientProtocol",
    "GatewayFileClient",
    "close_files_client",
    "get_files_client",
    "init_files_client",
]
