"""Async client for the platform gateway's files-proxy API.

Same contract as GatewayFileClient; all HTTP calls use httpx.AsyncClient so
they do not block the event loop. Stream draining for upload_stream runs in
a worker thread.
"""

from __future__ import annotations

import asyncio
from typing import BinaryIO

import httpx

from marketplace_sdk.core.constants import DEFAULT_SOURCE_SERVICE
from marketplace_sdk.domain.value_objects import (
    ExistenceStatus,
    PresignedUrlRequest,
    UploadRequest,
)
from marketplace_sdk.infrastructure.gateway._base import GatewayClientBase
from marketplace_sdk.infrastructure.gateway._envelope import (
    parse_object_size,
    parse_presigned_url,
)
from marketplace_sdk.infrastructure.gateway._requests import (
    GatewayRequest,
    delete_request,
    download_request,
    existence_from_status,
    exists_request,
    presigned_url_request,
    read_upload_source,
    size_request,
    store_bytes_request,
)
from marketplace_sdk.infrastructure.gateway.transport import build_async_http_client
from marketplace_sdk.shared.context import TokenProvider
from marketplace_sdk.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class AsyncGatewayFileClient(GatewayClientBase[httpx.AsyncClient]):
    """Authenticated proxy client for gateway file storage (async)."""

    def __init__(
        self,
        base_url: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        token_provider: TokenProvider | None = None,
        default_source_service: str = DEFAULT_SOURCE_SERVICE,
        owns_http_client: bool | None = None,
    ) -> None:
        super().__init__(
            base_url,
            http_client,
            build_async_http_client,
            token_provider=token_provider,
            default_source_service=default_source_service,
            owns_http_client=owns_http_client,
        )

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "AsyncGatewayFileClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _dispatch(self, req: GatewayRequest) -> httpx.Response:
        return await self._http.request(
            req.method,
            self._url(req.path),
            params=req.params or None,
            headers=req.headers,
            content=req.content,
        )

    async def _send(self, req: GatewayRequest) -> httpx.Response:
        resp = await self._dispatch(req)
        resp.raise_for_status()
        return resp

    async def upload_bytes(
        self,
        data: bytes,
        content_type: str,
        key: str,
        org_id: str | None = None,
        source_service: str | None = None,
        reference_id: str | None = None,
        original_filename: str | None = None,
    ) -> None:
        upload = UploadRequest(
            data=data,
            content_type=content_type,
            key=key,
            org_id=org_id,
            source_service=source_service or self._default_source_service,
            reference_id=reference_id,
            original_filename=original_filename,
        )
        await self._send(store_bytes_request(upload, self._resolve_auth_token()))
        logger.debug("Uploaded bytes via platform: key=%s", key)

    async def upload_stream(
        self,
        stream: BinaryIO,
        content_length: int | None,
        content_type: str,
        key: str,
        org_id: str | None = None,
        source_service: str | None = None,
        reference_id: str | None = None,
        original_filename: str | None = None,
    ) -> None:
        """Read the stream in a thread, then upload; read errors never reach the gateway."""
        data = await asyncio.to_thread(read_upload_source, stream, content_length, key)
        await self.upload_bytes(
            data,
            content_type,
            key,
            org_id=org_id,
            source_service=source_service,
            reference_id=reference_id,
            original_filename=original_filename,
        )

    async def get_presigned_url(self, key: str, expiry_seconds: int) -> str | None:
        req = PresignedUrlRequest(key=key, expiry_seconds=expiry_seconds)
        resp = await self._send(presigned_url_request(req, self._resolve_auth_token()))
        return parse_presigned_url(resp)

    async def exists(self, key: str) -> bool:
        """True iff the gateway answered 2xx; every error collapses to False."""
        try:
            await self._send(exists_request(key, self._by_key_token(key)))
            return True
        except Exception as e:
            logger.debug("Existence check failed, reporting absent: key=%s (%s)", key, e)
            return False

    async def check_exists(self, key: str) -> ExistenceStatus:
        try:
            resp = await self._dispatch(exists_request(key, self._by_key_token(key)))
        except httpx.TransportError as e:
            logger.debug("Existence check indeterminate: key=%s (%s)", key, e)
            return ExistenceStatus.INDETERMINATE
        return existence_from_status(resp.status_code)

    async def get_object_size(self, key: str) -> int:
        resp = await self._send(size_request(key, self._by_key_token(key)))
        return parse_object_size(resp)

    async def delete(self, key: str) -> None:
        await self._send(delete_request(key, self._by_key_token(key)))
        logger.debug("Deleted via platform: key=%s", key)

    async def download(self, key: str) -> bytes:
        resp = await self._send(download_request(key, self._by_key_token(key)))
        return resp.content
