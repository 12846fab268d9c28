"""Blocking client for the platform gateway's files-proxy API.

Every operation is one request/response round trip on a shared
httpx.Client. The client holds no mutable state besides that pooled
transport, so one instance can serve many threads at once.

Usage:
    client = GatewayFileClient("http://localhost:8080")
    client.upload_bytes(data, "video/mp4", "recordings/org1/s123/video.mp4",
                        org_id="org1", source_service="telehealth",
                        reference_id="s123", original_filename="video.mp4")
    url = client.get_presigned_url("recordings/org1/s123/video.mp4", 3600)
    data = client.download("recordings/org1/s123/video.mp4")
"""

from __future__ import annotations

from typing import BinaryIO

import httpx

from marketplace_sdk.core.constants import DEFAULT_SOURCE_SERVICE
from marketplace_sdk.domain.value_objects import (
    ExistenceStatus,
    PresignedUrlRequest,
    UploadRequest,
)
from marketplace_sdk.infrastructure.gateway._base import GatewayClientBase, normalize_base_url
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
from marketplace_sdk.infrastructure.gateway.transport import build_http_client
from marketplace_sdk.shared.context import TokenProvider
from marketplace_sdk.shared.telemetry.logging import get_logger

__all__ = ["GatewayFileClient", "normalize_base_url"]

logger = get_logger(__name__)


class GatewayFileClient(GatewayClientBase[httpx.Client]):
    """Authenticated proxy client for gateway file storage (sync)."""

    def __init__(
        self,
        base_url: str,
        *,
        http_client: httpx.Client | None = None,
        token_provider: TokenProvider | None = None,
        default_source_service: str = DEFAULT_SOURCE_SERVICE,
        owns_http_client: bool | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Gateway root URL, e.g. http://localhost:8080.
            http_client: Shared transport; one is built from settings (and
                owned) if None.
            token_provider: Returns the caller's bearer token; defaults to the
                identity context (marketplace_sdk.shared.context).
            default_source_service: X-Source-Service when a call passes none.
            owns_http_client: Whether close() closes http_client; defaults to
                True only for the client created here.
        """
        super().__init__(
            base_url,
            http_client,
            build_http_client,
            token_provider=token_provider,
            default_source_service=default_source_service,
            owns_http_client=owns_http_client,
        )

    def close(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "GatewayFileClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _dispatch(self, req: GatewayRequest) -> httpx.Response:
        return self._http.request(
            req.method,
            self._url(req.path),
            params=req.params or None,
            headers=req.headers,
            content=req.content,
        )

    def _send(self, req: GatewayRequest) -> httpx.Response:
        """Send the request; raises httpx.HTTPStatusError on non-2xx."""
        resp = self._dispatch(req)
        resp.raise_for_status()
        return resp

    def upload_bytes(
        self,
        data: bytes,
        content_type: str,
        key: str,
        org_id: str | None = None,
        source_service: str | None = None,
        reference_id: str | None = None,
        original_filename: str | None = None,
    ) -> None:
        """Upload raw bytes to a specific key path.

        Raises:
            ValidationException: Empty key or content type.
            httpx.HTTPStatusError: Gateway returned a non-2xx status.
            httpx.TransportError: Network failure or timeout.
        """
        upload = UploadRequest(
            data=data,
            content_type=content_type,
            key=key,
            org_id=org_id,
            source_service=source_service or self._default_source_service,
            reference_id=reference_id,
            original_filename=original_filename,
        )
        self._send(store_bytes_request(upload, self._resolve_auth_token()))
        logger.debug("Uploaded bytes via platform: key=%s", key)

    def upload_stream(
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
        """Upload a stream (read fully into memory first).

        Raises:
            GatewayStreamReadError: Stream could not be read or length mismatch;
                the upload endpoint is not called.
        """
        data = read_upload_source(stream, content_length, key)
        self.upload_bytes(
            data,
            content_type,
            key,
            org_id=org_id,
            source_service=source_service,
            reference_id=reference_id,
            original_filename=original_filename,
        )

    def get_presigned_url(self, key: str, expiry_seconds: int) -> str | None:
        """Generate a presigned download URL for a key."""
        req = PresignedUrlRequest(key=key, expiry_seconds=expiry_seconds)
        resp = self._send(presigned_url_request(req, self._resolve_auth_token()))
        return parse_presigned_url(resp)

    def exists(self, key: str) -> bool:
        """Check if a file exists at the given key.

        An empty key and any failure (404, 5xx, network, timeout) are
        reported as False; use check_exists() to tell absence from an indeterminate answer.
        """
        try:
            self._send(exists_request(key, self._by_key_token(key)))
            return True
        except Exception as e:
            logger.debug("Existence check failed, reporting absent: key=%s (%s)", key, e)
            return False

    def check_exists(self, key: str) -> ExistenceStatus:
        """Three-valued existence check; transport errors are INDETERMINATE.

        Raises:
            ValidationException: Empty key; no request is sent.
        """
        try:
            resp = self._dispatch(exists_request(key, self._by_key_token(key)))
        except httpx.TransportError as e:
            logger.debug("Existence check indeterminate: key=%s (%s)", key, e)
            return ExistenceStatus.INDETERMINATE
        return existence_from_status(resp.status_code)

    def get_object_size(self, key: str) -> int:
        """Get the size of a file at the given key (0 when unknown)."""
        resp = self._send(size_request(key, self._by_key_token(key)))
        return parse_object_size(resp)

    def delete(self, key: str) -> None:
        """Delete a file by key. Not retried; repeat deletes may fail."""
        self._send(delete_request(key, self._by_key_token(key)))
        logger.debug("Deleted via platform: key=%s", key)

    def download(self, key: str) -> bytes:
        """Download file bytes by key."""
        resp = self._send(download_request(key, self._by_key_token(key)))
        return resp.content
