"""Request descriptions for the files-proxy API.

Shared by GatewayFileClient and AsyncGatewayFileClient so both send the
exact same method, path, query and headers for each operation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

from marketplace_sdk.core.constants import (
    BY_KEY_PATH,
    DOWNLOAD_PATH,
    EXISTS_PATH,
    HEADER_FILE_PATH,
    HEADER_ORG_ID,
    HEADER_ORIGINAL_FILENAME,
    HEADER_REFERENCE_ID,
    HEADER_SOURCE_SERVICE,
    PRESIGNED_URL_PATH,
    SIZE_PATH,
    STORE_BYTES_PATH,
)
from marketplace_sdk.domain.value_objects import (
    ExistenceStatus,
    PresignedUrlRequest,
    UploadRequest,
)
from marketplace_sdk.infrastructure.exceptions import GatewayStreamReadError


@dataclass(frozen=True)
class GatewayRequest:
    """One HTTP call against the gateway (path is relative to the base URL)."""

    method: str
    path: str
    params: dict[str, str | int] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    content: bytes | None = None


def auth_headers(token: str) -> dict[str, str]:
    """Authorization header for the token; empty when unauthenticated."""
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


def store_bytes_request(upload: UploadRequest, token: str) -> GatewayRequest:
    headers = auth_headers(token)
    headers["Content-Type"] = upload.content_type
    headers[HEADER_FILE_PATH] = upload.key
    headers[HEADER_SOURCE_SERVICE] = upload.effective_source_service
    headers[HEADER_ORG_ID] = upload.org_id or ""
    if upload.reference_id is not None:
        headers[HEADER_REFERENCE_ID] = upload.reference_id
    if upload.original_filename is not None:
        headers[HEADER_ORIGINAL_FILENAME] = upload.original_filename
    return GatewayRequest("POST", STORE_BYTES_PATH, headers=headers, content=upload.data)


def presigned_url_request(req: PresignedUrlRequest, token: str) -> GatewayRequest:
    return GatewayRequest(
        "GET",
        PRESIGNED_URL_PATH,
        params={"key": req.key, "expiry": req.expiry_seconds},
        headers=auth_headers(token),
    )


def exists_request(key: str, token: str) -> GatewayRequest:
    return GatewayRequest("HEAD", EXISTS_PATH, params={"key": key}, headers=auth_headers(token))


def size_request(key: str, token: str) -> GatewayRequest:
    return GatewayRequest("GET", SIZE_PATH, params={"key": key}, headers=auth_headers(token))


def delete_request(key: str, token: str) -> GatewayRequest:
    return GatewayRequest("DELETE", BY_KEY_PATH, params={"key": key}, headers=auth_headers(token))


def download_request(key: str, token: str) -> GatewayRequest:
    return GatewayRequest("GET", DOWNLOAD_PATH, params={"key": key}, headers=auth_headers(token))


def existence_from_status(status_code: int) -> ExistenceStatus:
    """Map an exists-endpoint status code to PRESENT / ABSENT / INDETERMINATE."""
    if 200 <= status_code < 300:
        return ExistenceStatus.PRESENT
    if status_code in (404, 410):
        return ExistenceStatus.ABSENT
    return ExistenceStatus.INDETERMINATE


def read_upload_source(stream: BinaryIO, content_length: int | None, key: str) -> bytes:
    """Drain an upload source into memory.

    Raises GatewayStreamReadError (chained) if reading fails, the source is
    non-blocking and has nothing to give, or a non-negative content_length
    does not match the number of bytes read.
    """
    try:
        raw = stream.read()
    except Exception as e:
        raise GatewayStreamReadError(key, str(e) or e.__class__.__name__) from e
    if raw is None:
        raise GatewayStreamReadError(key, "stream returned no data")
    try:
        data = bytes(raw)
    except TypeError as e:
        # text-mode sources yield str
        raise GatewayStreamReadError(
            key, f"stream yielded {type(raw).__name__}, expected bytes"
        ) from e
    if content_length is not None and content_length >= 0 and len(data) != content_length:
        raise GatewayStreamReadError(
            key, f"expected {content_length} bytes, read {len(data)}"
        )
    return data
