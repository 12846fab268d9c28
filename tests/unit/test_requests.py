"""Tests for files-proxy request building and upload source draining."""

import io

import pytest

from marketplace_sdk.domain.value_objects import (
    ExistenceStatus,
    PresignedUrlRequest,
    UploadRequest,
)
from marketplace_sdk.infrastructure.exceptions import GatewayStreamReadError
from marketplace_sdk.infrastructure.gateway._requests import (
    auth_headers,
    delete_request,
    download_request,
    existence_from_status,
    exists_request,
    presigned_url_request,
    read_upload_source,
    size_request,
    store_bytes_request,
)


def test_auth_headers_with_token() -> None:
    assert auth_headers("abc") == {"Authorization": "Bearer abc"}


def test_auth_headers_without_token() -> None:
    assert auth_headers("") == {}


def test_store_bytes_request() -> None:
    upload = UploadRequest(
        data=b"d", content_type="video/mp4", key="k", org_id=None, reference_id="r"
    )
    req = store_bytes_request(upload, "tok")
    assert req.method == "POST"
    assert req.path == "/api/files-proxy/store-bytes"
    assert req.content == b"d"
    assert req.headers == {
        "Authorization": "Bearer tok",
        "Content-Type": "video/mp4",
        "X-File-Path": "k",
        "X-Source-Service": "unknown",
        "X-Org-Id": "",
        "X-Reference-Id": "r",
    }


def test_empty_string_metadata_is_still_sent() -> None:
    """Only None omits optional headers; an empty string is a present value."""
    upload = UploadRequest(data=b"d", content_type="t/p", key="k", original_filename="")
    assert store_bytes_request(upload, "").headers["X-Original-Filename"] == ""


@pytest.mark.parametrize(
    "build, method, path",
    [
        (exists_request, "HEAD", "/api/files-proxy/by-key/exists"),
        (size_request, "GET", "/api/files-proxy/by-key/size"),
        (delete_request, "DELETE", "/api/files-proxy/by-key"),
        (download_request, "GET", "/api/files-proxy/by-key/download"),
    ],
)
def test_by_key_requests(build, method: str, path: str) -> None:
    req = build("a/b.txt", "tok")
    assert (req.method, req.path) == (method, path)
    assert req.params == {"key": "a/b.txt"}
    assert req.headers == {"Authorization": "Bearer tok"}
    assert req.content is None


def test_presigned_url_request() -> None:
    req = presigned_url_request(PresignedUrlRequest(key="k", expiry_seconds=900), "tok")
    assert req.path == "/api/files-proxy/by-key/presigned-url"
    assert req.params == {"key": "k", "expiry": 900}


@pytest.mark.parametrize(
    "status, expected",
    [
        (200, ExistenceStatus.PRESENT),
        (204, ExistenceStatus.PRESENT),
        (404, ExistenceStatus.ABSENT),
        (410, ExistenceStatus.ABSENT),
        (401, ExistenceStatus.INDETERMINATE),
        (500, ExistenceStatus.INDETERMINATE),
    ],
)
def test_existence_from_status(status: int, expected: ExistenceStatus) -> None:
    assert existence_from_status(status) is expected


class TestReadUploadSource:
    def test_reads_all(self) -> None:
        assert read_upload_source(io.BytesIO(b"abc"), 3, "k") == b"abc"

    def test_bytearray_normalized(self) -> None:
        class _Src:
            def read(self) -> bytearray:
                return bytearray(b"xy")

        assert read_upload_source(_Src(), None, "k") == b"xy"

    def test_none_from_nonblocking_source(self) -> None:
        class _Src:
            def read(self) -> None:
                return None

        with pytest.raises(GatewayStreamReadError, match="k"):
            read_upload_source(_Src(), None, "k")

    def test_length_mismatch(self) -> None:
        with pytest.raises(GatewayStreamReadError) as exc_info:
            read_upload_source(io.BytesIO(b"abc"), 4, "k")
        assert exc_info.value.details["reason"] == "expected 4 bytes, read 3"

    def test_read_error_chained(self) -> None:
        class _Src:
            def read(self) -> bytes:
                raise ValueError("I/O operation on closed file")

        with pytest.raises(GatewayStreamReadError) as exc_info:
            read_upload_source(_Src(), None, "k")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_text_mode_source_wrapped(self) -> None:
        with pytest.raises(GatewayStreamReadError, match="notes.txt") as exc_info:
            read_upload_source(io.StringIO("plain text"), None, "notes.txt")
        assert isinstance(exc_info.value.__cause__, TypeError)
        assert exc_info.value.details["reason"] == "stream yielded str, expected bytes"
