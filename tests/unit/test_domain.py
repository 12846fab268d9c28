"""Tests for request value objects and SDK exceptions."""

import pytest

from marketplace_sdk.domain.exceptions import PlatformSDKException, ValidationException
from marketplace_sdk.domain.value_objects import PresignedUrlRequest, UploadRequest
from marketplace_sdk.infrastructure.exceptions import (
    GatewayException,
    GatewayNotConfiguredError,
    GatewayResponseError,
    GatewayStreamReadError,
)


class TestUploadRequest:
    def test_source_service_defaults_to_unknown(self) -> None:
        req = UploadRequest(data=b"x", content_type="text/plain", key="a")
        assert req.effective_source_service == "unknown"

    def test_explicit_source_service(self) -> None:
        req = UploadRequest(data=b"x", content_type="text/plain", key="a", source_service="billing")
        assert req.effective_source_service == "billing"

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            UploadRequest(data=b"x", content_type="text/plain", key="")
        assert exc_info.value.details == {"field": "key"}

    def test_empty_content_type_rejected(self) -> None:
        with pytest.raises(ValidationException, match="Content type"):
            UploadRequest(data=b"x", content_type="", key="a")

    def test_immutable(self) -> None:
        req = UploadRequest(data=b"x", content_type="text/plain", key="a")
        with pytest.raises(AttributeError):
            req.key = "b"  # type: ignore[misc]


class TestPresignedUrlRequest:
    def test_valid(self) -> None:
        assert PresignedUrlRequest(key="a", expiry_seconds=1).expiry_seconds == 1

    def test_zero_expiry_rejected(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            PresignedUrlRequest(key="a", expiry_seconds=0)
        assert exc_info.value.error_code == "VALIDATION_ERROR"
        assert exc_info.value.details == {"field": "expiry_seconds"}


def test_base_exception_default_error_code() -> None:
    exc = PlatformSDKException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "PlatformSDKException"
    assert exc.details == {}


def test_stream_read_error() -> None:
    exc = GatewayStreamReadError("docs/a.txt", "boom")
    assert isinstance(exc, GatewayException)
    assert exc.error_code == "GATEWAY_STREAM_READ_ERROR"
    assert exc.message == "Failed to upload stream via platform: docs/a.txt"
    assert exc.details == {"key": "docs/a.txt", "reason": "boom"}


def test_response_error() -> None:
    exc = GatewayResponseError("/api/files-proxy/by-key/size", "bad")
    assert exc.error_code == "GATEWAY_RESPONSE_ERROR"
    assert exc.details["path"] == "/api/files-proxy/by-key/size"


def test_not_configured_error() -> None:
    exc = GatewayNotConfiguredError()
    assert exc.error_code == "GATEWAY_NOT_CONFIGURED"
    assert "init_files_client" in exc.message
