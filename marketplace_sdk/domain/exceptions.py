"""Domain exceptions for the platform SDK.

Errors raised by the SDK itself (invalid request values). Transport and
HTTP status errors from httpx are not wrapped and reach the caller as-is.
"""

from typing import Any


class PlatformSDKException(Exception):
    """Base exception for all SDK errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. key, field).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(PlatformSDKException):
    """Raised when a request value is invalid (e.g. empty key, expiry <= 0)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)
