"""Request value objects for gateway file operations.

Immutable, self-validating; built once per call and discarded afterwards.
"""

from dataclasses import dataclass
from enum import Enum

from marketplace_sdk.core.constants import DEFAULT_SOURCE_SERVICE
from marketplace_sdk.domain.exceptions import ValidationException


def require_key(key: str) -> None:
    """Raise ValidationException unless key is a non-empty string."""
    if not key:
        raise ValidationException("Storage key must be a non-empty string", field="key")


@dataclass(frozen=True)
class UploadRequest:
    """Bytes to store under a key, plus the metadata sent as X-* headers."""

    data: bytes
    content_type: str
    key: str
    org_id: str | None = None
    source_service: str | None = None
    reference_id: str | None = None
    original_filename: str | None = None

    def __post_init__(self) -> None:
        require_key(self.key)
        if not self.content_type:
            raise ValidationException(
                "Content type must be a non-empty string", field="content_type"
            )

    @property
    def effective_source_service(self) -> str:
        return self.source_service or DEFAULT_SOURCE_SERVICE


@dataclass(frozen=True)
class PresignedUrlRequest:
    """Key and lifetime (seconds) of a presigned download URL."""

    key: str
    expiry_seconds: int

    def __post_init__(self) -> None:
        require_key(self.key)
        if self.expiry_seconds <= 0:
            raise ValidationException(
                "Presigned URL expiry must be a positive number of seconds",
                field="expiry_seconds",
            )


class ExistenceStatus(str, Enum):
    """Outcome of an existence check that keeps 'could not determine' apart."""

    PRESENT = "present"
    ABSENT = "absent"
    INDETERMINATE = "indeterminate"
