"""Domain layer: request value objects and SDK exceptions.

No dependencies on the HTTP transport.
"""

from marketplace_sdk.domain.exceptions import PlatformSDKException, ValidationException
from marketplace_sdk.domain.value_objects import (
    ExistenceStatus,
    PresignedUrlRequest,
    UploadRequest,
)

__all__ = [
    "PlatformSDKException",
    "ValidationException",
    "ExistenceStatus",
    "PresignedUrlRequest",
    "UploadRequest",
]
